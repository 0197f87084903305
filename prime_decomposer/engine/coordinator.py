"""
Coordinator Sınıfı

Bu modül, bir factorization çalıştırmasının merkezi kontrol noktasıdır.
Aralığı oluşturur, worker'lara dağıtır, hepsini başlatır ve hepsinin
bitmesini bekler.

Akış:
    Coordinator -> assign() -> build_range() -> N x WorkerRunner -> Decomposer -> sink

Kullanım:
    report = Coordinator(config).run()
    # veya
    exit_status = run(3, 2, 10, "out.log", mode=WorkerMode.THREAD)
"""

import logging
import multiprocessing
import time
from typing import List, Optional, Union

from ..config import RunConfig, MAX_FACTORS
from ..core.enums import WorkerMode
from ..core.exceptions import SpawnError
from ..queue.summary_queue import SummaryQueue
from ..sink.file_sink import FileSink, SharedFileSink, ProcessFileSink
from ..status import RunReport
from ..task.assignment import Assignment, assign
from ..task.result import unbounded_int_digits
from ..task.target_range import TargetRange, build_range
from ..worker.runner import WorkerRunner
from ..worker.thread import ThreadWorker
from ..worker.process import ProcessWorker

# Özet kuyruğu bekleme aralığı (saniye)
SUMMARY_POLL_TIMEOUT = 0.1


class Coordinator:
    """
    Coordinator - worker yaşam döngüsü

    Bu sınıf:
    - Target Range'i bir kez oluşturur (sonra sadece okunur)
    - Statik atamaları hesaplar
    - Seçilen varyantta tüm worker'ları hemen başlatır (kuyruk yok)
    - Tüm worker'lar bitene kadar bekler, erken iptal yapmaz
    - Bittiğinde aralığı, atamaları ve worker handle'larını bırakır

    Zaman aşımı yoktur: çok büyük bir asal sayıda takılan worker
    Coordinator'ı süresiz bekletir.
    """

    def __init__(self, config: RunConfig):
        """
        Args:
            config: Çalıştırma yapılandırması (doğrulanmış)
        """
        self._config = config

        # Logger: Sistem mesajları için
        logging.basicConfig(level=getattr(logging, self._config.log_level))
        self._logger = logging.getLogger("coordinator")

        self._target_range: Optional[TargetRange] = None
        self._assignments: List[Assignment] = []
        self._runners: List[WorkerRunner] = []
        self._sink: Optional[FileSink] = None
        self._summary_queue: Optional[SummaryQueue] = None
        self._context = None

    @property
    def config(self) -> RunConfig:
        return self._config

    def run(self) -> RunReport:
        """
        Çalıştırmayı baştan sona yürütür

        Returns:
            RunReport: Her worker için özet

        Raises:
            SpawnError: Bir worker başlatılamazsa (başlamış olanlar beklendikten sonra)
        """
        with unbounded_int_digits():
            return self._run()

    def _run(self) -> RunReport:
        config = self._config
        started = time.perf_counter()

        self._target_range = build_range(config.start_value, config.total_tasks)
        self._assignments = assign(config.worker_count, config.tasks_per_worker)
        self._sink = self._create_sink()

        self._logger.info(
            f"{config.worker_count} {config.mode.value} worker x {config.tasks_per_worker} görev, "
            f"başlangıç={config.start_value}, çıktı={config.output_path}"
        )

        spawn_error: Optional[SpawnError] = None
        try:
            try:
                self._spawn_all()
            except SpawnError as e:
                spawn_error = e
                self._logger.error(f"{e} - başlatılan {len(self._runners)} worker bekleniyor")

            self._wait_all()

            report = RunReport(
                mode=config.mode,
                worker_count=config.worker_count,
                tasks_per_worker=config.tasks_per_worker,
                start_value=config.start_value,
                summaries=[r.summary for r in self._runners if r.summary is not None],
                wall_time_s=round(time.perf_counter() - started, 6),
            )
        finally:
            self._release()

        if spawn_error is not None:
            spawn_error.started = len(report.summaries)
            raise spawn_error

        for summary in report.failed_workers:
            self._logger.error(f"Worker {summary.worker_index} başarısız: {summary.error}")

        self._logger.info(
            f"Tamamlandı: {report.numbers_processed} sayı, "
            f"{len(report.failed_workers)} başarısız worker, {report.wall_time_s:.3f} saniye"
        )
        return report

    def _create_sink(self) -> FileSink:
        """Varyanta göre sink oluştur"""
        if self._config.mode == WorkerMode.THREAD:
            return SharedFileSink(self._config.output_path).open()

        self._context = multiprocessing.get_context(self._config.start_method)
        self._summary_queue = SummaryQueue(self._context)
        return ProcessFileSink(self._config.output_path, self._context.Lock())

    def _create_runner(self, assignment: Assignment) -> WorkerRunner:
        """Seçilen varyantta bir worker oluştur"""
        numbers = self._target_range.slice_for(assignment)

        if self._config.mode == WorkerMode.THREAD:
            return ThreadWorker(
                assignment,
                numbers,
                self._sink,
                max_factors=self._config.max_factors
            )

        return ProcessWorker(
            assignment,
            numbers,
            self._sink,
            max_factors=self._config.max_factors,
            summary_queue=self._summary_queue,
            context=self._context,
            log_level=self._config.log_level
        )

    def _spawn_all(self):
        """Tüm worker'ları başlat (ilk hatada dur)"""
        for assignment in self._assignments:
            runner = self._create_runner(assignment)
            runner.start()
            self._runners.append(runner)
            self._logger.debug(f"Worker {assignment.worker_index} başlatıldı")

    def _wait_all(self):
        """
        Tüm worker'ların bitmesini bekle

        Process modunda özetler beklerken kuyruktan toplanır; child'ın
        kuyruğa yazdığı veri okunmadan join edilmesi kilitlenmeye yol açabilir.
        """
        if self._summary_queue is not None:
            while any(r.is_alive() for r in self._runners):
                self._collect_summary(self._summary_queue.get(timeout=SUMMARY_POLL_TIMEOUT))
            for item in self._summary_queue.drain():
                self._collect_summary(item)

        for runner in self._runners:
            runner.join()
            summary = runner.summary
            if summary is not None and summary.is_success:
                self._logger.debug(summary.format_line().rstrip())

    def _collect_summary(self, item):
        if item is None:
            return
        for runner in self._runners:
            if runner.worker_index == item.get("worker_index") and isinstance(runner, ProcessWorker):
                runner.attach_summary(item)
                return
        self._logger.warning(f"Sahipsiz özet: {item}")

    def _release(self):
        """Aralığı, atamaları, worker handle'larını ve sink'i bırak"""
        for runner in self._runners:
            # _wait_all'a ulaşılmadan çıkıldıysa
            if runner.is_alive():
                runner.join()
            runner.release()
        self._runners = []
        self._assignments = []
        self._target_range = None

        if self._summary_queue is not None:
            self._summary_queue.close()
            self._summary_queue = None
        if self._sink is not None:
            self._sink.close()
            self._sink = None


def run(
    worker_count: int,
    tasks_per_worker: int,
    start_value: int,
    sink_path: str,
    mode: Union[WorkerMode, str] = WorkerMode.PROCESS,
    max_factors: Optional[int] = MAX_FACTORS,
    start_method: Optional[str] = None,
    log_level: str = "INFO"
) -> int:
    """
    Kısayol: yapılandır, çalıştır, exit status döndür

    Returns:
        int: 0 tüm worker'lar tamamlandıysa, 1 aksi halde

    Raises:
        ConfigurationError: Geçersiz argümanlar
        SpawnError: Worker başlatılamadı
    """
    config = RunConfig(
        worker_count=worker_count,
        tasks_per_worker=tasks_per_worker,
        start_value=start_value,
        output_path=sink_path,
        mode=mode,
        max_factors=max_factors,
        start_method=start_method,
        log_level=log_level,
    )
    return Coordinator(config).run().exit_status
