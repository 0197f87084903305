"""Worker Process - tek bir izole worker process"""

import logging
import os
import sys
from typing import Any, Dict, Optional, Sequence

from ..core.enums import WorkerMode, WorkerStatus
from ..core.exceptions import SpawnError
from ..core.metrics import sample_process_metrics
from ..decompose.decomposer import Decomposer
from ..queue.summary_queue import SummaryQueue
from ..sink.file_sink import ProcessFileSink
from ..task.assignment import Assignment
from ..task.result import WorkerSummary, unbounded_int_digits
from .runner import WorkerRunner, execute_assignment


class ProcessWorker(WorkerRunner):
    """
    Worker Process

    Child process kendi sayı kopyasını ve kendi append handle'ını kullanır.
    Spawn sonrası parent veya kardeşlerle bellek paylaşılmaz; tek ortak
    kaynak log dosyası (ve onun kilidi) ile özet kuyruğudur.
    """

    mode = WorkerMode.PROCESS

    def __init__(
        self,
        assignment: Assignment,
        numbers: Sequence[int],
        sink: ProcessFileSink,
        max_factors: Optional[int] = None,
        summary_queue: Optional[SummaryQueue] = None,
        context: Any = None,
        log_level: str = "INFO"
    ):
        super().__init__(assignment, numbers, sink, max_factors)
        self._summary_queue = summary_queue
        self._context = context
        self._log_level = log_level
        self._process = None

    def start(self):
        """Process'i başlat"""
        # Sadece atanan dilim child'a kopyalanır
        process = self._context.Process(
            target=ProcessWorker._run_process,
            args=(
                self._assignment,
                self._numbers,
                self._sink,
                self._max_factors,
                self._summary_queue,
                self._log_level
            ),
            name=f"process-worker-{self.worker_index}"
        )
        try:
            process.start()
        except Exception as e:
            # fork/spawn başarısız (kaynak tükenmesi) veya argümanlar pickle edilemedi
            raise SpawnError(
                f"Process {self.worker_index} başlatılamadı: {e}",
                code="SPN001"
            ) from e
        self._process = process
        self._status = WorkerStatus.RUNNING

    def attach_summary(self, data: Dict[str, Any]):
        """Kuyruktan gelen özeti bu worker'a bağla"""
        self._summary = WorkerSummary.from_dict(data)

    def join(self):
        """
        Process'in bitmesini bekle

        Özet gelmediyse exit code'dan FAILED özet oluşturulur.
        """
        if self._process is None:
            return
        self._process.join()

        exitcode = self._process.exitcode
        if self._summary is None:
            self._summary = WorkerSummary.failed(
                worker_index=self.worker_index,
                identity=self._process.pid,
                mode=self.mode,
                error=f"Process özet göndermeden sonlandı (exit code {exitcode})"
            )
        elif exitcode != 0 and self._summary.is_success:
            self._summary = WorkerSummary.failed(
                worker_index=self.worker_index,
                identity=self._process.pid,
                mode=self.mode,
                error=f"Process exit code {exitcode}",
                total_elapsed_us=self._summary.total_elapsed_us,
                numbers_processed=self._summary.numbers_processed,
                started_at=self._summary.started_at
            )
        self._status = self._summary.status

    def is_alive(self) -> bool:
        return self._process is not None and self._process.is_alive()

    def release(self):
        super().release()
        if self._process is not None and not self._process.is_alive():
            self._process.close()
        self._process = None

    @staticmethod
    def _run_process(assignment, numbers, sink, max_factors, summary_queue, log_level):
        """Process içinde çalışan fonksiyon"""
        # Spawn ile başlayan child parent'ın logging ayarlarını görmez
        logging.basicConfig(level=getattr(logging, log_level))
        logger = logging.getLogger("worker")

        pid = os.getpid()
        sink.open()
        try:
            with unbounded_int_digits():
                decomposer = Decomposer(sink, max_factors)
                summary = execute_assignment(
                    assignment,
                    numbers,
                    decomposer,
                    sink,
                    identity=pid,
                    mode=WorkerMode.PROCESS,
                    sample_metrics=sample_process_metrics
                )
            if summary_queue is not None:
                summary_queue.put(summary.to_dict())
        except Exception as e:
            logger.error(f"Process {pid} (worker {assignment.worker_index}) başarısız: {e}")
            if summary_queue is not None:
                summary_queue.put(WorkerSummary.failed(
                    worker_index=assignment.worker_index,
                    identity=pid,
                    mode=WorkerMode.PROCESS,
                    error=str(e)
                ).to_dict())
            sys.exit(1)
        finally:
            sink.close()
