"""
Thread Worker Modülü

Parent process'in adres alanını paylaşan worker.
Tüm thread'ler tek bir sink handle'ına yazar; yazma sırası sink'in
threading.Lock'u ile korunur.

Kullanım:
    worker = ThreadWorker(assignment, numbers, shared_sink, max_factors=1024)
    worker.start()
    worker.join()
    print(worker.summary.format_line())
"""

import threading
from typing import Optional, Sequence

from ..core.enums import WorkerMode, WorkerStatus
from ..core.exceptions import SpawnError
from ..core.metrics import sample_thread_metrics
from ..decompose.decomposer import Decomposer
from ..sink.file_sink import SharedFileSink
from ..task.assignment import Assignment
from ..task.result import WorkerSummary
from .runner import WorkerRunner, execute_assignment


class ThreadWorker(WorkerRunner):
    """
    Thread Worker

    Kimlik olarak worker index'i kullanılır. Thread içindeki hatalar
    yakalanır ve FAILED özet olarak saklanır; diğer thread'ler etkilenmez.
    """

    mode = WorkerMode.THREAD

    def __init__(
        self,
        assignment: Assignment,
        numbers: Sequence[int],
        sink: SharedFileSink,
        max_factors: Optional[int] = None
    ):
        super().__init__(assignment, numbers, sink, max_factors)
        self._thread: Optional[threading.Thread] = None

    def start(self):
        """Thread'i başlat"""
        thread = threading.Thread(
            target=self._run_thread,
            name=f"thread-worker-{self.worker_index}"
        )
        try:
            thread.start()
        except RuntimeError as e:
            # "can't start new thread" - kaynak tükenmesi
            raise SpawnError(
                f"Thread {self.worker_index} başlatılamadı: {e}",
                code="SPN002"
            ) from e
        self._thread = thread
        self._status = WorkerStatus.RUNNING

    def join(self):
        """Thread'in bitmesini bekle"""
        if self._thread is not None:
            self._thread.join()
        if self._summary is not None:
            self._status = self._summary.status

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run_thread(self):
        """Thread içinde çalışan fonksiyon"""
        identity = self.worker_index
        decomposer = Decomposer(self._sink, self._max_factors)

        try:
            self._summary = execute_assignment(
                self._assignment,
                self._numbers,
                decomposer,
                self._sink,
                identity=identity,
                mode=self.mode,
                sample_metrics=sample_thread_metrics
            )
        except Exception as e:
            self._logger.exception(f"Thread {identity} başarısız: {e}")
            self._summary = WorkerSummary.failed(
                worker_index=self.worker_index,
                identity=identity,
                mode=self.mode,
                error=str(e)
            )

    def release(self):
        super().release()
        self._thread = None
