"""
Worker Runner Modülü

İki worker varyantının (process ve thread) ortak arayüzü ve ortak algoritması.
Decomposer tek yerde tanımlıdır, varyantlar sadece eşzamanlılık modelini değiştirir.

Kullanım:
    summary = execute_assignment(assignment, numbers, decomposer, sink,
                                 identity=0, mode=WorkerMode.THREAD,
                                 sample_metrics=sample_thread_metrics)
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Sequence

from ..core.enums import WorkerMode, WorkerStatus
from ..core.exceptions import WorkerError
from ..decompose.decomposer import Decomposer
from ..task.assignment import Assignment
from ..task.result import WorkerSummary


def execute_assignment(
    assignment: Assignment,
    numbers: Sequence[int],
    decomposer: Decomposer,
    sink: Any,
    identity: int,
    mode: WorkerMode,
    sample_metrics: Optional[Callable[[], Dict[str, float]]] = None
) -> WorkerSummary:
    """
    Bir worker'ın tüm işi

    Atanan dilimi sırayla işler, her sayı için Decomposer'ı çalıştırır,
    süreleri toplar ve sonunda sink'e bir özet satırı ekler.

    Args:
        assignment: Worker'ın dilimi
        numbers: Dilimdeki sayılar (assignment.length adet)
        decomposer: Sink'e bağlı Decomposer
        sink: Özet satırının yazılacağı sink
        identity: Process id veya thread index
        mode: PROCESS veya THREAD
        sample_metrics: Bitişte kaynak ölçümü yapan fonksiyon (opsiyonel)

    Returns:
        WorkerSummary: Başarılı özet

    Raises:
        WorkerError: Sayı adedi assignment ile uyuşmuyorsa
        Decomposer veya sink hataları olduğu gibi yukarı iletilir.
    """
    if len(numbers) != assignment.length:
        raise WorkerError(
            f"Worker {assignment.worker_index}: {assignment.length} sayı bekleniyordu, "
            f"{len(numbers)} geldi",
            code="WRK001",
            worker_index=assignment.worker_index
        )

    started_at = datetime.now(timezone.utc)
    total_elapsed_us = 0

    for n in numbers:
        result = decomposer.run(n)
        total_elapsed_us += result.elapsed_us

    summary = WorkerSummary.success(
        worker_index=assignment.worker_index,
        identity=identity,
        mode=mode,
        total_elapsed_us=total_elapsed_us,
        numbers_processed=len(numbers),
        metrics=sample_metrics() if sample_metrics else None,
        started_at=started_at,
    )
    sink.write_record(summary)
    return summary


class WorkerRunner:
    """
    Worker Runner - ortak arayüz

    Alt sınıflar (ThreadWorker, ProcessWorker) start/join/is_alive
    metodlarını kendi eşzamanlılık modeline göre uygular.
    Coordinator varyantı bilmeden bu arayüzü kullanır.
    """

    mode: WorkerMode = WorkerMode.THREAD

    def __init__(
        self,
        assignment: Assignment,
        numbers: Sequence[int],
        sink: Any,
        max_factors: Optional[int] = None
    ):
        self._assignment = assignment
        self._numbers = tuple(numbers)
        self._sink = sink
        self._max_factors = max_factors
        self._summary: Optional[WorkerSummary] = None
        self._status = WorkerStatus.PENDING
        self._logger = logging.getLogger("worker")

    @property
    def worker_index(self) -> int:
        return self._assignment.worker_index

    @property
    def assignment(self) -> Assignment:
        return self._assignment

    @property
    def status(self) -> WorkerStatus:
        return self._status

    @property
    def summary(self) -> Optional[WorkerSummary]:
        """join() sonrası worker özeti"""
        return self._summary

    @property
    def failed(self) -> bool:
        return self._summary is not None and self._summary.is_failed

    def start(self):
        """Worker'ı başlat"""
        raise NotImplementedError

    def join(self):
        """Worker bitene kadar bekle"""
        raise NotImplementedError

    def is_alive(self) -> bool:
        raise NotImplementedError

    def release(self):
        """Worker'a verilen sayıları ve handle'ları bırak"""
        self._numbers = ()
