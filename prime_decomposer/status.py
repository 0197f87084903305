"""Çalıştırma raporu - tüm worker'lar bittikten sonra"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .core.enums import WorkerMode
from .task.result import WorkerSummary


@dataclass
class RunReport:
    """
    Run raporu - basit

    Coordinator.run() bu sınıfı döndürür. Başarısız worker'lar ancak
    tüm worker'lar beklendikten sonra raporlanır.
    """
    mode: WorkerMode
    worker_count: int
    tasks_per_worker: int
    start_value: int
    summaries: List[WorkerSummary] = field(default_factory=list)
    wall_time_s: float = 0.0

    @property
    def failed_workers(self) -> List[WorkerSummary]:
        return [s for s in self.summaries if s.is_failed]

    @property
    def is_success(self) -> bool:
        return len(self.summaries) == self.worker_count and not self.failed_workers

    @property
    def health(self) -> str:
        return "healthy" if self.is_success else "unhealthy"

    @property
    def total_elapsed_us(self) -> int:
        return sum(s.total_elapsed_us for s in self.summaries)

    @property
    def numbers_processed(self) -> int:
        return sum(s.numbers_processed for s in self.summaries)

    @property
    def exit_status(self) -> int:
        """0 = tüm worker'lar tamamlandı, 1 = en az bir worker başarısız"""
        return 0 if self.is_success else 1

    def to_dict(self) -> Dict[str, Any]:
        """Dict'e dönüştür"""
        return {
            "mode": self.mode.value,
            "worker_count": self.worker_count,
            "tasks_per_worker": self.tasks_per_worker,
            "start_value": str(self.start_value),
            "health": self.health,
            "wall_time_s": self.wall_time_s,
            "total_elapsed_us": self.total_elapsed_us,
            "numbers_processed": self.numbers_processed,
            "summaries": [s.to_dict() for s in self.summaries],
        }
