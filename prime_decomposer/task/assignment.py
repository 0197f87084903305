"""
Assignment (Atama) Modülü

Her worker'a Target Range içinden bitişik ve çakışmayan bir dilim atar.
Dağıtım statiktir: yalnızca worker sayısı ve görev sayısına bağlıdır,
çalışma sırasında yeniden dengeleme yapılmaz.

Kullanım:
    assignments = assign(worker_count=3, tasks_per_worker=2)
    # [Assignment(0, 0, 2), Assignment(1, 2, 2), Assignment(2, 4, 2)]
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class Assignment:
    """
    Bir worker'ın dilimi: (worker_index, offset, length)

    Tüm assignment'ların birleşimi Target Range'i boşluksuz ve
    çakışmasız kaplar.
    """
    worker_index: int
    offset: int
    length: int

    @property
    def stop(self) -> int:
        """Dilimin bitiş index'i (hariç)"""
        return self.offset + self.length

    def to_dict(self) -> Dict[str, Any]:
        return {
            "worker_index": self.worker_index,
            "offset": self.offset,
            "length": self.length,
        }


def assign(worker_count: int, tasks_per_worker: int) -> List[Assignment]:
    """
    Worker index'lerini bitişik alt aralıklara eşler

    Worker i: offset = i * tasks_per_worker, length = tasks_per_worker

    Args:
        worker_count: Worker sayısı (en az 1)
        tasks_per_worker: Worker başına sayı adedi (en az 1)

    Returns:
        List[Assignment]: worker_count adet assignment, index sırasıyla

    Raises:
        ConfigurationError: Değerlerden biri 1'den küçükse
    """
    if worker_count < 1:
        raise ConfigurationError("worker_count en az 1 olmalı", code="CFG001")
    if tasks_per_worker < 1:
        raise ConfigurationError("tasks_per_worker en az 1 olmalı", code="CFG002")

    return [
        Assignment(worker_index=i, offset=i * tasks_per_worker, length=tasks_per_worker)
        for i in range(worker_count)
    ]
