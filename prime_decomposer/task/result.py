"""
Result (Sonuç) Sınıfları

Bu modül, factorization çıktılarını içerir:
- FactorResult: Tek bir sayının asal çarpanları ve süresi
- WorkerSummary: Bir worker'ın toplam süresi ve durumu

Her ikisi de log dosyasına yazılan satırı kendisi formatlar.

Kullanım:
    result = FactorResult(number=60, factors=[2, 2, 3, 5], elapsed_us=12)
    sink.write_record(result)   # "60 = 2 * 2 * 3 * 5 ...        12 usec"
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional
import sys

from ..core.enums import WorkerMode, WorkerStatus

# Kayıt satırı sütun genişlikleri
EXPRESSION_WIDTH = 50
ELAPSED_WIDTH = 10


@contextmanager
def unbounded_int_digits() -> Iterator[None]:
    """
    Blok boyunca int <-> str dönüşümündeki basamak sınırını kaldırır

    Çıkışta önceki sınır geri yüklenir. Sınırı olmayan yorumlayıcılarda
    hiçbir şey yapmaz.
    """
    if not hasattr(sys, "set_int_max_str_digits"):
        yield
        return

    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


@dataclass
class FactorResult:
    """
    Tek sayı sonucu

    - number: Factorize edilen sayı
    - factors: Azalmayan sırada asal çarpanlar (1 için boş)
    - elapsed_us: Factorization süresi (mikrosaniye)
    """
    number: int
    factors: List[int]
    elapsed_us: int

    def product(self) -> int:
        """Çarpanların çarpımı (boş liste için 1)"""
        result = 1
        for factor in self.factors:
            result *= factor
        return result

    def expression(self) -> str:
        """Örn: "60 = 2 * 2 * 3 * 5" (1 için boş çarpım: "1 = 1")"""
        rhs = " * ".join(str(f) for f in self.factors) if self.factors else "1"
        return f"{self.number} = {rhs}"

    def format_line(self) -> str:
        """Log satırı: sola yaslı ifade + sağa yaslı süre"""
        return f"{self.expression():<{EXPRESSION_WIDTH}} {self.elapsed_us:>{ELAPSED_WIDTH}} usec\n"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": str(self.number),
            "factors": [str(f) for f in self.factors],
            "elapsed_us": self.elapsed_us,
        }


@dataclass
class WorkerSummary:
    """
    Worker özeti

    Bir özet şunları içerir:
    - worker_index / identity: Atama sırası ve kimlik (process id veya thread index)
    - Status: COMPLETED veya FAILED
    - total_elapsed_us: İşlenen sayıların toplam süresi
    - metrics: psutil ile ölçülen CPU süresi ve bellek
    - Error: Başarısız durumda hata mesajı

    Process modunda özet, multiprocessing.Queue üzerinden dict olarak taşınır.
    """
    worker_index: int
    identity: int
    mode: WorkerMode
    status: WorkerStatus
    total_elapsed_us: int = 0
    numbers_processed: int = 0
    error: Optional[str] = None
    metrics: Dict[str, float] = field(default_factory=dict)
    started_at: Optional[datetime] = None
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_success(self) -> bool:
        return self.status == WorkerStatus.COMPLETED

    @property
    def is_failed(self) -> bool:
        return self.status == WorkerStatus.FAILED

    @property
    def duration(self) -> Optional[float]:
        """Worker'ın duvar saati süresi (saniye)"""
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None

    @classmethod
    def success(
        cls,
        worker_index: int,
        identity: int,
        mode: WorkerMode,
        total_elapsed_us: int,
        numbers_processed: int,
        metrics: Optional[Dict[str, float]] = None,
        started_at: Optional[datetime] = None
    ) -> "WorkerSummary":
        """Başarılı özet oluşturur"""
        return cls(
            worker_index=worker_index,
            identity=identity,
            mode=mode,
            status=WorkerStatus.COMPLETED,
            total_elapsed_us=total_elapsed_us,
            numbers_processed=numbers_processed,
            metrics=metrics or {},
            started_at=started_at,
        )

    @classmethod
    def failed(
        cls,
        worker_index: int,
        identity: int,
        mode: WorkerMode,
        error: str,
        total_elapsed_us: int = 0,
        numbers_processed: int = 0,
        started_at: Optional[datetime] = None
    ) -> "WorkerSummary":
        """Başarısız özet oluşturur"""
        return cls(
            worker_index=worker_index,
            identity=identity,
            mode=mode,
            status=WorkerStatus.FAILED,
            total_elapsed_us=total_elapsed_us,
            numbers_processed=numbers_processed,
            error=error,
            started_at=started_at,
        )

    def format_line(self) -> str:
        """Örn: "Process ID: 4242, time used: 1234 usec" """
        label = "Process ID" if self.mode == WorkerMode.PROCESS else "Thread ID"
        return f"{label}: {self.identity}, time used: {self.total_elapsed_us} usec\n"

    def to_dict(self) -> Dict[str, Any]:
        """Dict'e dönüştür (queue için)"""
        return {
            "worker_index": self.worker_index,
            "identity": self.identity,
            "mode": self.mode.value,
            "status": self.status.value,
            "total_elapsed_us": self.total_elapsed_us,
            "numbers_processed": self.numbers_processed,
            "error": self.error,
            "metrics": dict(self.metrics),
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkerSummary":
        """Dict'ten oluştur"""
        started_at = None
        completed_at = datetime.now(timezone.utc)
        if data.get("started_at"):
            started_at = datetime.fromisoformat(data["started_at"])
        if data.get("completed_at"):
            completed_at = datetime.fromisoformat(data["completed_at"])

        return cls(
            worker_index=data["worker_index"],
            identity=data.get("identity", data["worker_index"]),
            mode=WorkerMode(data.get("mode", "process")),
            status=WorkerStatus(data.get("status", "failed")),
            total_elapsed_us=data.get("total_elapsed_us", 0),
            numbers_processed=data.get("numbers_processed", 0),
            error=data.get("error"),
            metrics=data.get("metrics") or {},
            started_at=started_at,
            completed_at=completed_at,
        )
