"""
Çalıştırma Yapılandırması

Bu modül, bir factorization çalıştırmasının tüm ayarlarını içerir.
Tek bir config sınıfı ile tüm ayarlar yönetilir.

Kullanım:
    config = RunConfig(
        worker_count=3,
        tasks_per_worker=2,
        start_value=10,
        output_path="out.log",
        mode=WorkerMode.THREAD
    )
    report = Coordinator(config).run()
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
import multiprocessing

from ..core.enums import WorkerMode
from ..core.exceptions import ConfigurationError

# Bir sayı için izin verilen varsayılan asal çarpan sayısı
MAX_FACTORS = 1024


@dataclass
class RunConfig:
    """
    Çalıştırma yapılandırması - Tüm ayarlar burada

    - İş yükü: worker sayısı, worker başına görev sayısı, başlangıç sayısı
    - Çıktı: log dosyasının yolu (append-only)
    - Worker ayarları: mod (process/thread), multiprocessing start method
    - Genel ayarlar: factor kapasitesi, log level

    Toplam işlenecek sayı adedi = worker_count * tasks_per_worker.
    """
    # İş yükü
    worker_count: int
    tasks_per_worker: int
    start_value: int
    output_path: str

    # Worker ayarları
    mode: Union[WorkerMode, str] = WorkerMode.PROCESS
    start_method: Optional[str] = None  # None = platform varsayılanı

    # Genel ayarlar
    max_factors: Optional[int] = MAX_FACTORS  # None = sınırsız
    log_level: str = "INFO"

    def __post_init__(self):
        """Değerleri doğrula ve normalize et"""
        if isinstance(self.mode, str):
            try:
                self.mode = WorkerMode(self.mode.lower())
            except ValueError:
                raise ConfigurationError(f"Geçersiz mode: {self.mode}", code="CFG006")
        if not isinstance(self.mode, WorkerMode):
            raise ConfigurationError(f"Geçersiz mode: {self.mode!r}", code="CFG006")

        # Validasyon
        if not isinstance(self.worker_count, int) or self.worker_count < 1:
            raise ConfigurationError("worker_count en az 1 olmalı", code="CFG001")
        if not isinstance(self.tasks_per_worker, int) or self.tasks_per_worker < 1:
            raise ConfigurationError("tasks_per_worker en az 1 olmalı", code="CFG002")
        if not isinstance(self.start_value, int) or self.start_value < 1:
            raise ConfigurationError("start_value en az 1 olmalı", code="CFG003")
        if not self.output_path:
            raise ConfigurationError("output_path belirtilmeli (-w <filename>)", code="CFG004")
        if self.max_factors is not None and (not isinstance(self.max_factors, int) or self.max_factors < 1):
            raise ConfigurationError("max_factors en az 1 olmalı", code="CFG005")

        if self.start_method is not None:
            available = multiprocessing.get_all_start_methods()
            if self.start_method not in available:
                raise ConfigurationError(
                    f"Geçersiz start_method: {self.start_method} (mevcut: {', '.join(available)})",
                    code="CFG007"
                )

        # Log level kontrolü
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if not isinstance(self.log_level, str) or self.log_level.upper() not in valid_levels:
            raise ConfigurationError(f"Geçersiz log_level: {self.log_level}", code="CFG008")

        self.log_level = self.log_level.upper()
        self.output_path = str(self.output_path)

    @property
    def total_tasks(self) -> int:
        """Toplam sayı adedi (W x T)"""
        return self.worker_count * self.tasks_per_worker

    def to_dict(self) -> Dict[str, Any]:
        """Dict'e dönüştür"""
        return {
            "worker_count": self.worker_count,
            "tasks_per_worker": self.tasks_per_worker,
            "start_value": str(self.start_value),
            "output_path": self.output_path,
            "mode": self.mode.value,
            "start_method": self.start_method,
            "max_factors": self.max_factors,
            "log_level": self.log_level,
        }
