"""
Exception Hiyerarşisi

Bu modül, sistemde kullanılan özel exception'ları içerir.
Tüm exception'lar DecomposerError'dan türer.

Hiyerarşi:
    DecomposerError (base)
    ├── ConfigurationError (geçersiz argüman / yapılandırma)
    ├── SpawnError (worker oluşturulamadı)
    ├── AllocationError (factor listesi kapasiteyi aştı)
    └── WorkerError (worker process veya thread hataları)
"""

from typing import Optional


class DecomposerError(Exception):
    """
    Decomposer Hataları - Base exception

    Tüm sistem hataları bu sınıftan türer.
    Hata mesajı ve kod içerir.
    """
    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code  # Hata kodu (örn: "CFG001")

    def __str__(self):
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(DecomposerError):
    """
    Yapılandırma Hataları

    Eksik veya geçersiz komut satırı argümanları, geçersiz config değerleri.
    Hiçbir iş başlamadan önce fırlatılır.
    """
    pass


class SpawnError(DecomposerError):
    """
    Worker Oluşturma Hataları

    Process veya thread başlatılamadığında (kaynak tükenmesi) fırlatılır.
    Başlatılmış olan worker'lar yine de beklenir.
    """
    def __init__(self, message: str, code: Optional[str] = None, started: int = 0):
        super().__init__(message, code)
        self.started = started  # Hata anına kadar başlatılan worker sayısı


class AllocationError(DecomposerError):
    """
    Kapasite Hataları

    Bir sayının asal çarpan listesi izin verilen kapasiteyi aştığında oluşur.
    Sadece ilgili worker için ölümcüldür.
    """
    def __init__(self, message: str, code: Optional[str] = None, number: Optional[int] = None):
        super().__init__(message, code)
        self.number = number  # Hangi sayıda taştı


class WorkerError(DecomposerError):
    """
    Worker Hataları

    Worker process veya thread işlemleri sırasında oluşan hatalar.
    """
    def __init__(self, message: str, code: Optional[str] = None, worker_index: Optional[int] = None):
        super().__init__(message, code)
        self.worker_index = worker_index
