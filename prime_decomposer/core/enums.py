"""
Core Enums Modülü

Bu modül, sistemde kullanılan enum'ları içerir:
- WorkerMode: Eşzamanlılık modeli (PROCESS veya THREAD)
- WorkerStatus: Worker durumu (PENDING, RUNNING, COMPLETED, FAILED)
"""

from enum import Enum


class WorkerMode(Enum):
    """
    Worker Modu

    Aynı iş yükünün hangi eşzamanlılık modeliyle çalışacağını belirtir.

    - PROCESS: Her worker ayrı bir OS process'i (izole bellek)
    - THREAD: Her worker aynı process içinde bir thread (paylaşılan bellek)
    """
    PROCESS = "process"  # İzole bellek, ayrı file handle
    THREAD = "thread"    # Paylaşılan bellek, tek file handle


class WorkerStatus(Enum):
    """
    Worker Durumu

    - PENDING: Oluşturuldu, henüz başlatılmadı
    - RUNNING: Çalışıyor
    - COMPLETED: Atanan tüm sayıları işledi
    - FAILED: Hata ile sonlandı
    """
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
