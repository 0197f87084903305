"""
Output Sink Modülü

Bu modül, tüm worker'ların sonuç yazdığı append-only log dosyasını yönetir.
Dosya hiçbir zaman truncate veya rotate edilmez.

Her kayıt tek bir kritik bölgede formatlanır, tek bir write() ile yazılır
ve flush edilir. Böylece başka bir worker'ın satırı araya giremez.

- SharedFileSink: Thread modu. Tek handle, threading.Lock ile korunur.
- ProcessFileSink: Process modu. Her child kendi append handle'ını açar,
  yazmalar multiprocessing.Lock ile sıraya girer.

Kullanım:
    with SharedFileSink("out.log") as sink:
        sink.write_record(result)
"""

import threading
from typing import Any, Optional, TextIO


class FileSink:
    """
    Append-only dosya sink'i - base sınıf

    Alt sınıflar sadece kilit tipini belirler.
    """

    def __init__(self, path: str, lock: Any):
        self._path = str(path)
        self._lock = lock
        self._handle: Optional[TextIO] = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._handle is not None and not self._handle.closed

    def open(self) -> "FileSink":
        """Dosyayı append modunda aç (zaten açıksa bir şey yapmaz)"""
        if not self.is_open:
            self._handle = open(self._path, "a", encoding="utf-8")
        return self

    def close(self):
        """Handle'ı kapat"""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def write_record(self, record: Any):
        """
        Kaydı atomik olarak ekler

        Format -> write -> flush adımları tek kritik bölgededir.

        Args:
            record: format_line() metodu olan bir kayıt (FactorResult, WorkerSummary)
        """
        with self._lock:
            line = record.format_line()
            if not self.is_open:
                self.open()
            self._handle.write(line)
            self._handle.flush()

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class SharedFileSink(FileSink):
    """
    Thread modu sink'i

    Tüm thread'ler aynı handle'ı paylaşır. Handle'ın yazma pozisyonu
    threading.Lock ile korunur.
    """

    def __init__(self, path: str):
        super().__init__(path, threading.Lock())


class ProcessFileSink(FileSink):
    """
    Process modu sink'i

    Parent'ta oluşturulur ve child process'lere pickle ile geçirilir.
    Açık file handle child'a taşınmaz; her child open() ile kendi
    append handle'ını açar. Kilit, multiprocessing context'inden gelir.
    """

    def __getstate__(self):
        """Pickle için state - handle'ı hariç tut"""
        return {
            '_path': self._path,
            '_lock': self._lock,
        }

    def __setstate__(self, state):
        """Pickle'dan restore et"""
        self._path = state['_path']
        self._lock = state['_lock']
        self._handle = None
