"""
Summary Queue Modülü

Process worker'larının özetlerini parent'a taşıyan kuyruk.
Worker'lar arasında iletişim yoktur; sadece child -> parent yönünde,
worker başına tek mesaj gider.

Kullanım:
    queue = SummaryQueue(multiprocessing.get_context())
    queue.put(summary.to_dict())        # child içinde
    item = queue.get(timeout=0.1)       # parent içinde
"""

import queue
from typing import Any, Dict, List, Optional


class SummaryQueue:
    """
    Summary Queue - özet kuyruğu

    Özellikler:
    - Blocking get: Timeout ile özet alır
    - drain(): Kalan tüm özetleri bekletmeden alır
    """

    def __init__(self, context: Any):
        self._queue = context.Queue()

    def put(self, item: Dict[str, Any]):
        """Özet ekle"""
        self._queue.put(item)

    def get(self, timeout: Optional[float] = None) -> Optional[Dict[str, Any]]:
        """
        Özet al

        Args:
            timeout: Maksimum bekleme süresi (saniye). None = non-blocking

        Returns:
            Dict: Özet dict'i veya None (timeout/boş)
        """
        try:
            if timeout is None:
                return self._queue.get_nowait()
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def drain(self) -> List[Dict[str, Any]]:
        """Kuyrukta kalan tüm özetleri al"""
        items = []
        while True:
            item = self.get()
            if item is None:
                return items
            items.append(item)

    def close(self):
        """Kuyruğu kapat ve feeder thread'ini bekle"""
        self._queue.close()
        self._queue.join_thread()
