"""
Decomposer Modülü

Bir sayıyı trial division ile asal çarpanlarına ayırır.

Bölen 2'den başlar ve sadece artar. Mevcut bölen kalan değeri
bölebildiği sürece tekrar denenir, bu yüzden bulunan her bölen asaldır
(daha küçük çarpanlar zaten çıkarılmıştır) ve çarpanlar azalmayan sırada
üretilir. Asal bir p için döngü p'ye kadar çalışır: en kötü durum O(n).

Kullanım:
    factors, elapsed_us = decompose(60)       # [2, 2, 3, 5]
    decomposer = Decomposer(sink)
    result = decomposer.run(60)               # sink'e bir satır ekler
"""

import logging
import time
from typing import Any, List, Optional, Tuple

from ..core.exceptions import AllocationError
from ..task.result import FactorResult


def decompose(n: int, max_factors: Optional[int] = None) -> Tuple[List[int], int]:
    """
    Asal çarpanlara ayırma

    Args:
        n: Pozitif tamsayı (n >= 1)
        max_factors: Çarpan listesinin kapasitesi (None = sınırsız)

    Returns:
        Tuple: (azalmayan sırada asal çarpanlar, geçen süre mikrosaniye)

    Raises:
        ValueError: n pozitif bir tamsayı değilse
        AllocationError: Çarpan sayısı max_factors'ı aşarsa
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Tamsayı bekleniyordu: {n!r}")
    if n < 1:
        raise ValueError(f"n en az 1 olmalı: {n}")

    started = time.perf_counter_ns()

    factors: List[int] = []
    remaining = n
    divisor = 2

    while remaining != 1:
        while remaining % divisor:
            divisor += 1
        if max_factors is not None and len(factors) >= max_factors:
            raise AllocationError(
                f"{n} için çarpan listesi kapasiteyi aştı ({max_factors})",
                code="ALC001",
                number=n
            )
        remaining //= divisor
        factors.append(divisor)

    elapsed_us = (time.perf_counter_ns() - started) // 1000
    return factors, elapsed_us


class Decomposer:
    """
    Decomposer - algoritmayı bir output sink'e bağlar

    Her run() çağrısı bir sayıyı factorize eder ve sonucu sink'e tek
    satır olarak ekler. Thread ve process worker'ları aynı sınıfı kullanır.
    """

    def __init__(self, sink: Any, max_factors: Optional[int] = None):
        self._sink = sink
        self._max_factors = max_factors
        self._logger = logging.getLogger("decomposer")

    def run(self, n: int) -> FactorResult:
        """Factorize et ve kaydı sink'e ekle"""
        factors, elapsed_us = decompose(n, self._max_factors)
        result = FactorResult(number=n, factors=factors, elapsed_us=elapsed_us)
        self._sink.write_record(result)
        self._logger.debug(f"{result.expression()} ({elapsed_us} usec)")
        return result
