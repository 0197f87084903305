"""
Target Range Modülü

Factorize edilecek sayı aralığını oluşturur: start, start+1, ..., start+count-1.
Python int'i keyfi hassasiyetli olduğu için büyük sayılar doğrudan desteklenir.

Kullanım:
    start = parse_start_value("1000000000000000000000")
    numbers = build_range(start, count=6)
"""

import re
from typing import Iterator, Tuple

from ..core.exceptions import ConfigurationError
from .assignment import Assignment

_DECIMAL = re.compile(r"[0-9]+")


def parse_start_value(text: str) -> int:
    """
    Başlangıç sayısını ondalık string'den okur

    Sadece rakamlardan oluşan (işaretsiz) ve 1'den büyük/eşit değerler kabul edilir.

    Raises:
        ConfigurationError: Geçersiz ondalık sayı
    """
    value = text.strip() if isinstance(text, str) else ""
    if not _DECIMAL.fullmatch(value):
        raise ConfigurationError(f"Geçersiz başlangıç sayısı: {text!r}", code="CFG003")

    number = int(value, 10)
    if number < 1:
        raise ConfigurationError("Başlangıç sayısı en az 1 olmalı", code="CFG003")
    return number


class TargetRange:
    """
    Target Range - değiştirilemez sayı dizisi

    Bir kez oluşturulur, sonra sadece okunur. Her eleman tam olarak bir
    worker tarafından tüketilir.
    """

    __slots__ = ("_start", "_numbers")

    def __init__(self, start: int, count: int):
        self._start = start
        self._numbers: Tuple[int, ...] = tuple(start + i for i in range(count))

    @property
    def start(self) -> int:
        return self._start

    def slice_for(self, assignment: Assignment) -> Tuple[int, ...]:
        """Worker'a atanan dilimi döndürür"""
        if assignment.stop > len(self._numbers):
            raise IndexError(
                f"Assignment aralık dışında: {assignment.offset}:{assignment.stop} "
                f"(range boyutu {len(self._numbers)})"
            )
        return self._numbers[assignment.offset:assignment.stop]

    def __len__(self) -> int:
        return len(self._numbers)

    def __getitem__(self, index):
        return self._numbers[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._numbers)

    def __eq__(self, other) -> bool:
        if isinstance(other, TargetRange):
            return self._numbers == other._numbers
        return NotImplemented

    def __repr__(self) -> str:
        return f"TargetRange(start={self._start}, count={len(self._numbers)})"


def build_range(start: int, count: int) -> TargetRange:
    """
    Sıralı sayı dizisini oluşturur

    Saf fonksiyon: aynı girdiler her zaman aynı diziyi üretir.

    Args:
        start: İlk sayı (en az 1)
        count: Eleman sayısı (en az 0)

    Returns:
        TargetRange: count adet ardışık sayı
    """
    if start < 1:
        raise ValueError("start en az 1 olmalı")
    if count < 0:
        raise ValueError("count negatif olamaz")
    return TargetRange(start, count)
