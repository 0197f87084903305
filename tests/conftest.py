"""Ortak pytest fixture'ları"""

import math
import re

import pytest

RECORD_LINE = re.compile(r"^(\d+) = ([\d *]+?)\s+(\d+) usec$")
SUMMARY_LINE = re.compile(r"^(Process|Thread) ID: (\d+), time used: (\d+) usec$")


class ListSink:
    """Kayıtları bellekte toplayan sink (test için)"""

    def __init__(self):
        self.lines = []

    def write_record(self, record):
        self.lines.append(record.format_line())


def parse_log(path):
    """
    Log dosyasını ayrıştır

    Returns:
        Tuple: ({sayı: [çarpanlar]} listesi, özet satırları, tanınmayan satırlar)
    """
    records, summaries, unknown = [], [], []
    with open(path, encoding="utf-8") as f:
        for line in f.read().splitlines():
            match = RECORD_LINE.match(line)
            if match:
                factors = [int(x) for x in match.group(2).split(" * ")]
                records.append((int(match.group(1)), factors))
                continue
            match = SUMMARY_LINE.match(line)
            if match:
                summaries.append((match.group(1), int(match.group(2)), int(match.group(3))))
                continue
            unknown.append(line)
    return records, summaries, unknown


def is_prime(n):
    if n < 2:
        return False
    for d in range(2, math.isqrt(n) + 1):
        if n % d == 0:
            return False
    return True


@pytest.fixture
def list_sink():
    return ListSink()


@pytest.fixture
def log_path(tmp_path):
    """Boş (henüz oluşturulmamış) log dosyası yolu"""
    return tmp_path / "factors.log"


@pytest.fixture
def read_log():
    return parse_log
