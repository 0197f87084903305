"""
Kaynak Ölçümü

Worker bitiminde CPU süresi ve bellek kullanımını psutil ile örnekler.
Process modunda ölçüm child process'e aittir; thread modunda CPU süresi
thread'e, RSS ise tüm (paylaşılan) process'e aittir.
"""

import os
import time
from typing import Dict

import psutil


def _rss_mb(proc: psutil.Process) -> float:
    return round(proc.memory_info().rss / (1024 * 1024), 3)


def sample_process_metrics() -> Dict[str, float]:
    """Mevcut process'in CPU süresi (user + system) ve RSS değeri"""
    proc = psutil.Process(os.getpid())
    cpu = proc.cpu_times()
    return {
        "cpu_time_s": round(cpu.user + cpu.system, 6),
        "rss_mb": _rss_mb(proc),
    }


def sample_thread_metrics() -> Dict[str, float]:
    """Mevcut thread'in CPU süresi ve paylaşılan process RSS değeri"""
    proc = psutil.Process(os.getpid())
    return {
        "cpu_time_s": round(time.thread_time(), 6),
        "rss_mb": _rss_mb(proc),
    }
