"""Sink modülü - paylaşılan append-only log dosyası"""

from .file_sink import FileSink, SharedFileSink, ProcessFileSink

__all__ = [
    'FileSink',
    'SharedFileSink',
    'ProcessFileSink',
]
