"""Core modül - temel sınıflar"""

from .enums import WorkerMode, WorkerStatus
from .exceptions import (
    DecomposerError,
    ConfigurationError,
    SpawnError,
    AllocationError,
    WorkerError
)

__all__ = [
    'WorkerMode',
    'WorkerStatus',
    'DecomposerError',
    'ConfigurationError',
    'SpawnError',
    'AllocationError',
    'WorkerError',
]
