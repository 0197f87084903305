"""Prime Decomposer - process ve thread fan-out ile paralel asal çarpanlara ayırma"""

from .engine import Coordinator, run
from .config import RunConfig
from .decompose import decompose, Decomposer
from .task import Assignment, assign, TargetRange, build_range, parse_start_value
from .task import FactorResult, WorkerSummary
from .status import RunReport
from .core.enums import WorkerMode, WorkerStatus
from .core.exceptions import (
    DecomposerError,
    ConfigurationError,
    SpawnError,
    AllocationError,
    WorkerError
)

__version__ = "1.0.0"
__all__ = [
    'Coordinator',
    'run',
    'RunConfig',
    'decompose',
    'Decomposer',
    'Assignment',
    'assign',
    'TargetRange',
    'build_range',
    'parse_start_value',
    'FactorResult',
    'WorkerSummary',
    'RunReport',
    'WorkerMode',
    'WorkerStatus',
    'DecomposerError',
    'ConfigurationError',
    'SpawnError',
    'AllocationError',
    'WorkerError',
]
