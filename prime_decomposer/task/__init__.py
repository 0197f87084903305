"""Task modülü - aralık, atama ve sonuç sınıfları"""

from .assignment import Assignment, assign
from .target_range import TargetRange, build_range, parse_start_value
from .result import FactorResult, WorkerSummary, unbounded_int_digits

__all__ = [
    'Assignment',
    'assign',
    'TargetRange',
    'build_range',
    'parse_start_value',
    'FactorResult',
    'WorkerSummary',
    'unbounded_int_digits',
]
