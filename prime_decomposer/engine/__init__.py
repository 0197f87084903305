"""Engine modülü - Coordinator"""

from .coordinator import Coordinator, run

__all__ = [
    'Coordinator',
    'run',
]
