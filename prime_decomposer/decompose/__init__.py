"""Decompose modülü - trial division"""

from .decomposer import decompose, Decomposer

__all__ = [
    'decompose',
    'Decomposer',
]
