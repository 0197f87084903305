"""Queue modülü - process özetleri için kuyruk"""

from .summary_queue import SummaryQueue

__all__ = ['SummaryQueue']
