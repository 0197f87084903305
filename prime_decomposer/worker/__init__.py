"""Worker modülü - process ve thread varyantları"""

from .runner import WorkerRunner, execute_assignment
from .thread import ThreadWorker
from .process import ProcessWorker

__all__ = [
    'WorkerRunner',
    'execute_assignment',
    'ThreadWorker',
    'ProcessWorker',
]
