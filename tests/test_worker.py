"""
Worker Runner Testleri

Ortak algoritmayı (execute_assignment) ve thread worker'ı doğrudan test eder.
Process worker uçtan uca test_coordinator.py içinde, başlatma hataları burada test edilir.
"""

import threading

import pytest

from prime_decomposer import Assignment, Decomposer, SpawnError, WorkerMode, WorkerStatus, WorkerError
from prime_decomposer.sink import ProcessFileSink, SharedFileSink
from prime_decomposer.worker import ProcessWorker, ThreadWorker, execute_assignment

from conftest import RECORD_LINE, SUMMARY_LINE


class TestExecuteAssignment:
    """execute_assignment() testleri"""

    def test_processes_slice_in_order(self, list_sink):
        assignment = Assignment(worker_index=1, offset=2, length=3)
        decomposer = Decomposer(list_sink)

        summary = execute_assignment(
            assignment, (12, 13, 14), decomposer, list_sink,
            identity=1, mode=WorkerMode.THREAD,
            sample_metrics=lambda: {"cpu_time_s": 0.5}
        )

        numbers = [int(RECORD_LINE.match(line.rstrip("\n")).group(1)) for line in list_sink.lines[:3]]
        assert numbers == [12, 13, 14]
        assert SUMMARY_LINE.match(list_sink.lines[3].rstrip("\n"))
        assert summary.numbers_processed == 3
        assert summary.worker_index == 1
        assert summary.metrics == {"cpu_time_s": 0.5}
        assert summary.status == WorkerStatus.COMPLETED

    def test_total_elapsed_is_sum(self, list_sink):
        decomposer = Decomposer(list_sink)
        summary = execute_assignment(
            Assignment(0, 0, 2), (97, 98), decomposer, list_sink,
            identity=0, mode=WorkerMode.THREAD
        )

        elapsed = [int(RECORD_LINE.match(line.rstrip("\n")).group(3)) for line in list_sink.lines[:2]]
        assert summary.total_elapsed_us == sum(elapsed)

    def test_length_mismatch(self, list_sink):
        with pytest.raises(WorkerError):
            execute_assignment(
                Assignment(0, 0, 3), (1, 2), Decomposer(list_sink), list_sink,
                identity=0, mode=WorkerMode.THREAD
            )


class TestThreadWorker:
    """ThreadWorker testleri"""

    def test_run_and_join(self, log_path):
        with SharedFileSink(str(log_path)) as sink:
            worker = ThreadWorker(Assignment(2, 4, 2), (14, 15), sink)
            assert worker.status == WorkerStatus.PENDING

            worker.start()
            worker.join()

        assert worker.status == WorkerStatus.COMPLETED
        assert worker.failed is False
        assert worker.summary.identity == 2
        assert worker.summary.format_line().startswith("Thread ID: 2,")
        assert "rss_mb" in worker.summary.metrics

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 3
        assert lines[-1].startswith("Thread ID: 2, time used: ")

    def test_failure_is_contained(self, log_path):
        """AllocationError thread'i FAILED yapar, exception dışarı sızmaz"""
        with SharedFileSink(str(log_path)) as sink:
            worker = ThreadWorker(Assignment(0, 0, 2), (1024, 1025), sink, max_factors=5)
            worker.start()
            worker.join()

        assert worker.failed is True
        assert worker.status == WorkerStatus.FAILED
        assert "ALC001" in worker.summary.error
        assert not log_path.exists() or log_path.read_text(encoding="utf-8") == ""


class _FailingProcess:
    def start(self):
        raise TypeError("cannot pickle '_thread.lock' object")


class _FailingContext:
    """Process.start() pickle hatası veren multiprocessing context'i"""

    def Process(self, **kwargs):
        return _FailingProcess()


class TestProcessWorker:
    """ProcessWorker testleri"""

    def test_any_start_failure_is_spawn_error(self, log_path):
        sink = ProcessFileSink(str(log_path), threading.Lock())
        worker = ProcessWorker(Assignment(0, 0, 1), (10,), sink, context=_FailingContext())

        with pytest.raises(SpawnError) as exc_info:
            worker.start()

        assert exc_info.value.code == "SPN001"
        assert isinstance(exc_info.value.__cause__, TypeError)
        assert worker.status == WorkerStatus.PENDING
        assert worker.is_alive() is False
