"""
Core Sınıflar Testleri

FactorResult, WorkerSummary, RunConfig, RunReport ve exception sınıflarını test eder.
"""

import multiprocessing
import sys
from datetime import datetime, timezone

import pytest

from prime_decomposer import FactorResult, WorkerSummary, RunConfig, RunReport
from prime_decomposer import WorkerMode, WorkerStatus
from prime_decomposer import ConfigurationError, AllocationError, DecomposerError
from prime_decomposer.task import unbounded_int_digits


class TestFactorResult:
    """FactorResult testleri"""

    def test_expression(self):
        result = FactorResult(number=60, factors=[2, 2, 3, 5], elapsed_us=7)

        assert result.expression() == "60 = 2 * 2 * 3 * 5"
        assert result.product() == 60

    def test_expression_for_one(self):
        """1'in çarpan listesi boş, ifade boş çarpımı gösterir"""
        result = FactorResult(number=1, factors=[], elapsed_us=0)

        assert result.expression() == "1 = 1"
        assert result.product() == 1

    def test_format_line_padding(self):
        """İfade 50 sütuna sola, süre 10 sütuna sağa yaslanır"""
        result = FactorResult(number=12, factors=[2, 2, 3], elapsed_us=42)
        line = result.format_line()

        assert line.endswith(" usec\n")
        assert line[:50] == "12 = 2 * 2 * 3".ljust(50)
        assert line[50] == " "
        assert line[51:61] == "42".rjust(10)

    def test_large_number_formatting(self):
        big = 10 ** 5000 + 1
        result = FactorResult(number=big, factors=[big], elapsed_us=1)

        with unbounded_int_digits():
            assert result.expression().startswith("1" + "0" * 100)

    def test_to_dict(self):
        result = FactorResult(number=10, factors=[2, 5], elapsed_us=3)

        assert result.to_dict() == {"number": "10", "factors": ["2", "5"], "elapsed_us": 3}


class TestIntegerDigits:
    """unbounded_int_digits() testleri"""

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="int/str basamak sınırı yok")
    def test_limit_is_scoped(self):
        limit = sys.get_int_max_str_digits()
        result = FactorResult(number=2 ** 20000, factors=[2] * 3, elapsed_us=1)

        with unbounded_int_digits():
            assert sys.get_int_max_str_digits() == 0
            line = result.format_line()
            prefix = str(2 ** 20000)[:20]

        assert sys.get_int_max_str_digits() == limit
        assert line.startswith(prefix)
        assert " = 2 * 2 * 2 " in line

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="int/str basamak sınırı yok")
    def test_import_keeps_interpreter_limit(self):
        assert sys.get_int_max_str_digits() != 0


class TestWorkerSummary:
    """WorkerSummary testleri"""

    def test_success(self):
        summary = WorkerSummary.success(
            worker_index=1,
            identity=4242,
            mode=WorkerMode.PROCESS,
            total_elapsed_us=1500,
            numbers_processed=2,
            metrics={"cpu_time_s": 0.1, "rss_mb": 12.0}
        )

        assert summary.status == WorkerStatus.COMPLETED
        assert summary.is_success is True
        assert summary.is_failed is False
        assert summary.format_line() == "Process ID: 4242, time used: 1500 usec\n"

    def test_failed(self):
        summary = WorkerSummary.failed(
            worker_index=2,
            identity=2,
            mode=WorkerMode.THREAD,
            error="boom"
        )

        assert summary.status == WorkerStatus.FAILED
        assert summary.is_failed is True
        assert summary.error == "boom"

    def test_thread_format_line(self):
        summary = WorkerSummary.success(
            worker_index=0, identity=0, mode=WorkerMode.THREAD,
            total_elapsed_us=9, numbers_processed=1
        )

        assert summary.format_line() == "Thread ID: 0, time used: 9 usec\n"

    def test_dict_transport(self):
        """Queue üzerinden taşınan dict'ten aynı özet geri oluşur"""
        started_at = datetime.now(timezone.utc)
        summary = WorkerSummary.success(
            worker_index=3, identity=999, mode=WorkerMode.PROCESS,
            total_elapsed_us=77, numbers_processed=4,
            metrics={"rss_mb": 1.5}, started_at=started_at
        )

        restored = WorkerSummary.from_dict(summary.to_dict())

        assert restored.worker_index == 3
        assert restored.identity == 999
        assert restored.mode == WorkerMode.PROCESS
        assert restored.status == WorkerStatus.COMPLETED
        assert restored.total_elapsed_us == 77
        assert restored.metrics == {"rss_mb": 1.5}
        assert restored.started_at == started_at
        assert restored.duration is not None
        assert restored.duration >= 0


class TestRunConfig:
    """RunConfig testleri"""

    def test_config_creation(self):
        config = RunConfig(worker_count=3, tasks_per_worker=2, start_value=10, output_path="out.log")

        assert config.mode == WorkerMode.PROCESS
        assert config.total_tasks == 6
        assert config.max_factors == 1024
        assert config.log_level == "INFO"

    def test_mode_from_string(self):
        config = RunConfig(1, 1, 1, "out.log", mode="THREAD", log_level="debug")

        assert config.mode == WorkerMode.THREAD
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("kwargs", [
        {"worker_count": 0},
        {"tasks_per_worker": 0},
        {"start_value": 0},
        {"output_path": ""},
        {"max_factors": 0},
        {"mode": "fiber"},
        {"mode": None},
        {"mode": 5},
        {"log_level": "LOUD"},
        {"start_method": "teleport"},
    ])
    def test_config_validation(self, kwargs):
        values = {"worker_count": 1, "tasks_per_worker": 1, "start_value": 1, "output_path": "out.log"}
        values.update(kwargs)

        with pytest.raises(ConfigurationError):
            RunConfig(**values)

    def test_start_method(self):
        method = multiprocessing.get_all_start_methods()[0]
        config = RunConfig(1, 1, 1, "out.log", start_method=method)

        assert config.start_method == method

    def test_config_to_dict(self):
        config = RunConfig(2, 3, 10 ** 30, "out.log", mode=WorkerMode.THREAD)
        config_dict = config.to_dict()

        assert config_dict["worker_count"] == 2
        assert config_dict["start_value"] == str(10 ** 30)
        assert config_dict["mode"] == "thread"


class TestRunReport:
    """RunReport testleri"""

    def _summary(self, index, ok=True):
        if ok:
            return WorkerSummary.success(index, index, WorkerMode.THREAD, 100, 2)
        return WorkerSummary.failed(index, index, WorkerMode.THREAD, "hata")

    def test_success_report(self):
        report = RunReport(WorkerMode.THREAD, 2, 2, 10, [self._summary(0), self._summary(1)])

        assert report.is_success is True
        assert report.health == "healthy"
        assert report.exit_status == 0
        assert report.total_elapsed_us == 200
        assert report.numbers_processed == 4

    def test_failed_report(self):
        report = RunReport(WorkerMode.THREAD, 2, 2, 10, [self._summary(0), self._summary(1, ok=False)])

        assert report.is_success is False
        assert report.health == "unhealthy"
        assert report.exit_status == 1
        assert [s.worker_index for s in report.failed_workers] == [1]
        assert report.to_dict()["health"] == "unhealthy"

    def test_missing_summary_is_failure(self):
        report = RunReport(WorkerMode.THREAD, 2, 2, 10, [self._summary(0)])

        assert report.is_success is False


class TestExceptions:
    """Exception testleri"""

    def test_code_in_message(self):
        error = AllocationError("taştı", code="ALC001", number=1024)

        assert str(error) == "[ALC001] taştı"
        assert error.number == 1024
        assert isinstance(error, DecomposerError)

    def test_message_without_code(self):
        assert str(ConfigurationError("eksik")) == "eksik"
