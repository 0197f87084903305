"""
Output Sink Testleri
"""

import threading

from prime_decomposer import FactorResult
from prime_decomposer.sink import SharedFileSink, ProcessFileSink

from conftest import RECORD_LINE


class TestSharedFileSink:
    """Thread modu sink testleri"""

    def test_append_does_not_truncate(self, log_path):
        log_path.write_text("önceki satır\n", encoding="utf-8")

        with SharedFileSink(str(log_path)) as sink:
            sink.write_record(FactorResult(6, [2, 3], 1))

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "önceki satır"
        assert RECORD_LINE.match(lines[1])

    def test_concurrent_writes_are_not_interleaved(self, log_path):
        """Aynı handle'a eşzamanlı yazan thread'ler satır kaybetmez ve bölmez"""
        thread_count, per_thread = 8, 250

        with SharedFileSink(str(log_path)) as sink:
            def writer(base):
                for i in range(per_thread):
                    n = base + i
                    sink.write_record(FactorResult(n, [n], i))

            threads = [threading.Thread(target=writer, args=(1000 * (t + 1),)) for t in range(thread_count)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == thread_count * per_thread
        assert all(RECORD_LINE.match(line) for line in lines)

    def test_reopen_after_close(self, log_path):
        sink = SharedFileSink(str(log_path)).open()
        sink.close()

        assert sink.is_open is False
        sink.write_record(FactorResult(4, [2, 2], 1))
        sink.close()

        assert len(log_path.read_text(encoding="utf-8").splitlines()) == 1


class TestProcessFileSink:
    """Process modu sink testleri"""

    def test_state_excludes_handle(self, log_path):
        """Açık handle child process'e taşınmaz"""
        lock = threading.Lock()
        sink = ProcessFileSink(str(log_path), lock).open()

        state = sink.__getstate__()
        assert set(state) == {"_path", "_lock"}

        clone = ProcessFileSink.__new__(ProcessFileSink)
        clone.__setstate__(state)
        assert clone.path == str(log_path)
        assert clone.is_open is False
        sink.close()

    def test_child_opens_own_handle(self, log_path):
        sink = ProcessFileSink(str(log_path), threading.Lock())

        sink.write_record(FactorResult(9, [3, 3], 2))
        sink.close()

        assert RECORD_LINE.match(log_path.read_text(encoding="utf-8").splitlines()[0])
