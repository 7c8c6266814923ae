"""Tests for the counted completion barrier."""

import threading

import pytest

from host_summary.barrier import CompletionBarrier
from host_summary.exceptions import BarrierError, LogReadError
from host_summary.records import ProgressState


class TestCounting:
    """Tests for signal counting."""

    def test_zero_files_resolves_immediately(self):
        barrier = CompletionBarrier(0)
        assert barrier.resolved
        assert barrier.wait(timeout=0) is True
        assert barrier.progress.percent == 100.0

    def test_resolves_after_exactly_total_signals(self):
        barrier = CompletionBarrier(3)
        barrier.signal("a.log")
        barrier.signal("b.log")
        assert not barrier.resolved
        assert barrier.wait(timeout=0.01) is False

        barrier.signal("c.log")
        assert barrier.resolved
        assert barrier.wait(timeout=0) is True

    def test_extra_signal_raises(self):
        barrier = CompletionBarrier(1)
        barrier.signal()
        with pytest.raises(BarrierError) as exc_info:
            barrier.signal()
        assert exc_info.value.expected == 1
        assert exc_info.value.received == 2
        # The extra signal was not counted
        assert barrier.progress == ProgressState(1, 1)

    def test_negative_total_rejected(self):
        with pytest.raises(ValueError):
            CompletionBarrier(-1)

    def test_signal_returns_progress(self):
        barrier = CompletionBarrier(4)
        progress = barrier.signal()
        assert progress == ProgressState(1, 4)
        assert progress.percent == 25.0
        assert not progress.done


class TestWaiting:
    """Tests for blocking waiters."""

    def test_waiter_released_by_worker_threads(self):
        barrier = CompletionBarrier(20)

        def worker():
            for _ in range(5):
                barrier.signal()

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        assert barrier.wait(timeout=5) is True
        for t in threads:
            t.join()
        assert barrier.progress == ProgressState(20, 20)

    def test_abort_reraises_in_waiter(self):
        barrier = CompletionBarrier(2)
        barrier.signal()
        error = LogReadError("corrupt", file_path="bad.gz")
        barrier.abort(error)

        assert barrier.aborted
        with pytest.raises(LogReadError) as exc_info:
            barrier.wait(timeout=1)
        assert exc_info.value is error

    def test_first_abort_wins(self):
        barrier = CompletionBarrier(2)
        first = LogReadError("first")
        barrier.abort(first)
        barrier.abort(LogReadError("second"))
        with pytest.raises(LogReadError) as exc_info:
            barrier.wait()
        assert exc_info.value is first


class TestProgressCallback:
    """Tests for the on_progress hook."""

    def test_callback_sees_every_signal(self):
        seen = []
        barrier = CompletionBarrier(2, on_progress=lambda p, path: seen.append((p.completed, path)))
        barrier.signal("a.log")
        barrier.signal("b.log")
        assert seen == [(1, "a.log"), (2, "b.log")]
