"""Unit tests for background fitting with a timeout."""

import threading

import pytest
import numpy as np

from pyunimodal.algorithms.unimodal import fit_unimodal
from pyunimodal.core.exceptions import FitCancelledError, FitTimeoutError
from pyunimodal.execution.worker import FitTask, run_with_timeout, submit_fit, fit_unimodal_with_timeout


@pytest.fixture
def release():
    """Event that blocked workers wait on; set on teardown so no thread outlives the test."""
    event = threading.Event()
    yield event
    event.set()


class TestFitTask:
    """Test cases for FitTask."""
    def test_result_delivered(self):
        """Test a task that finishes within its budget."""
        task = FitTask(sum, [1, 2, 3], timeout=5.0)
        assert task.result() == 6
        assert task.done()
        assert not task.timed_out
        assert not task.cancelled

    def test_runs_on_worker_thread(self):
        """Test that the function does not run on the calling thread."""
        caller = threading.current_thread()
        task = FitTask(threading.current_thread, timeout=5.0)
        assert task.result() is not caller

    def test_timeout(self, release):
        """Test that an expired budget raises FitTimeoutError and stays expired."""
        task = FitTask(release.wait, 10.0, timeout=0.05)
        with pytest.raises(FitTimeoutError) as exc_info:
            task.result()
        assert exc_info.value.timeout == 0.05
        assert task.timed_out
        with pytest.raises(FitTimeoutError):
            task.result()

    def test_timeout_error_is_builtin_timeout(self, release):
        """Test that FitTimeoutError can be caught as TimeoutError."""
        task = FitTask(release.wait, 10.0, timeout=0.01)
        with pytest.raises(TimeoutError):
            task.result()

    def test_cancel(self, release):
        """Test that a cancelled task never delivers its result."""
        task = FitTask(release.wait, 10.0)
        task.cancel()
        assert task.cancelled
        release.set()
        with pytest.raises(FitCancelledError):
            task.result()

    def test_cancel_twice(self, release):
        """Test that repeated cancellation is harmless."""
        task = FitTask(release.wait, 10.0)
        task.cancel()
        task.cancel()
        assert task.cancelled

    def test_exception_propagates(self):
        """Test that errors raised by the function reach the caller."""
        task = FitTask(int, "not a number", timeout=5.0)
        with pytest.raises(ValueError):
            task.result()

    def test_zero_timeout_waits(self):
        """Test that a zero timeout means no limit."""
        assert FitTask(sum, [1, 1], timeout=0).timeout is None

    def test_negative_timeout(self):
        """Test rejection of a negative timeout."""
        with pytest.raises(ValueError, match="negative"):
            FitTask(sum, [1], timeout=-1.0)


class TestRunWithTimeout:
    """Test cases for run_with_timeout and submit_fit."""
    def test_inline_without_timeout(self):
        """Test that a falsy timeout runs on the calling thread."""
        caller = threading.current_thread()
        assert run_with_timeout(threading.current_thread, timeout=None) is caller
        assert run_with_timeout(threading.current_thread, timeout=0) is caller

    def test_keyword_arguments(self):
        """Test that keyword arguments reach the function."""
        assert run_with_timeout(sorted, [3, 1, 2], reverse=True, timeout=5.0) == [3, 2, 1]

    def test_timeout(self, release):
        """Test the timeout path."""
        with pytest.raises(FitTimeoutError):
            run_with_timeout(release.wait, 10.0, timeout=0.05)

    def test_submit_fit_matches_direct_fit(self, noisy_bump_curve):
        """Test that background and direct fits agree."""
        direct = fit_unimodal(noisy_bump_curve)
        background = submit_fit(noisy_bump_curve, timeout=30.0).result()
        assert background.peak_index == direct.peak_index
        np.testing.assert_array_equal(background.fit.y, direct.fit.y)

    def test_fit_with_timeout_short_curve(self, small_curve):
        """Test a fit that returns None through the worker."""
        assert fit_unimodal_with_timeout(small_curve.slice(0, 2), timeout=5.0) is None
