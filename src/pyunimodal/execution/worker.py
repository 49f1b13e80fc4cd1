"""
Background execution of fits with a time budget.

The fitting code itself is synchronous and never checks for cancellation. A FitTask runs
it on a single worker thread; when the caller's timeout expires or ``cancel`` is called the
task is abandoned: the computation may still finish in the background, but its result is
never delivered. Re-running a fit with the same inputs gives the same result.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Any, Callable, Optional, Union

from pyunimodal.algorithms.unimodal import fit_unimodal
from pyunimodal.core.curves import FitResult, SampledCurve, Shape
from pyunimodal.core.exceptions import FitCancelledError, FitTimeoutError
from pyunimodal.data.constants import ProcessingConstants, ErrorMessages

logger = logging.getLogger(__name__)


class FitTask:
    """
    Handle on a computation running in a background worker thread.

    Python threads cannot be killed, so a timed-out or cancelled fit keeps running until
    it finishes on its own and may delay interpreter exit by that long.
    """

    def __init__(self, func: Callable[..., Any], *args: Any, timeout: Optional[float] = None, **kwargs: Any):
        if timeout is not None and timeout < 0:
            raise ValueError(f"Timeout cannot be negative, got {timeout}")
        self.timeout = timeout if timeout else None
        self._cancel_event = threading.Event()
        self._timed_out = False
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pyunimodal-fit")
        self._future = self._executor.submit(func, *args, **kwargs)
        logger.debug("Submitted %s to background worker (timeout=%s)",
                     getattr(func, '__name__', repr(func)), self.timeout)

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    @property
    def timed_out(self) -> bool:
        return self._timed_out

    def done(self) -> bool:
        return self._future.done()

    def cancel(self) -> None:
        """Abandon the task; ``result`` raises FitCancelledError from now on."""
        if self._cancel_event.is_set():
            return
        self._cancel_event.set()
        self._future.cancel()
        self._executor.shutdown(wait=False, cancel_futures=True)
        logger.info("Fit task cancelled")

    def result(self) -> Any:
        """
        Wait for the result, at most ``timeout`` seconds.
        Raises:
            FitTimeoutError: If the timeout expired (now or on an earlier call)
            FitCancelledError: If the task was cancelled
        """
        if self._timed_out:
            raise FitTimeoutError(ErrorMessages.FIT_TIMEOUT.format(timeout=self.timeout), timeout=self.timeout)
        if self.cancelled:
            raise FitCancelledError(ErrorMessages.FIT_CANCELLED)
        try:
            value = self._future.result(timeout=self.timeout)
        except FuturesTimeoutError as e:
            self._timed_out = True
            self.cancel()
            raise FitTimeoutError(ErrorMessages.FIT_TIMEOUT.format(timeout=self.timeout),
                                  timeout=self.timeout) from e
        self._executor.shutdown(wait=False)
        return value


def run_with_timeout(func: Callable[..., Any], *args: Any,
                     timeout: Optional[float] = ProcessingConstants.DEFAULT_TIMEOUT, **kwargs: Any) -> Any:
    """Call ``func`` in a worker thread and wait at most ``timeout`` seconds; 0 or None runs it inline."""
    if not timeout:
        return func(*args, **kwargs)
    return FitTask(func, *args, timeout=timeout, **kwargs).result()


def submit_fit(curve: SampledCurve, shape: Union[Shape, str] = Shape.CONCAVE,
               timeout: Optional[float] = ProcessingConstants.DEFAULT_TIMEOUT) -> FitTask:
    """Start ``fit_unimodal`` on a background worker and return its task handle."""
    return FitTask(fit_unimodal, curve, shape, timeout=timeout)


def fit_unimodal_with_timeout(curve: SampledCurve, shape: Union[Shape, str] = Shape.CONCAVE,
                              timeout: Optional[float] = ProcessingConstants.DEFAULT_TIMEOUT) -> Optional[FitResult]:
    return run_with_timeout(fit_unimodal, curve, shape, timeout=timeout)
