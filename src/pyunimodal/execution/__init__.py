"""Running fits on a background worker with a timeout."""

from .worker import FitTask, run_with_timeout, submit_fit, fit_unimodal_with_timeout

__all__ = [
    "FitTask",
    "run_with_timeout",
    "submit_fit",
    "fit_unimodal_with_timeout"
]
