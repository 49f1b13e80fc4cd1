"""Custom exceptions for pyunimodal core functionality."""
import logging

logger = logging.getLogger(__name__)


class CurveError(Exception):
    """Base exception for all curve-related errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("CurveError raised: %s", message)


class CurveAlignmentError(CurveError, ValueError):
    """Exception raised when two curves are not sampled on the same grid."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("CurveAlignmentError raised: %s", message)


class CurveFitError(CurveError):
    """Exception raised when a regression cannot be computed."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("CurveFitError raised: %s", message)


class FitTimeoutError(CurveError, TimeoutError):
    """Exception raised when a background fit exceeds its time budget."""

    def __init__(self, message, timeout: float = None):
        self.timeout = timeout
        super().__init__(message)
        logger.error("FitTimeoutError raised: %s", message)


class FitCancelledError(CurveError):
    """Exception raised when the result of a cancelled fit task is requested."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("FitCancelledError raised: %s", message)
