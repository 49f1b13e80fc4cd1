from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used throughout the fitting pipeline."""
    # Tolerance and precision
    GRID_TOLERANCE: Final[float] = 1e-9
    MONOTONICITY_THRESHOLD: Final[float] = 1e-12
    # Sampling
    DEFAULT_STEP: Final[float] = 0.01
    MAX_STEP: Final[float] = 0.5
    DOMAIN_LOWER_BOUND: Final[float] = 0.0
    DOMAIN_UPPER_BOUND: Final[float] = 1.001
    # Data validation
    MIN_DATA_POINTS: Final[int] = 1
    MIN_FIT_POINTS: Final[int] = 3
    # Quadratic regression
    QUADRATIC_DEGREE: Final[int] = 2
    QUADRATIC_MAX_CURVATURE: Final[float] = -0.001
    # Worker
    DEFAULT_TIMEOUT: Final[float] = 1.0
    # Tabulation
    DEFAULT_DECIMALS: Final[int] = 2
    # File processing
    MAX_MISSING_VALUE_PERCENTAGE: Final[float] = 50.0


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    INSUFFICIENT_DATA_POINTS: Final[str] = "Need at least {min_points} points, got {count}"
    GRID_MISMATCH: Final[str] = "Curves '{first}' and '{second}' are not sampled on the same grid"
    FIT_TIMEOUT: Final[str] = "Fit did not finish within {timeout:.3f} seconds"
    FIT_CANCELLED: Final[str] = "Fit task was cancelled"
    INVALID_STEP: Final[str] = "Sampling step must be a positive finite number, got {step}"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    SUPPORTED_EXTENSIONS: Final[tuple] = ('.csv', '.xlsx', '.txt')
    MAX_FILE_SIZE_MB: Final[int] = 100
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    # Missing value indicators
    NA_VALUES: Final[tuple] = ('', ' ', '  ', '   ', 'nan', 'NaN', 'NULL', 'null', 'N/A', 'n/a', 'NA')
