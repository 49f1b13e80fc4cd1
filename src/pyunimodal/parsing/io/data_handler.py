import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from pyunimodal.core.curves import FitResult, Point, SampledCurve, Shape
from pyunimodal.data.constants import ProcessingConstants, FileConstants
from pyunimodal.parsing.config.yaml_keys import FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY

logger = logging.getLogger(__name__)

ColumnId = Union[str, int]


def _read_csv(path: Path, header: Optional[int]) -> pd.DataFrame:
    return pd.read_csv(path, header=header, na_values=FileConstants.NA_VALUES,
                       encoding=FileConstants.DEFAULT_ENCODING)


def _read_txt(path: Path, header: Optional[int]) -> pd.DataFrame:
    return pd.read_csv(path, sep=r'\s+', header=header, na_values=FileConstants.NA_VALUES,
                       encoding=FileConstants.DEFAULT_ENCODING, engine='python')


def _read_xlsx(path: Path, header: Optional[int]) -> pd.DataFrame:
    return pd.read_excel(path, header=header, na_values=FileConstants.NA_VALUES)


READERS: Dict[str, Callable[[Path, Optional[int]], pd.DataFrame]] = {
    '.csv': _read_csv,
    '.txt': _read_txt,
    '.xlsx': _read_xlsx,
}


def load_points(file_config: Dict[str, Union[str, Path, int]], header: bool = True) -> List[Point]:
    """
    Read a stroke from the two columns of a data file.

    Rows with a missing x or y are skipped; the points keep the file order.
    Args:
        file_config: Mapping with
            - file_path: .csv, .xlsx or whitespace separated .txt file
            - x_column: name or position of the x column
            - y_column: name or position of the y column
        header: Whether the first row holds column names
    Returns:
        List of Points
    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read
        ValueError: On a bad configuration, an unsupported file or unusable data
    """
    missing_keys = {FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY} - set(file_config)
    if missing_keys:
        raise ValueError(f"Missing required configuration keys: {sorted(missing_keys)}")
    x_col, y_col = file_config[X_COLUMN_KEY], file_config[Y_COLUMN_KEY]
    if not header and (isinstance(x_col, str) or isinstance(y_col, str)):
        raise ValueError("Column names specified, but file has no header row")
    path = _check_stroke_file(file_config[FILE_PATH_KEY])
    logger.info("Loading stroke from %s", path)
    try:
        df = READERS[path.suffix.lower()](path, 0 if header else None)
    except PermissionError as e:
        raise PermissionError(f"Permission denied reading stroke file {path}: {str(e)}") from e
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"Stroke file is empty: {path}") from e
    except Exception as e:
        logger.error("Failed to read stroke file %s: %s", path, e, exc_info=True)
        raise ValueError(f"Could not read stroke file {path}: {str(e)}") from e
    if df.empty:
        raise ValueError(f"Stroke file is empty: {path}")
    x_values = _numeric_column(df, x_col, "x")
    y_values = _numeric_column(df, y_col, "y")
    x_values, y_values = _drop_missing_values(x_values, y_values, path)
    logger.info("Loaded %d points from %s", x_values.size, path)
    return [Point(x, y) for x, y in zip(x_values, y_values)]


def _check_stroke_file(file_path: Union[str, Path]) -> Path:
    if not file_path:
        raise ValueError("File path cannot be empty")
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Stroke file not found: {path}")
    if not path.is_file():
        raise ValueError(f"Path is not a file: {path}")
    if path.suffix.lower() not in READERS:
        raise ValueError(f"Unsupported file type: '{path.suffix}'. "
                         f"Supported types are: {', '.join(FileConstants.SUPPORTED_EXTENSIONS)}")
    size_mb = path.stat().st_size / (1024 * 1024)
    if size_mb > FileConstants.MAX_FILE_SIZE_MB:
        raise ValueError(f"Stroke file {path} is {size_mb:.2f} MB, the limit is {FileConstants.MAX_FILE_SIZE_MB} MB")
    return path


def _numeric_column(df: pd.DataFrame, column: ColumnId, axis: str) -> np.ndarray:
    """Select a column by name or position and coerce it to float (unparseable cells become NaN)."""
    if isinstance(column, str):
        if column not in df.columns:
            raise ValueError(f"{axis} column '{column}' not found. "
                             f"Available columns: {', '.join(df.columns.astype(str))}")
        series = df[column]
    elif not 0 <= column < len(df.columns):
        raise ValueError(f"{axis} column index {column} out of bounds for {len(df.columns)} columns")
    else:
        series = df.iloc[:, column]
    return pd.to_numeric(series, errors='coerce').to_numpy(dtype=np.float64)


def _drop_missing_values(x_values: np.ndarray, y_values: np.ndarray,
                         path: Path) -> Tuple[np.ndarray, np.ndarray]:
    """Remove rows with a missing coordinate; more than half missing is an error."""
    missing = np.isnan(x_values) | np.isnan(y_values)
    if not np.any(missing):
        return x_values, y_values
    share = 100.0 * np.count_nonzero(missing) / missing.size
    logger.warning("Skipping %d rows (%.1f%%) with missing values in %s", np.count_nonzero(missing), share, path)
    if share > ProcessingConstants.MAX_MISSING_VALUE_PERCENTAGE:
        raise ValueError(f"Too many missing values ({share:.1f}%) in stroke file {path}")
    return x_values[~missing], y_values[~missing]


def curve_to_dataframe(curve: SampledCurve,
                       decimals: Optional[int] = ProcessingConstants.DEFAULT_DECIMALS) -> pd.DataFrame:
    """Tabulate a curve as an ``x``/``y`` DataFrame, rounded to ``decimals`` unless it is None."""
    df = pd.DataFrame({'x': curve.x, 'y': curve.y})
    return df.round(decimals) if decimals is not None else df


def fit_to_dataframe(result: FitResult, curve: Optional[SampledCurve] = None,
                     decimals: Optional[int] = None) -> pd.DataFrame:
    """
    Tabulate a fit with a ``segment`` column telling which side of the peak each sample is on.
    If the sampled input ``curve`` is given its values are added as column ``y``.
    """
    index = np.arange(len(result.fit))
    before_peak = index <= result.peak_index
    if result.shape == Shape.CONCAVE:
        segment = np.where(before_peak, 'increasing', 'decreasing')
    else:
        segment = np.where(before_peak, 'decreasing', 'increasing')
    df = pd.DataFrame({'x': result.fit.x, 'fit': result.fit.y, 'segment': segment})
    if curve is not None:
        if not curve.same_grid(result.fit):
            raise ValueError("Sampled curve and fit do not share a grid")
        df.insert(1, 'y', curve.y)
    return df.round(decimals) if decimals is not None else df


def format_fit_summary(result: FitResult) -> str:
    """One-line description of a fit: shape, peak position and squared error."""
    label = "Concave Fit" if result.shape == Shape.CONCAVE else "Convex Fit"
    peak = result.peak
    return f"{label} | Peak: ({peak.x:.3f}, {peak.y:.3f}) | Error: {result.error:.4f}"
