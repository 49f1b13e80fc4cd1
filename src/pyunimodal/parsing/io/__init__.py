"""Reading strokes from data files and tabulating curves."""

from .data_handler import load_points, curve_to_dataframe, fit_to_dataframe, format_fit_summary

__all__ = [
    "load_points",
    "curve_to_dataframe",
    "fit_to_dataframe",
    "format_fit_summary"
]
