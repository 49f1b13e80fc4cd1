"""Constants used for YAML pipeline configuration."""

# Section keys
SAMPLING_KEY = "sampling"
FITTING_KEY = "fitting"
WORKER_KEY = "worker"
EXPORT_KEY = "export"

# Sampling keys
STEP_KEY = "step"

# Fitting keys
SHAPE_KEY = "shape"
METHOD_KEY = "method"
CONCAVE_KEY = "concave"
CONVEX_KEY = "convex"
UNIMODAL_KEY = "unimodal"
QUADRATIC_KEY = "quadratic"

# Worker keys
TIMEOUT_KEY = "timeout"

# Export keys
DECIMALS_KEY = "decimals"
BOUNDS_KEY = "bounds"

# Boundary condition keys
CONSTANT_KEY = "constant"
EXTRAPOLATE_KEY = "extrapolate"

# Point file keys
FILE_PATH_KEY = "file_path"
X_COLUMN_KEY = "x_column"
Y_COLUMN_KEY = "y_column"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
