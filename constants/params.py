import numpy as np

MATRIX_SIZE = 500

# Elements are drawn from [MIN_VALUE, MAX_VALUE)
MIN_VALUE = 0.0
MAX_VALUE = 10.0

DATA_TYPE = np.float64

# Absolute per-element tolerance between the sequential and parallel results
TOLERANCE = 1e-9

# Largest matrix format_matrix will render
MAX_PRINT_SIZE = 10
