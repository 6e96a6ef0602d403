import numpy as np
import psutil

from constants.params import TOLERANCE, MAX_PRINT_SIZE
from constants.string_constants import MATRIX_TOO_LARGE_MESSAGE


def get_default_num_workers():
    """Returns the number of logical CPUs using psutil, or 1 if it cannot be determined."""
    return psutil.cpu_count(logical=True) or 1


def results_match(C_seq, C_par, tol=TOLERANCE):
    """
    Checks that two results agree element-wise within an absolute tolerance.

    Stops at the first row containing a mismatch. Matrices of different
    shapes never match, and neither does a NaN.
    """
    if C_seq.shape != C_par.shape:
        return False
    for row_seq, row_par in zip(C_seq, C_par):
        if not np.all(np.abs(row_seq - row_par) < tol):
            return False
    return True


def format_matrix(matrix, max_size=MAX_PRINT_SIZE):
    if matrix.shape[0] > max_size or matrix.shape[1] > max_size:
        return MATRIX_TOO_LARGE_MESSAGE
    return "\n".join(" ".join(f"{value:.2f}" for value in row) for row in matrix)
