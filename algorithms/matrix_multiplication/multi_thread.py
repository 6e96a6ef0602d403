from concurrent.futures import ThreadPoolExecutor
from functools import partial

import numpy as np
from numba import njit

from utils.utils import get_default_num_workers


@njit(nogil=True, cache=True)
def compute_row(A, B, i):
    """Computes row i of A @ B. Releases the GIL so rows run concurrently."""
    n = A.shape[1]
    p = B.shape[1]
    row = np.zeros(p)
    for j in range(p):
        total = 0.0
        for k in range(n):
            total += A[i, k] * B[k, j]
        row[j] = total
    return row


def parallel_multiply(A, B, num_workers=None, row_kernel=compute_row):
    """
    Multiplies A by B, distributing the output rows across a thread pool.

    Uses an explicit executor rather than njit(parallel=True) with prange so
    the pool size is chosen by the caller and the row kernel can be swapped.

    Args:
        A: (m, n) float64 array. Read-only for the duration of the call.
        B: (n, p) float64 array. Read-only for the duration of the call.
        num_workers: Pool size. Defaults to the number of logical CPUs.
        row_kernel: Callable (A, B, i) -> row i of the product.

    Returns:
        A new (m, p) array whose row i is always the product of row i of A
        with B, whatever order the workers finish in.
    """
    m, n = A.shape
    nB, p = B.shape

    if n != nB:
        raise ValueError("Number of columns in A must be equal to the number of rows in B")

    if num_workers is None:
        num_workers = get_default_num_workers()
    if num_workers < 1:
        raise ValueError(f"num_workers must be at least 1, got {num_workers}")

    C = np.empty((m, p))
    if m == 0:
        return C

    # map() yields in submission order and re-raises the first worker error
    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        for i, row in enumerate(executor.map(partial(row_kernel, A, B), range(m))):
            C[i] = row

    return C

# --- Example Usage ---
if __name__ == "__main__":
    from performance_profiling.matrix_multiplication.matrix_generation import generate_matrices
    from utils.utils import format_matrix

    A, B = generate_matrices(8, random_state_seed=42)
    C = parallel_multiply(A, B)
    print(f"Multi-threaded multiplication complete using {get_default_num_workers()} workers.")
    print(format_matrix(C))
