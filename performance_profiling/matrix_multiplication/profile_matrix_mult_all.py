import time
from collections import namedtuple

import numpy as np

from algorithms.matrix_multiplication.single_thread import single_threaded_multiply
from algorithms.matrix_multiplication.multi_thread import parallel_multiply
from constants.params import MATRIX_SIZE, DATA_TYPE
from constants.string_constants import START_MESSAGE, GENERATING_MESSAGE, SEQUENTIAL_MESSAGE, \
    SEQUENTIAL_TIME_MESSAGE, PARALLEL_MESSAGE, PARALLEL_TIME_MESSAGE, MATCH_MESSAGE, MISMATCH_MESSAGE
from performance_profiling.matrix_multiplication.matrix_generation import generate_matrix
from utils.utils import results_match

BenchmarkResult = namedtuple("BenchmarkResult", ["size", "sequential_time", "parallel_time", "results_match"])


def profile_multiply(func, A, B, **kwargs):
    """Runs func(A, B) once and returns its result with the elapsed wall time in seconds."""
    start_time = time.perf_counter()
    C = func(A, B, **kwargs)
    end_time = time.perf_counter()
    return C, end_time - start_time


def warm_up_kernels(num_workers=None):
    """Triggers numba compilation on a 1x1 problem so it is not counted in the timings."""
    A = np.ones((1, 1), dtype=DATA_TYPE)
    single_threaded_multiply(A, A)
    parallel_multiply(A, A, num_workers=num_workers)


def run_benchmark(size=MATRIX_SIZE, num_workers=None, rng=None):
    """
    Generates two size x size operands, times the sequential and the parallel
    multiplication one after the other and prints the comparison report.

    Any failure inside generation or multiplication propagates to the caller.
    A mismatch between the two results is only reported.
    """
    print(START_MESSAGE.format(size=size))

    print(GENERATING_MESSAGE)
    A = generate_matrix(size, rng)
    B = generate_matrix(size, rng)

    warm_up_kernels(num_workers)

    print(SEQUENTIAL_MESSAGE)
    C_seq, sequential_time = profile_multiply(single_threaded_multiply, A, B)
    print(SEQUENTIAL_TIME_MESSAGE.format(elapsed=sequential_time))

    print(PARALLEL_MESSAGE)
    C_par, parallel_time = profile_multiply(parallel_multiply, A, B, num_workers=num_workers)
    print(PARALLEL_TIME_MESSAGE.format(elapsed=parallel_time))

    valid = results_match(C_seq, C_par)
    if valid:
        print(MATCH_MESSAGE)
    else:
        print(MISMATCH_MESSAGE)

    return BenchmarkResult(size, sequential_time, parallel_time, valid)
