from performance_profiling.matrix_multiplication.profile_matrix_mult_all import run_benchmark


def main():
    run_benchmark()


if __name__ == "__main__":
    main()
