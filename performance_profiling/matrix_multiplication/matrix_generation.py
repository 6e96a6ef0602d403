import numpy as np

from constants.params import MIN_VALUE, MAX_VALUE, DATA_TYPE


def generate_matrix(size, rng=None):
    """Generates a size x size matrix with elements drawn from [MIN_VALUE, MAX_VALUE)."""
    if size < 1:
        raise ValueError(f"Matrix size must be a positive integer, got {size}")
    if rng is None:
        rng = np.random.default_rng()
    return rng.uniform(MIN_VALUE, MAX_VALUE, (size, size)).astype(DATA_TYPE)


def generate_matrices(size, random_state_seed=None):
    """Generates both operands from a single generator, seeded if a seed is given."""
    rng = np.random.default_rng(random_state_seed)
    A = generate_matrix(size, rng)
    B = generate_matrix(size, rng)
    return A, B


# --- Example Usage ---
if __name__ == "__main__":
    A, B = generate_matrices(4, random_state_seed=42)
    print(f"Info: Generated two {A.shape[0]}x{A.shape[1]} matrices.")
    print(A)
