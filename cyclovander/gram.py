import numpy as np
from scipy.linalg import toeplitz

from cyclovander.utils.ntheory import coefficient_sequence


def build_gram(n):
    """Return the Gram matrix G_n of the n-th cyclotomic Vandermonde matrix.

    G_n[i, j] = c_n(|j - i|), an exact integer stored as float64 so it
    can be handed to a real inversion routine.
    """
    v = np.array(coefficient_sequence(n), dtype=np.float64)
    return toeplitz(v)
