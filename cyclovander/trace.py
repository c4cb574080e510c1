"""Invert the Gram matrix and read off the trace of H_n = n * G_n^-1.

H_n has integer entries, but it is computed in float64 so the trace has
to be rounded. The rounding error grows with n: G_n is phi(n) x phi(n)
and gets worse conditioned as n grows. Each entry of H_n may drift by
`integrality_tolerance(n)`; the trace sums phi(n) of them, so it may drift
by `trace_tolerance(n)`. Up to VALIDITY_BOUND the drift stays well inside
those bounds; beyond that use `h_residual` to judge the float result.
"""
import numpy as np

from cyclovander.errors import InversionError, PrecisionError
from cyclovander.gram import build_gram
from cyclovander.utils.ntheory import phi, validate_n

VALIDITY_BOUND = 5000
RESIDUAL_SCALE = 1e-12


def integrality_tolerance(n):
    """Return how far from an integer an entry of H_n may drift."""
    n = validate_n(n)
    return RESIDUAL_SCALE * n * phi(n)


def trace_tolerance(n):
    """Return how far from an integer the trace of H_n may drift."""
    n = validate_n(n)
    return phi(n) * integrality_tolerance(n)


def h_matrix(n):
    """Return H_n = n * G_n^-1 as an unrounded float64 matrix."""
    n = validate_n(n)
    gram = build_gram(n)
    try:
        gram_inv = np.linalg.inv(gram)
    except np.linalg.LinAlgError as exc:
        raise InversionError(f'Gram matrix for n={n} is singular') from exc
    if not np.all(np.isfinite(gram_inv)):
        raise InversionError(f'Inverse of the Gram matrix for n={n} is not finite')
    return float(n) * gram_inv


def h_residual(n):
    """Return the largest distance from an entry of H_n to an integer."""
    h = h_matrix(n)
    return float(np.max(np.abs(h - np.rint(h))))


def trace_of_h(n, strict=False):
    """Return the trace of H_n rounded to the nearest integer.

    With strict=True raise PrecisionError if the unrounded trace is
    further than `trace_tolerance(n)` from that integer.
    """
    n = validate_n(n)
    tr = float(np.trace(h_matrix(n)))
    if not np.isfinite(tr) or tr < 0:
        raise InversionError(f'Trace of H_n for n={n} is {tr}')
    rounded = int(round(tr))
    if strict:
        drift = abs(tr - rounded)
        if drift > trace_tolerance(n):
            raise PrecisionError(
                f'Trace of H_n for n={n} is {tr}, {drift:.3g} away from {rounded}'
            )
    return rounded
