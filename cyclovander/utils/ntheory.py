"""Ramanujan sum coefficients of the cyclotomic Gram matrix.

The Gram matrix of the n-th cyclotomic Vandermonde matrix is the Toeplitz
matrix of the Ramanujan sums c_n(t), t = 0..phi(n) - 1. Each sum has the
closed form (von Sterneck)

    c_n(t) = mu(n / g) * phi(n) / phi(n / g),    g = gcd(n, t)

which is evaluated here in exact integer arithmetic.
"""
from functools import wraps
from math import gcd
from numbers import Integral
from threading import Lock

from sympy import mobius as sympy_mobius
from sympy import totient as sympy_totient

from cyclovander.errors import InexactDivisionError, InvalidInputError

MAX_N = 2 ** 64 - 1


def memoize(func):
    """Memoize a single argument function. Safe to share between threads."""
    tbl = {}
    lock = Lock()

    @wraps(func)
    def helper(args):
        with lock:
            if args in tbl:
                return tbl[args]
        value = func(args)
        with lock:
            tbl.setdefault(args, value)
        return value
    return helper


def validate_n(n):
    """Return n as an int, or raise InvalidInputError."""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidInputError(f'n must be an integer, got {n!r}')
    n = int(n)
    if n < 1:
        raise InvalidInputError(f'n must be positive, got {n}')
    if n > MAX_N:
        raise InvalidInputError(f'n must fit in 64 bits, got {n}')
    return n


@memoize
def phi(n):
    """Return the Euler's totient of n."""
    return int(sympy_totient(n))


@memoize
def _mu(n):
    return int(sympy_mobius(n))


def mobius(n, d):
    """Return the generalized Mobius value mu(n / d) for a divisor d of n."""
    if d < 1 or n % d:
        raise InvalidInputError(f'{d} is not a divisor of {n}')
    return _mu(n // d)


def _coefficient(n, g, m):
    num = mobius(n, g) * m
    den = phi(n // g)
    quot, rem = divmod(num, den)
    if rem:
        raise InexactDivisionError(
            f'phi({n // g}) = {den} does not divide {num} (n={n}, gcd={g})'
        )
    return quot


def coefficient(t, n):
    """Return the Ramanujan sum c_n(t) for 0 <= t < phi(n)."""
    n = validate_n(n)
    m = phi(n)
    if not 0 <= t < m:
        raise InvalidInputError(f't must lie in [0, {m}), got {t}')
    return _coefficient(n, gcd(n, t), m)


def coefficient_sequence(n):
    """Return [c_n(0), ..., c_n(phi(n) - 1)].

    Only the divisors gcd(n, t) matter, so each distinct one is
    evaluated once.
    """
    n = validate_n(n)
    m = phi(n)
    by_gcd = {}
    out = []
    for t in range(m):
        g = gcd(n, t)
        if g not in by_gcd:
            by_gcd[g] = _coefficient(n, g, m)
        out.append(by_gcd[g])
    return out
