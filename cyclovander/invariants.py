"""The two invariants of the cyclotomic Vandermonde matrix V_n."""
from enum import Enum
from math import sqrt

from cyclovander.trace import trace_of_h
from cyclovander.utils.ntheory import phi, validate_n


def tr_h(n):
    """Return the trace of H_n.

    H_n is n G_n^-1, where G_n is the Gram matrix of V_n. H_n has
    integer entries, so the trace is an integer.
    """
    return trace_of_h(n)


def cond(n):
    """Return the condition number of V_n, phi(n) * sqrt(Tr(H_n) / n)."""
    n = validate_n(n)
    tr = float(tr_h(n))
    m = float(phi(n))
    return m * sqrt(tr / n)


class Mode(Enum):
    TRACE = 'trace'
    COND = 'cond'

    @property
    def header(self):
        if self is Mode.TRACE:
            return 'n\tTr(H_n)'
        return 'n\tCond(V_n)'

    def compute(self, n):
        if self is Mode.TRACE:
            return tr_h(n)
        return cond(n)

    @classmethod
    def from_flag(cls, trace):
        return cls.TRACE if trace else cls.COND
