from .errors import (
    CycloVanderError,
    InexactDivisionError,
    InvalidInputError,
    InversionError,
    PrecisionError,
)
from .invariants import Mode, cond, tr_h
from .trace import (
    VALIDITY_BOUND,
    h_matrix,
    h_residual,
    integrality_tolerance,
    trace_of_h,
    trace_tolerance,
)
from .batch import BatchRunner, parse_line
