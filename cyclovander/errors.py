"""Exceptions raised by the numeric engine."""


class CycloVanderError(Exception):
    pass


class InvalidInputError(CycloVanderError, ValueError):
    """Input violates a precondition before any numeric work starts."""
    pass


class InexactDivisionError(CycloVanderError, ArithmeticError):
    """A Ramanujan coefficient did not divide evenly.

    This means the number theory primitives are broken; truncating
    would corrupt every downstream result.
    """
    pass


class InversionError(CycloVanderError, ArithmeticError):
    """The Gram matrix could not be inverted to a finite result."""
    pass


class PrecisionError(CycloVanderError, ArithmeticError):
    """The unrounded trace drifted further from an integer than allowed."""
    pass
