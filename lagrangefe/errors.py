"""Exceptions raised while loading samples and fitting polynomials."""


class LagrangeError(ValueError):
    """Base class for sample and fitting errors."""

    pass


class EmptySampleError(LagrangeError):
    """Raised when an operation needs at least one sample and got none."""

    pass


class DegenerateSampleError(LagrangeError):
    """Sample set cannot define an interpolating polynomial.

    Raised when two samples share an x value (a basis denominator becomes
    zero) or when the fitted coefficients are not finite.
    """

    pass


class TooManyPointsError(LagrangeError):
    """Raised when the permutation expansion would exceed the bitmask width."""

    pass


class SampleFormatError(LagrangeError):
    """Raised for an input line that does not hold an (x, y) pair."""

    pass
