"""Error taxonomy for the projection engine."""


class ValidationError(ValueError):
    """Inputs that cannot be projected: raised before any computation runs."""


class NumericDegeneracy(ArithmeticError):
    """A quantity the waterfall divides by collapsed to zero or below."""
