"""Exceptions raised by the evaluation package."""


class EvaluationError(ValueError):
    """Base class for evaluation errors."""


class InsufficientDataError(EvaluationError):
    """Not enough data for the requested measure (missing class, too few points)."""


class InvalidArgumentError(EvaluationError):
    """Argument outside the accepted domain."""
