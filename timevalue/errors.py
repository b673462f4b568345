"""Exceptions raised by the time-value-of-money engine."""


class TimeValueError(Exception):
    """Base exception for time-value calculation errors."""

    pass


class InvalidDomainError(TimeValueError, ValueError):
    """Raised when an input lies outside the domain of a formula.

    Examples are a rate at or below -1, a negative or zero period count
    where one is required, or a period index outside ``[1, nper]``.
    """

    pass


class UndefinedError(TimeValueError, ValueError):
    """Raised when the question has no answer for the given inputs."""

    pass


class DidNotConvergeError(TimeValueError, RuntimeError):
    """
    Raised when an iterative solver exhausts its iteration budget.

    Args:
        message: Human readable description.
        last_estimate: Last iterate produced by the solver.
        iterations: Number of iterations performed.
    """

    def __init__(self, message: str, last_estimate: float, iterations: int) -> None:
        super().__init__(message)
        self.last_estimate = last_estimate
        self.iterations = iterations
