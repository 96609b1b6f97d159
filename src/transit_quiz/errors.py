"""Exceptions raised by the quiz engine."""

__all__ = ['TransitQuizError', 'InvalidParameterError', 'OutOfRangeSelectionError']


class TransitQuizError(Exception):
    """Base class for quiz engine errors."""


class InvalidParameterError(TransitQuizError, ValueError):
    """A synthesis or task parameter is outside its valid range."""


class OutOfRangeSelectionError(TransitQuizError, ValueError):
    """A selected panel index does not refer to an option of the task."""
