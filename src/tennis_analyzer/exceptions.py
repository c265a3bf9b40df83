"""Custom exception hierarchy for the tennis session analyzer."""

from __future__ import annotations


class TennisAnalyzerError(ValueError):
    """Base exception for all caller-input defects."""


class SizeMismatchError(TennisAnalyzerError):
    """Two sequences that must line up have incompatible lengths."""

    def __init__(self, message: str, expected: int | None = None, actual: int | None = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class RangeError(TennisAnalyzerError):
    """A duration or intensity value lies outside its valid range."""

    def __init__(
        self,
        field: str,
        index: int,
        value: float,
        lower: float,
        upper: float,
        unit: str = "",
    ) -> None:
        suffix = f" {unit}" if unit else ""
        super().__init__(
            f"{field.capitalize()} at index {index} is out of valid range "
            f"[{lower:g}, {upper:g}]{suffix} (got {value!r})"
        )
        self.field = field
        self.index = index
        self.value = value
        self.lower = lower
        self.upper = upper


class InvalidInputError(TennisAnalyzerError):
    """Input could not be coerced into numeric durations or intensities."""
