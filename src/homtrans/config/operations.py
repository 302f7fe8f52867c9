"""Tolerance specifications for numeric comparisons.

This module defines the ToleranceSpec dataclass that specifies the allowed
range, default and meaning of every tolerance used when comparing
floating-point matrices.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceSpec:
    """Specification for a numeric tolerance.

    Attributes:
        name: Tolerance name (e.g., "orthogonality_atol")
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        default: Default value when not specified
        description: Human-readable description
    """

    name: str
    min_value: float
    max_value: float
    default: float
    description: str = ""

    def validate(self, value: float | None) -> float:
        """Validate and clamp value to allowed range.

        :param value: Value to validate (None selects the default)
        :returns: Clamped value within [min_value, max_value]
        :raises ValueError: If value is not a number
        """
        if value is None:
            return self.default
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError(f"{self.name}: expected number, got {type(value).__name__}")

        # Clamp to range
        return max(self.min_value, min(self.max_value, float(value)))

    def is_within(self, deviation: float, value: float | None = None) -> bool:
        """Check whether a measured deviation is inside the tolerance.

        :param deviation: Absolute deviation to check
        :param value: Tolerance override (None selects the default)
        :returns: True if deviation <= tolerance
        """
        return abs(deviation) <= self.validate(value)

    def __repr__(self) -> str:
        return (
            f"ToleranceSpec({self.name}, "
            f"range=[{self.min_value}, {self.max_value}], "
            f"default={self.default})"
        )
