"""
Error & Warning Types
=====================
Only malformed configuration is a hard failure. Numerical conditions of the
explicit scheme are reported as warnings that the caller may inspect.
"""
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when simulation parameters cannot describe a valid grid or run."""


class StabilityWarning(UserWarning):
    """The explicit step violates rx + ry <= 0.5 and may diverge."""

    def __init__(self, rx: float, ry: float, limit: float = 0.5) -> None:
        self.rx = rx
        self.ry = ry
        self.limit = limit
        super().__init__(
            f"Stability condition violated: rx + ry = {rx + ry:.4g} > {limit:g}. "
            f"Consider reducing dt or increasing dx/dy."
        )

    @property
    def number(self) -> float:
        return self.rx + self.ry


class DegenerateRangeWarning(UserWarning):
    """Every cell of the field holds the same temperature."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Temperature range is degenerate (min == max == {value:g}).")
