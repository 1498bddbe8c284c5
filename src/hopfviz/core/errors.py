"""
Exception hierarchy for hopfviz.

Exports:
    - HopfvizError: Base class for all package errors.
    - DegenerateFiberError: Ring fit requested too close to the pole of S².
    - InvalidPointError: Base point cannot be brought onto S².
    - ConfigError: Missing or malformed configuration file.
"""

__all__ = [
    "HopfvizError",
    "DegenerateFiberError",
    "InvalidPointError",
    "ConfigError",
]


class HopfvizError(Exception):
    """Base class for hopfviz errors."""


class DegenerateFiberError(HopfvizError):
    """
    The closed-form ring for a base point does not exist.

    Raised when alpha is within the pole tolerance of +1 or -1, where the
    stereographic image of the fiber passes through infinity.
    """

    def __init__(self, point, alpha: float, message: str = None):
        self.point = tuple(float(c) for c in point)
        self.alpha = float(alpha)
        if message is None:
            message = (
                f"Fiber over {self.point} is degenerate (alpha={self.alpha:.9f}); "
                "base point is too close to a pole"
            )
        super().__init__(message)


class InvalidPointError(HopfvizError, ValueError):
    """Zero-length or non-finite base point."""


class ConfigError(HopfvizError):
    """Configuration could not be loaded or validated."""
