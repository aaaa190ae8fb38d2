"""
Exceptions raised by colormix.

Every failure of the mixing core is reported as one of these; nothing in the
package prints a warning and carries on.
"""

from typing import Optional

from scipy.optimize import OptimizeResult


class ColorMixError(Exception):
    """Base class for all colormix errors."""


class ColorValueError(ColorMixError, ValueError):
    """A value could not be interpreted as a color."""


class EmptyPaletteError(ColorMixError, ValueError):
    """Raised before optimization when the palette has no colors."""

    def __init__(self, message: str = "palette has no colors to mix"):
        super().__init__(message)


class OptimizationError(ColorMixError):
    """
    The minimizer did not converge or produced non-finite numbers.

    Attributes:
        message: Diagnostic text, usually the minimizer's own message.
        result: The raw ``OptimizeResult`` when one is available.
    """

    def __init__(self, message: str, result: Optional[OptimizeResult] = None):
        self.message = message
        self.result = result
        super().__init__(f"optimization failed: {message}")
