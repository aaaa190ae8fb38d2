"""
Mix a palette to match a target color.

API::

    mix(target, palette, space) -> (mixed_color, error)

On success every palette entry's ``ratio`` holds its share of the mix. On
failure the error propagates and the ratios are left as they were.

Calls on the same palette must be serialized by the caller: the ratio
write-back is a plain loop over the entries.
"""

from typing import NamedTuple, Optional, Tuple

import numpy as np

from .color import Color, ColorLike, make_color
from .errors import EmptyPaletteError
from .optimizer import RatioSolver, mix_colors
from .palette import Palette
from .spaces import ColorSpace, decode, encode


class MixResult(NamedTuple):
    color: Color
    error: float
    ratios: np.ndarray
    space: ColorSpace


def mix_result(
    target: ColorLike,
    palette: Palette,
    space: ColorSpace = ColorSpace.RGB,
    solver: Optional[RatioSolver] = None,
) -> MixResult:
    """
    Like ``mix()``, but also returns the ratios and the space used.

    Args:
        target: Color to reproduce (anything ``make_color`` accepts).
        palette: Base colors; their ratios are overwritten on success.
        space: Space in which colors are blended and compared.
        solver: Minimizer to use (``RatioSolver()`` when omitted).

    Raises:
        EmptyPaletteError: If the palette has no colors.
        OptimizationError: If the minimizer fails.
    """
    if len(palette) == 0:
        raise EmptyPaletteError()
    space = ColorSpace(space)
    solver = solver if solver is not None else RatioSolver()

    target_dense = np.array(encode(make_color(target), space))
    colors_dense = palette.dense(space)

    ratios, error = solver.solve(colors_dense, target_dense)
    palette.set_ratios(ratios)

    mixed = decode(mix_colors(ratios, colors_dense), space)
    return MixResult(mixed, error, ratios, space)


def mix(
    target: ColorLike,
    palette: Palette,
    space: ColorSpace = ColorSpace.RGB,
    solver: Optional[RatioSolver] = None,
) -> Tuple[Color, float]:
    """
    Mix the palette colors in the proportions that best match ``target``.

    Returns:
        The mixed color, decoded from ``space``, and its squared distance to
        the target in ``space``.
    """
    result = mix_result(target, palette, space, solver)
    return result.color, result.error
