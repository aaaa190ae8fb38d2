"""
colormix — find the mixing ratios of a palette that reproduce a color.

Blends the palette colors as weighted sums in a chosen color space (linear
RGB, CIE Lab, HSLuv...) and solves for non-negative weights summing to one.

Quick start::

    from colormix import ColorSpace, Palette, mix

    palette = Palette("#ff0000", "#00ff00", "#0000ff", "#ffffff", "#000000")
    mixed, error = mix("#c86432", palette, ColorSpace.RGB)
    for color in palette:
        print(color.hex, f"{color.ratio:.0%}")
"""

from .color import Color, ColorMeta, hex_color, make_color, rgb_to_uint8
from .errors import (
    ColorMixError,
    ColorValueError,
    EmptyPaletteError,
    OptimizationError,
)
from .spaces import ColorSpace, decode, encode, encode_many
from .palette import Palette
from .optimizer import (
    RatioSolver,
    color_distance,
    color_gradient,
    compute_color_ratios,
    match_error,
    mix_colors,
)
from .mix import MixResult, mix, mix_result
from .catalog import load_palette_csv

__all__ = [
    # Colors
    "Color",
    "ColorMeta",
    "hex_color",
    "make_color",
    "rgb_to_uint8",
    # Spaces
    "ColorSpace",
    "encode",
    "decode",
    "encode_many",
    # Palettes
    "Palette",
    "load_palette_csv",
    # Optimizer
    "RatioSolver",
    "compute_color_ratios",
    "color_distance",
    "color_gradient",
    "mix_colors",
    "match_error",
    # Mixing
    "mix",
    "mix_result",
    "MixResult",
    # Errors
    "ColorMixError",
    "ColorValueError",
    "EmptyPaletteError",
    "OptimizationError",
]
