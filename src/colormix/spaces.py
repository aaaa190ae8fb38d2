"""
Color-space selection.

Maps a ``ColorSpace`` tag to the 3-component numeric form of a color and back.
The conversion math is coloraide's; this module only picks the coloraide space,
orders the axes and rescales them to the conventions below.

Axis conventions::

    RGB    linear sRGB           r, g, b      in [0, 1]
    LAB    CIE L*a*b* (D65)      L* in [0, 1], a*, b* roughly in [-1, 1]
    HSL    hue, sat, lightness   h in [0, 360), s, l in [0, 1]
    HSV    hue, sat, value       h in [0, 360), s, v in [0, 1]
    LUV    CIE L*u*v* (D65)      L* in [0, 1], u*, v* roughly in [-1, 1]
    LCH    polar L*u*v*          L* in [0, 1], C* roughly in [0, 1], h in [0, 360)
    HSLUV  HSLuv                 h in [0, 360), s, l in [0, 1]
    HPLUV  HPLuv                 h in [0, 360), s, l in [0, 1] (pastels only)
    HCL    polar L*a*b*          h in [0, 360), C* roughly in [0, 1], L* in [0, 1]

Ranges are informative only. Out-of-range and out-of-gamut values pass
through unchanged, and an undefined hue (grays) is encoded as 0.
"""

from enum import Enum
from typing import Iterable, NamedTuple, Sequence, Tuple

import numpy as np

from .color import CAColor, Color, ColorLike, make_color


class ColorSpace(Enum):
    RGB = 0
    LAB = 1
    HSL = 2
    HSV = 3
    LUV = 4
    LCH = 5
    HSLUV = 6
    HPLUV = 7
    HCL = 8

    @classmethod
    def parse(cls, name: str) -> "ColorSpace":
        """Look up a space by case-insensitive name, e.g. ``"HSLuv"``."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown color space {name!r}") from None


class _Axes(NamedTuple):
    space_id: str  # coloraide space name
    order: Tuple[int, int, int]  # coloraide coordinate index for each axis
    scale: Tuple[float, float, float]


_AXES = {
    ColorSpace.RGB: _Axes("srgb-linear", (0, 1, 2), (1.0, 1.0, 1.0)),
    ColorSpace.LAB: _Axes("lab-d65", (0, 1, 2), (0.01, 0.01, 0.01)),
    ColorSpace.HSL: _Axes("hsl", (0, 1, 2), (1.0, 1.0, 1.0)),
    ColorSpace.HSV: _Axes("hsv", (0, 1, 2), (1.0, 1.0, 1.0)),
    ColorSpace.LUV: _Axes("luv", (0, 1, 2), (0.01, 0.01, 0.01)),
    ColorSpace.LCH: _Axes("lchuv", (0, 1, 2), (0.01, 0.01, 1.0)),
    ColorSpace.HSLUV: _Axes("hsluv", (0, 1, 2), (1.0, 0.01, 0.01)),
    ColorSpace.HPLUV: _Axes("hpluv", (0, 1, 2), (1.0, 0.01, 0.01)),
    # lch-d65 is (L, C, h); HCL lists it hue first
    ColorSpace.HCL: _Axes("lch-d65", (2, 1, 0), (1.0, 0.01, 0.01)),
}


def encode(color: ColorLike, space: ColorSpace) -> Tuple[float, float, float]:
    """Values of ``color`` in ``space`` as a 3-tuple."""
    axes = _AXES[ColorSpace(space)]
    c = color if isinstance(color, Color) else make_color(color)
    coords = np.nan_to_num(CAColor("srgb", list(c.rgb)).convert(axes.space_id).coords())
    v1, v2, v3 = (float(coords[i]) * s for i, s in zip(axes.order, axes.scale))
    return (v1, v2, v3)


def decode(values: Sequence[float], space: ColorSpace) -> Color:
    """
    Build a color from its values in ``space``.

    Missing trailing values are taken as 0 and extra values are ignored.
    The resulting sRGB channels are not clipped.
    """
    axes = _AXES[ColorSpace(space)]
    padded = [float(v) for v in list(values)[:3]]
    padded += [0.0] * (3 - len(padded))

    coords = [0.0, 0.0, 0.0]
    for value, i, s in zip(padded, axes.order, axes.scale):
        coords[i] = value / s

    r, g, b = np.nan_to_num(CAColor(axes.space_id, coords).convert("srgb").coords())
    return Color(r, g, b)


def encode_many(colors: Iterable[ColorLike], space: ColorSpace) -> np.ndarray:
    """Encode colors into an ``(n, 3)`` matrix, one row per color in order."""
    rows = [encode(c, space) for c in colors]
    if not rows:
        return np.zeros((0, 3))
    return np.array(rows, dtype=float)
