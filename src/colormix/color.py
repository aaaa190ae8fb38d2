"""
Color values carried by palettes.

A ``Color`` is an sRGB device color (channels nominally in [0, 1]) with an
alpha, a mutable mixing ``ratio`` and descriptive metadata. The metadata is
for display only; the optimizer never reads it.

Parsing of CSS color strings is delegated to coloraide::

    from colormix import make_color

    make_color("#c86432")
    make_color((200, 100, 50))
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Tuple, Union

import numpy as np
from coloraide.everything import ColorAll as CAColor

from .errors import ColorValueError


@dataclass
class ColorMeta:
    """Catalog metadata for a color (name, serial number, brand...)."""

    name: str = ""
    alternative_name: str = ""
    serial_no: str = ""
    brand_name: str = ""
    formatter: Optional[Callable[["ColorMeta"], str]] = field(
        default=None, compare=False, repr=False
    )

    def default_format(self) -> str:
        """Alternative name (or name) followed by ``#serial`` when known."""
        name = self.alternative_name or self.name
        if self.serial_no:
            return f"{name}#{self.serial_no}"
        return name

    def __str__(self) -> str:
        if self.formatter is not None:
            return self.formatter(self)
        return self.default_format()


@dataclass
class Color:
    """An sRGB color plus its share (``ratio``) in the current mix."""

    r: float
    g: float
    b: float
    alpha: float = 1.0
    ratio: float = 0.0
    meta: ColorMeta = field(default_factory=ColorMeta)

    def __post_init__(self):
        self.r = float(self.r)
        self.g = float(self.g)
        self.b = float(self.b)
        self.alpha = float(self.alpha)
        self.ratio = float(self.ratio)

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def rgb255(self) -> Tuple[int, int, int]:
        """Clamped 8-bit channels, rounded half up."""
        return rgb_to_uint8(self.rgb)

    @property
    def hex(self) -> str:
        """Normalized ``#rrggbb`` form; the palette identity of the color."""
        r, g, b = self.rgb255()
        return f"#{r:02x}{g:02x}{b:02x}"

    def with_meta(self, **fields) -> "Color":
        """Copy of this color with some metadata fields replaced."""
        return replace(self, meta=replace(self.meta, **fields))

    def __str__(self) -> str:
        text = str(self.meta)
        return text if text else self.hex


ColorLike = Union[Color, str, Tuple[int, ...], list, np.ndarray]


def rgb_to_uint8(rgb) -> Tuple[int, int, int]:
    """Convert float RGB [0,1] to uint8 [0,255]."""
    values = np.floor(np.clip(np.asarray(rgb, dtype=float), 0.0, 1.0) * 255.0 + 0.5)
    r, g, b = (int(v) for v in values)
    return (r, g, b)


def hex_color(text: str) -> Color:
    """Parse a hex (or any CSS) color string."""
    try:
        parsed = CAColor(text).convert("srgb")
    except (ValueError, TypeError) as e:
        raise ColorValueError(f"invalid color string {text!r}") from e
    r, g, b = np.nan_to_num(parsed.coords())
    alpha = parsed.alpha()
    return Color(r, g, b, alpha=1.0 if np.isnan(alpha) else alpha)


def make_color(value: ColorLike) -> Color:
    """
    Build a ``Color`` from any supported color-like value.

    Args:
        value: A ``Color`` (copied, metadata included), a CSS color string,
            or a sequence of 3 or 4 integers in [0, 255] (RGB / RGBA).

    Raises:
        ColorValueError: If the value cannot be interpreted.
    """
    if isinstance(value, Color):
        return replace(value, meta=replace(value.meta))
    if isinstance(value, str):
        return hex_color(value)
    if isinstance(value, (tuple, list, np.ndarray)):
        if len(value) not in (3, 4):
            raise ColorValueError(
                f"expected 3 or 4 channels, got {len(value)}: {value!r}"
            )
        channels = [float(v) / 255.0 for v in value]
        return Color(*channels)
    raise ColorValueError(f"cannot make a color from {type(value).__name__}")
