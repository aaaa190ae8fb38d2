"""
Palettes: ordered sets of base colors, unique by hex.

A palette owns copies of the colors it is given. Each entry carries a
``ratio`` that ``mix()`` overwrites; ratios mean nothing before a mix ran.
"""

from typing import Dict, Iterator, List, Sequence

import numpy as np

from .color import Color, ColorLike, make_color
from .spaces import ColorSpace, encode_many


class Palette:
    """
    Named color palette.

    Later colors whose hex matches an earlier entry are dropped::

        palette = Palette("#ff0000", (255, 0, 0), "#0000ff")
        len(palette)  # 2
    """

    def __init__(self, *colors: ColorLike, name: str = ""):
        self.name = name
        self._colors: List[Color] = []
        self._index: Dict[str, int] = {}
        self.add_colors(*colors)

    def add_colors(self, *colors: ColorLike) -> "Palette":
        """Append colors not already present, keeping order. Returns self."""
        for value in colors:
            color = make_color(value)
            key = color.hex
            if key in self._index:
                continue
            self._index[key] = len(self._colors)
            self._colors.append(color)
        return self

    def set_ratio(self, ratio: float, idx: int):
        """Set the ratio of the entry at ``idx``."""
        if not 0 <= idx < len(self._colors):
            raise IndexError(
                f"palette index {idx} out of range for {len(self._colors)} colors"
            )
        self._colors[idx].ratio = float(ratio)

    def set_ratios(self, ratios: Sequence[float]):
        """Set every entry's ratio, in palette order."""
        ratios = np.asarray(ratios, dtype=float)
        if ratios.shape != (len(self._colors),):
            raise ValueError(
                f"expected {len(self._colors)} ratios, got shape {ratios.shape}"
            )
        for color, ratio in zip(self._colors, ratios):
            color.ratio = float(ratio)

    def ratios(self) -> np.ndarray:
        return np.array([c.ratio for c in self._colors], dtype=float)

    def colors(self) -> List[Color]:
        """The palette entries in order (the owned objects, not copies)."""
        return list(self._colors)

    def dense(self, space: ColorSpace) -> np.ndarray:
        """``(n, 3)`` matrix of the entries' values in ``space``."""
        return encode_many(self._colors, space)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __getitem__(self, idx: int) -> Color:
        return self._colors[idx]

    def __contains__(self, value) -> bool:
        try:
            key = make_color(value).hex
        except ValueError:
            return False
        return key in self._index

    def __repr__(self) -> str:
        name = f"{self.name!r}, " if self.name else ""
        return f"Palette({name}{len(self)} colors)"
