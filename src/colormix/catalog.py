"""
Paint catalog loading.

Catalog CSV files list one color per row, stored right to left::

    serial_no, alternative_name, name, hex

Rows with fewer than four fields are skipped. Each call returns a new
palette; nothing is cached at module level.
"""

import csv
import logging
from pathlib import Path
from typing import TextIO, Union

from .color import hex_color
from .errors import ColorValueError
from .palette import Palette

logger = logging.getLogger(__name__)


def read_palette_csv(
    stream: TextIO, name: str = "", brand_name: str = ""
) -> Palette:
    """Build a palette from an open CSV stream."""
    palette = Palette(name=name)
    for line_no, record in enumerate(csv.reader(stream), start=1):
        if len(record) < 4:
            logger.debug("Skipping line %d: %d fields", line_no, len(record))
            continue
        fields = [f.strip() for f in reversed(record)]
        try:
            color = hex_color(fields[0])
        except ColorValueError as e:
            raise ColorValueError(f"line {line_no}: {e}") from e
        color = color.with_meta(
            name=fields[1],
            alternative_name=fields[2],
            serial_no=fields[3],
            brand_name=brand_name,
        )
        palette.add_colors(color)
    return palette


def load_palette_csv(
    source: Union[str, Path, TextIO], name: str = "", brand_name: str = ""
) -> Palette:
    """
    Load a catalog palette.

    Args:
        source: Path to a CSV file, or an open text stream.
        name: Display name for the palette.
        brand_name: Brand recorded on every color's metadata.

    Raises:
        ColorValueError: If a row's color value is not a valid color.
    """
    if isinstance(source, (str, Path)):
        with open(source, newline="", encoding="utf-8") as f:
            return read_palette_csv(f, name, brand_name)
    return read_palette_csv(source, name, brand_name)
