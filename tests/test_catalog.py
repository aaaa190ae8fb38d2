"""Tests for catalog CSV loading."""

import io

import pytest

CATALOG = """\
70.926,Carmine,Red,#ff0000
70.942,,Green,#00ff00
short,row
70.930,Ultramarine,Blue,#0000ff
70.999,Other Red,Red Again,#FF0000
"""


def test_load_from_stream():
    from colormix import load_palette_csv

    palette = load_palette_csv(io.StringIO(CATALOG), name="Demo", brand_name="Acme")

    assert palette.name == "Demo"
    assert [c.hex for c in palette] == ["#ff0000", "#00ff00", "#0000ff"]

    red = palette[0]
    assert red.meta.name == "Red"
    assert red.meta.alternative_name == "Carmine"
    assert red.meta.serial_no == "70.926"
    assert red.meta.brand_name == "Acme"
    assert str(red) == "Carmine#70.926"
    assert str(palette[1]) == "Green#70.942"


def test_load_from_path(tmp_path):
    from colormix import load_palette_csv

    path = tmp_path / "catalog.csv"
    path.write_text(CATALOG, encoding="utf-8")

    assert len(load_palette_csv(path)) == 3
    assert len(load_palette_csv(str(path))) == 3


def test_each_load_returns_new_palette(tmp_path):
    from colormix import load_palette_csv

    path = tmp_path / "catalog.csv"
    path.write_text(CATALOG, encoding="utf-8")
    first = load_palette_csv(path)
    second = load_palette_csv(path)
    first.set_ratio(1.0, 0)

    assert first is not second
    assert second[0].ratio == 0.0


def test_invalid_color_names_line():
    from colormix import ColorValueError, load_palette_csv

    bad = "1,a,b,#ff0000\n2,c,d,not-a-color\n"
    with pytest.raises(ColorValueError, match="line 2"):
        load_palette_csv(io.StringIO(bad))
