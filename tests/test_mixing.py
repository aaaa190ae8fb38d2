"""End-to-end tests for mix()."""

import numpy as np
import pytest

from colormix import ColorSpace, encode, match_error

BASE_HEXES = ["#e6194b", "#3cb44b", "#4363d8", "#ffe119"]


def primaries_palette():
    from colormix import Palette

    return Palette(
        (255, 0, 0, 255),  # red
        (0, 255, 0, 255),  # green
        (0, 0, 255, 255),  # blue
        (255, 255, 255, 255),  # white
        (0, 0, 0, 255),  # black
    )


def test_import():
    """Package imports successfully."""
    from colormix import mix, Palette, ColorSpace, RatioSolver

    assert mix is not None
    assert len(ColorSpace) == 9


def test_mix_matches_target_in_rgb():
    """The reference mix: (200, 100, 50) from red, green, blue, white, black."""
    from colormix import mix, make_color

    target = (200, 100, 50, 255)
    palette = primaries_palette()

    mixed, error = mix(target, palette, ColorSpace.RGB)

    assert make_color(target).hex == "#c86432"
    assert mixed.hex == "#c86432", f"mixed {mixed.hex}, expected #c86432"
    assert error < 1e-6

    expected = {"#ff0000": 0.56, "#00ff00": 0.11, "#0000ff": 0.01,
                "#ffffff": 0.02, "#000000": 0.30}
    for color in palette:
        assert abs(color.ratio - expected[color.hex]) <= 0.05, (
            f"{color.hex}: {color.ratio:.0%}, expected ~{expected[color.hex]:.0%}"
        )


@pytest.mark.parametrize("space", list(ColorSpace))
def test_ratios_sum_to_one(space):
    """Ratios written onto the palette are non-negative and sum to 1."""
    from colormix import Palette, decode, mix

    palette = Palette(*BASE_HEXES)
    weights = np.array([0.4, 0.3, 0.2, 0.1])
    target = decode(weights @ palette.dense(space), space)

    _, error = mix(target, palette, space)
    ratios = palette.ratios()

    assert np.all(ratios >= 0.0)
    assert np.isclose(np.sum(ratios), 1.0, atol=1e-6)

    # error is the in-space distance of the mix that was written back
    expected = match_error(ratios, palette.dense(space), np.array(encode(target, space)))
    assert error == pytest.approx(expected, abs=1e-12)


@pytest.mark.parametrize("space", [ColorSpace.RGB, ColorSpace.LAB, ColorSpace.LUV])
def test_exact_mix_recovered(space):
    """In spaces without a hue axis an exact mix of the palette is found again."""
    from colormix import Palette, decode, mix

    palette = Palette(*BASE_HEXES)
    target = decode(np.array([0.4, 0.3, 0.2, 0.1]) @ palette.dense(space), space)

    mixed, error = mix(target, palette, space)

    assert error < 1e-6
    assert np.allclose(mixed.rgb, target.rgb, atol=1e-4), (
        f"{space.name}: mixed {mixed.rgb}, target {target.rgb}"
    )


def test_target_outside_palette_in_hue_space():
    """Magenta from red and green in HSV: the best fit needs a negative
    weight, but the written ratios stay non-negative."""
    from colormix import Palette, mix

    palette = Palette("#ff0000", "#00ff00")
    mixed, error = mix("#ff00ff", palette, ColorSpace.HSV)
    ratios = palette.ratios()

    assert np.all(ratios >= 0.0)
    assert np.sum(ratios) == pytest.approx(1.0)
    assert np.allclose(ratios, [0.0, 1.0])
    assert mixed.hex == "#00ff00"
    assert np.isfinite(error)


@pytest.mark.parametrize("space", list(ColorSpace))
def test_single_color_palette(space):
    """With one color available its ratio is 1 and the mix is that color."""
    from colormix import Palette, mix

    palette = Palette("#c86432")
    mixed, _ = mix("#336699", palette, space)

    assert palette[0].ratio == pytest.approx(1.0)
    assert mixed.hex == "#c86432"


def test_target_equal_to_palette_entry_dominates():
    """Mixing a palette color itself gives that color the largest ratio."""
    from colormix import Palette, mix

    palette = Palette("#ff0000", "#00ff00", "#0000ff")
    mix("#ff0000", palette, ColorSpace.RGB)
    ratios = palette.ratios()

    assert np.argmax(ratios) == 0
    assert ratios[0] > 0.9
    assert np.all(ratios[1:] < ratios[0])


def test_mix_is_deterministic():
    """Identical inputs give identical ratios."""
    from colormix import Palette, mix

    first = Palette(*BASE_HEXES)
    second = Palette(*BASE_HEXES)
    color1, error1 = mix("#8a6d3b", first, ColorSpace.LAB)
    color2, error2 = mix("#8a6d3b", second, ColorSpace.LAB)

    assert np.allclose(first.ratios(), second.ratios())
    assert np.allclose(color1.rgb, color2.rgb)
    assert error1 == pytest.approx(error2)


def test_empty_palette_rejected():
    """An empty palette fails before optimization."""
    from colormix import EmptyPaletteError, Palette, mix

    with pytest.raises(EmptyPaletteError):
        mix("#c86432", Palette(), ColorSpace.RGB)


def test_failed_mix_leaves_ratios_untouched():
    """When the minimizer gives up, the palette keeps its old ratios."""
    from colormix import OptimizationError, Palette, RatioSolver, mix

    palette = Palette("#ff0000", "#0000ff")
    palette.set_ratios([0.25, 0.75])

    with pytest.raises(OptimizationError) as excinfo:
        mix("#800080", palette, ColorSpace.RGB, RatioSolver(options={"maxiter": 1}))

    assert excinfo.value.result is not None
    assert np.allclose(palette.ratios(), [0.25, 0.75])


def test_mix_result_reports_ratios():
    """mix_result() returns the same ratios it writes onto the palette."""
    from colormix import Palette, mix_result

    palette = primaries_palette()
    result = mix_result("#c86432", palette)

    assert result.space is ColorSpace.RGB
    assert result.color.hex == "#c86432"
    assert np.allclose(result.ratios, palette.ratios())
