#!/usr/bin/env python3
"""
Mixing Demo

Finds the ratios of a small paint palette that reproduce a few target
colors, in several color spaces.

Usage:
    python examples/mix_demo.py
    python examples/mix_demo.py --catalog paints.csv --brand "Acme" --space lab
"""

import argparse

from colormix import ColorSpace, OptimizationError, Palette, load_palette_csv, mix


def primaries() -> Palette:
    return Palette(
        "#ff0000",  # red
        "#00ff00",  # green
        "#0000ff",  # blue
        "#ffffff",  # white
        "#000000",  # black
        name="Primaries",
    )


def show_mix(target, palette: Palette, space: ColorSpace):
    try:
        mixed, error = mix(target, palette, space)
    except OptimizationError as e:
        print(f"  {space.name}: {e}")
        return

    print(f"\n  {space.name}: mixed {mixed.hex}  (error {error:.2e})")
    for color in palette:
        if color.ratio >= 0.005:
            print(f"    {str(color):24s} {color.hex}: {color.ratio * 100:5.1f}%")


def main():
    parser = argparse.ArgumentParser(description="Match colors with a palette")
    parser.add_argument("--catalog", type=str, default=None, help="Catalog CSV file")
    parser.add_argument("--brand", type=str, default="", help="Catalog brand name")
    parser.add_argument(
        "--space",
        type=str,
        action="append",
        default=None,
        help="Color space (repeatable, default: rgb, lab, hsluv)",
    )
    parser.add_argument("targets", nargs="*", default=["#c86432", "#2e8b57", "#d8bfd8"])
    args = parser.parse_args()

    if args.catalog:
        palette = load_palette_csv(args.catalog, name=args.catalog, brand_name=args.brand)
    else:
        palette = primaries()
    spaces = [ColorSpace.parse(s) for s in (args.space or ["rgb", "lab", "hsluv"])]

    print("=" * 60)
    print(f" {palette.name}: {len(palette)} colors")
    print("=" * 60)

    for target in args.targets:
        print(f"\nTarget: {target}")
        print("-" * 60)
        for space in spaces:
            show_mix(target, palette, space)


if __name__ == "__main__":
    main()
