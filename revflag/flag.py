"""Rendering of a three-stripe flag from palette indices."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from PIL import Image

from .colors import Color, ParsedColors, get_color_from, parse_colors
from .settings import parse_config, save_config
from .util import is_numerical, log_error, log_info, log_success

SETTINGS_PATH = "assets/settings.cfg"
COLORS_PATH = "assets/colors.txt"
STRIPE_COUNT = 3
BACKGROUND = Color(0, 0, 0, 255)


def parse_stripe_ids(args: Sequence[str]) -> list[int]:
    """Turn up to three command-line arguments into palette indices.

    Missing arguments and arguments that are not integers become 0; the
    latter are reported.
    """
    ids = [0] * STRIPE_COUNT
    for number, arg in enumerate(args[:STRIPE_COUNT], start=1):
        if is_numerical(arg):
            ids[number - 1] = int(arg) if arg else 0
        else:
            log_error(
                f"{arg} is not an integer, using default value 0 for stripe №{number}"
            )
    return ids


def _blend_over(color: Color, base: Color) -> tuple[int, int, int, int]:
    """Alpha-blend ``color`` over ``base`` and return an RGBA tuple."""
    alpha = color.a / 255
    return (
        round(color.r * alpha + base.r * (1 - alpha)),
        round(color.g * alpha + base.g * (1 - alpha)),
        round(color.b * alpha + base.b * (1 - alpha)),
        round(color.a + base.a * (1 - alpha)),
    )


def render_flag(
    colors: ParsedColors,
    stripe_ids: Sequence[int],
    width: int,
    height: int,
) -> Image.Image:
    """Draw vertical stripes of the given palette colours on a black canvas.

    Each stripe is a third of ``width`` wide; columns left over on the right
    stay black. Raises ValueError for a non-positive size.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid flag size {width}x{height}")
    image = Image.new("RGBA", (width, height), _blend_over(BACKGROUND, BACKGROUND))
    stripe_width = width // STRIPE_COUNT
    if stripe_width == 0:
        return image
    for position, idx in enumerate(stripe_ids[:STRIPE_COUNT]):
        fill = _blend_over(get_color_from(colors, idx), BACKGROUND)
        left = stripe_width * position
        image.paste(fill, (left, 0, left + stripe_width, height))
    return image


def saved_filename(save_path: str, stripe_ids: Sequence[int]) -> str:
    """Return the file name a flag with these stripes is saved under."""
    return save_path + " ".join(str(idx) for idx in stripe_ids) + ".png"


def main(argv: Sequence[str] | None = None) -> int:
    """Render the flag chosen on the command line and save it as configured."""
    args = list(sys.argv[1:] if argv is None else argv)

    cfg = parse_config(SETTINGS_PATH)
    palette = parse_colors(COLORS_PATH)
    width = cfg.values["w"].value
    height = cfg.values["h"].value
    save = cfg.values["save"].value
    for error in cfg.errors:
        log_error(error)
    for error in palette.errors:
        log_error(error)
    if cfg.errors or palette.errors:
        return 1

    stripe_ids = parse_stripe_ids(args)
    log_info("Generate IDs: " + " ".join(str(idx) for idx in stripe_ids))

    try:
        image = render_flag(palette, stripe_ids, width, height)
    except ValueError as exc:
        log_error(exc)
        return 1

    filename = saved_filename(cfg.values["save_path"].value, stripe_ids)
    if save == 1:
        try:
            image.save(filename, format="PNG")
        except OSError as exc:
            log_error(f"failed to save revolutionary flag to file '{filename}': {exc}")
        else:
            log_success(f"Successfully saved revolutionary flag to file '{filename}'")
    if cfg.damaged:
        log_info(
            "it appears that program config was damaged or deleted, "
            "saving repaired version..."
        )
        save_config(cfg, SETTINGS_PATH)
    return 0


if __name__ == "__main__":
    sys.exit(main())