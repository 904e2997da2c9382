"""Parsing of the colour palette file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntFlag

from .util import is_numerical, log_error, read_file

COLOR_OFFSET_BITS = 8
_UINT64_MAX = (1 << 64) - 1
_DIGITS = frozenset("0123456789")


class FillMode(IntFlag):
    """Channels that a number in the palette file is written to."""

    NOTHING = 0
    R = 1 << 3
    G = 1 << 2
    B = 1 << 1
    A = 1 << 0


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def to_int(self) -> int:
        """Pack the colour as a 32-bit ``0xRRGGBBAA`` integer."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    @classmethod
    def from_int(cls, value: int) -> Color:
        """Unpack a 32-bit ``0xRRGGBBAA`` integer."""
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )


DEFAULT_COLOR = Color(0, 0, 0, 255)

_CHANNEL_SHIFTS = (
    (FillMode.R, 3 * COLOR_OFFSET_BITS),
    (FillMode.G, 2 * COLOR_OFFSET_BITS),
    (FillMode.B, 1 * COLOR_OFFSET_BITS),
    (FillMode.A, 0),
)

_CHANNEL_LETTERS = {
    "a": FillMode.A, "A": FillMode.A,
    "r": FillMode.R, "R": FillMode.R,
    "g": FillMode.G, "G": FillMode.G,
    "b": FillMode.B, "B": FillMode.B,
}


@dataclass
class ParsedColors:
    """Result of parsing a palette file."""

    errors: list[str] = field(default_factory=list)
    colors: list[Color] = field(default_factory=list)


def fill_color(value: str, fill_mode: FillMode | int, color: Color) -> Color:
    """Return ``color`` with the channels in ``fill_mode`` set to ``value``.

    The number is truncated to eight bits. A non-numerical value is logged and
    leaves the colour unchanged; an empty or out-of-range value raises ValueError.
    """
    if not is_numerical(value):
        log_error(f"{value} is not a number")
        return color
    if not value:
        raise ValueError("empty colour value")
    number = int(value)
    if number > _UINT64_MAX:
        raise ValueError(f"colour value {value} is out of range")
    channel = number & 0xFF

    packed = color.to_int()
    for mode, shift in _CHANNEL_SHIFTS:
        if mode & fill_mode:
            packed &= ~(0xFF << shift) & 0xFFFFFFFF
            packed |= channel << shift
    return Color.from_int(packed)


def parse_colors(path: str | os.PathLike) -> ParsedColors:
    """Read the palette file at ``path``, one colour per line."""
    result = ParsedColors()
    color = DEFAULT_COLOR
    token = ""
    fill_mode = FillMode.NOTHING
    met_color = False
    comment = False

    for ch in read_file(path).decode("latin-1"):
        if comment and ch != "\n":
            continue
        if ch in _DIGITS:
            met_color = True
            token += ch
        elif ch in _CHANNEL_LETTERS:
            fill_mode |= _CHANNEL_LETTERS[ch]
        elif ch == ",":
            if met_color:
                color = fill_color(token, fill_mode, color)
                token = ""
                fill_mode = FillMode.NOTHING
        elif ch in "#\n":
            comment = ch == "#"
            if met_color:
                result.colors.append(fill_color(token, fill_mode, color))
                color = DEFAULT_COLOR
                token = ""
                met_color = False
                fill_mode = FillMode.NOTHING

    return result


def get_color_from(colors: ParsedColors, idx: int) -> Color:
    """Return the colour at ``idx``, or the default colour if there is none."""
    if 0 <= idx < len(colors.colors):
        return colors.colors[idx]
    return DEFAULT_COLOR