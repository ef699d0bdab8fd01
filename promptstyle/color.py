"""Terminal colors used by style sheets.

The 16 named colors are supported by almost every terminal. ``Rgb`` (truecolor)
and ``AnsiValue`` (the 256-color palette) need a more modern one.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from rich.color import Color as RichColor

from .errors import InvalidColorError


class Color(Enum):
    """Named terminal colors.

    Plain names are the light variants, ``DARK_*`` the dark ones.
    """

    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


def _check_byte(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidColorError(value, f"{label} must be an integer")
    if value < 0 or value > 255:
        raise InvalidColorError(value, f"{label} must be between 0 and 255")
    return value


@dataclass(frozen=True)
class Rgb:
    """A 24-bit truecolor value."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        _check_byte(self.r, "red channel")
        _check_byte(self.g, "green channel")
        _check_byte(self.b, "blue channel")


@dataclass(frozen=True)
class AnsiValue:
    """An entry of the 256-color ANSI palette."""

    index: int

    def __post_init__(self):
        _check_byte(self.index, "ANSI index")


ColorLike = Union[Color, Rgb, AnsiValue]

# Named color -> rich standard color name (ANSI palette 0..15).
_RICH_NAMES: Dict[Color, str] = {
    Color.BLACK: "black",
    Color.DARK_RED: "red",
    Color.DARK_GREEN: "green",
    Color.DARK_YELLOW: "yellow",
    Color.DARK_BLUE: "blue",
    Color.DARK_MAGENTA: "magenta",
    Color.DARK_CYAN: "cyan",
    Color.GREY: "white",
    Color.DARK_GREY: "bright_black",
    Color.RED: "bright_red",
    Color.GREEN: "bright_green",
    Color.YELLOW: "bright_yellow",
    Color.BLUE: "bright_blue",
    Color.MAGENTA: "bright_magenta",
    Color.CYAN: "bright_cyan",
    Color.WHITE: "bright_white",
}


def is_color(value: Any) -> bool:
    """Return True if ``value`` is one of the color variants."""
    return isinstance(value, (Color, Rgb, AnsiValue))


def to_rich_color(color: ColorLike) -> RichColor:
    """Convert a color into the equivalent ``rich`` color."""
    if isinstance(color, Color):
        return RichColor.parse(_RICH_NAMES[color])
    if isinstance(color, Rgb):
        return RichColor.from_rgb(color.r, color.g, color.b)
    if isinstance(color, AnsiValue):
        return RichColor.from_ansi(color.index)
    raise TypeError(f"Expected a color, got {type(color).__name__}")


# ── Textual forms (theme files) ──

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{6})$")
_RGB_RE = re.compile(r"^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$", re.IGNORECASE)
_ANSI_RE = re.compile(r"^(?:ansi\(\s*(\d+)\s*\)|(\d+))$", re.IGNORECASE)


def _normalize_name(name: str) -> str:
    key = re.sub(r"[\s\-]+", "_", name.strip().lower())
    return key.replace("gray", "grey")


def parse_color(value: Any) -> ColorLike:
    """Read a color from a theme-file value.

    Accepts a color instance, a color name (``"dark-grey"``, ``"Cyan"``),
    ``"#rrggbb"``, ``"rgb(r, g, b)"``, ``"ansi(n)"``, an integer palette index,
    a ``[r, g, b]`` list or a ``{r, g, b}`` mapping.
    """
    if is_color(value):
        return value
    if isinstance(value, bool):
        raise InvalidColorError(value)
    if isinstance(value, int):
        return AnsiValue(value)
    if isinstance(value, (list, tuple)):
        if len(value) != 3:
            raise InvalidColorError(value, "expected three channels")
        return Rgb(*value)
    if isinstance(value, dict):
        try:
            return Rgb(value["r"], value["g"], value["b"])
        except KeyError as e:
            raise InvalidColorError(value, f"missing channel {e.args[0]!r}") from None
    if not isinstance(value, str):
        raise InvalidColorError(value)

    text = value.strip()
    match = _HEX_RE.match(text)
    if match:
        raw = match.group(1)
        return Rgb(int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16))
    match = _RGB_RE.match(text)
    if match:
        return Rgb(*(int(part) for part in match.groups()))
    match = _ANSI_RE.match(text)
    if match:
        return AnsiValue(int(match.group(1) or match.group(2)))
    try:
        return Color(_normalize_name(text))
    except ValueError:
        raise InvalidColorError(value, "unknown color name") from None


def format_color(color: ColorLike) -> Union[str, int]:
    """Inverse of :func:`parse_color`."""
    if isinstance(color, Color):
        return color.value
    if isinstance(color, Rgb):
        return f"#{color.r:02x}{color.g:02x}{color.b:02x}"
    if isinstance(color, AnsiValue):
        return color.index
    raise TypeError(f"Expected a color, got {type(color).__name__}")
