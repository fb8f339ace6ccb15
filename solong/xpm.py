"""Reading XPM images such as the game's sprites.

An XPM file holds C string literals: a header ``"width height ncolors
cpp"``, then one line per colour (``cpp`` key characters, then ``c`` and
a colour) and one line per pixel row.  Pixels come out as ``0xRRGGBB``
integers; transparent pixels (colour ``None``) become ``0xFF000000``.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from solong.colors import parse_text_color

TRANSPARENT = 0xFF000000
_PIXEL_MASK = 0xFFFFFFFF

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")

PathLike = Union[str, "os.PathLike[str]"]


class XpmError(ValueError):
    """The XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels[y][x]`` holds the colour of each pixel."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_outside_quotes(text: str, find: str) -> int:
    inside = False
    for position, char in enumerate(text):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(find, position):
            return position
    return -1


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside strings.

    Comment characters are replaced by spaces, so the length is kept.
    """
    chars = text
    while (begin := _find_outside_quotes(chars, "/*")) != -1:
        end = chars.find("*/", begin + 2)
        stop = len(chars) if end == -1 else end + 2
        chars = chars[:begin] + " " * (stop - begin) + chars[stop:]
    while (begin := _find_outside_quotes(chars, "//")) != -1:
        end = chars.find("\n", begin + 2)
        stop = len(chars) if end == -1 else end + 1
        chars = chars[:begin] + " " * (stop - begin) + chars[stop:]
    return chars


def extract_strings(text: str) -> list[str]:
    """Return the contents of each complete double-quoted string, in order."""
    strings = []
    position = 0
    while True:
        start = text.find('"', position)
        if start == -1:
            break
        end = text.find('"', start + 1)
        if end == -1:
            break
        strings.append(text[start + 1:end])
        position = end + 1
    return strings


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines, what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM string lines, header first."""
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    values = [_atoi(word) for word in header[:4]]
    if len(values) < 4 or any(value <= 0 for value in values):
        raise XpmError("invalid header")
    width, height, ncolors, cpp = values

    # With one or two characters per pixel a later definition of the same
    # key replaces an earlier one; with more, the first definition is kept.
    replace = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour line")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line without colour: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line without colour: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        value = parse_text_color(words[index + 1], end)
        key = line[:cpp]
        if replace:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        row = []
        for x in range(width):
            value = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            row.append(TRANSPARENT if value == -1 else value & _PIXEL_MASK)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def load_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm_lines(extract_strings(strip_comments(text)))


def load_xpm(path: PathLike) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)!r}") from exc
    return load_xpm_text(text)


__all__ = [
    "TRANSPARENT",
    "XpmError",
    "XpmImage",
    "extract_strings",
    "load_xpm",
    "load_xpm_text",
    "parse_xpm_lines",
    "split_words",
    "strip_comments",
]