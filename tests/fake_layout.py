# tests/fake_layout.py
"""
Deterministic stand-in for the Pango layout: monospace glyphs of width 0.6 * size,
lines of height 1.2 * size, greedy word wrap, end ellipsis when lines overflow the box.
Optionally simulates silently dropped trailing lines at or above a size.
"""

from __future__ import annotations

import html
import re
import unicodedata

from svgtextbox.core.config import DEFAULT_UNITS, UnitConfig
from svgtextbox.core.fonts import FontDescriptor
from svgtextbox.core.geometry import Extents
from svgtextbox.core.oracle import last_char_byte_index

_TAG = re.compile(r"<[^>]+>")
_ZWJ = "\u200d"


def cursor_positions(text: str) -> list[bool]:
    """Grapheme boundaries before each character (and at the end): combining marks,
    variation selectors and ZWJ sequences stay with the preceding character."""
    out = []
    for i, ch in enumerate(text):
        joined = unicodedata.combining(ch) or "\ufe00" <= ch <= "\ufe0f" or ch == _ZWJ
        out.append(i == 0 or not (joined or text[i - 1] == _ZWJ))
    out.append(True)
    return out


class FakeLayout:
    def __init__(
        self,
        markup: str,
        font: FontDescriptor | None = None,
        alignment: str = "center",
        units: UnitConfig = DEFAULT_UNITS,
        drop_lines_from: int | None = None,
    ) -> None:
        self.markup = markup
        self.text = html.unescape(_TAG.sub("", markup))
        self.font = font
        self.alignment = alignment
        self.units = units
        self.drop_lines_from = drop_lines_from
        self.width = 0
        self.height = 0
        self.size = units.pt_to_scaled(10)
        self.boxes: list[tuple[int, int]] = []
        self.sizes_applied: list[int] = []
        self.renders: list[tuple] = []

    def set_box(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self.boxes.append((width, height))

    def box_size(self) -> tuple[int, int]:
        return self.width, self.height

    def set_font_size(self, size: int) -> None:
        self.size = size
        self.sizes_applied.append(size)

    @property
    def char_width(self) -> int:
        return self.size * 6 // 10

    @property
    def line_height(self) -> int:
        return self.size * 12 // 10

    def _lines(self) -> list[tuple[int, int]]:
        """(start, end) character spans of each wrapped line."""
        lines: list[tuple[int, int]] = []
        start = None
        end = 0
        for m in re.finditer(r"\S+", self.text):
            if start is None:
                start, end = m.start(), m.end()
            elif (m.end() - start) * self.char_width <= self.width:
                end = m.end()
            else:
                lines.append((start, end))
                start, end = m.start(), m.end()
        if start is not None:
            lines.append((start, end))
        return lines

    def _shown(self) -> list[tuple[int, int]]:
        lines = self._lines()
        shown = lines[: self.height // self.line_height] if self.line_height else lines
        if (
            self.drop_lines_from is not None
            and self.size >= self.drop_lines_from
            and len(shown) == len(lines)
            and len(lines) > 1
        ):
            return shown[:-1]
        return shown

    def is_ellipsized(self) -> bool:
        lines = self._lines()
        return len(lines) > self.height // max(1, self.line_height)

    def ink_extents(self) -> Extents:
        shown = self._shown()
        if not shown:
            return Extents(0, 0, 0, 0)
        w = max((e - s) * self.char_width for s, e in shown)
        return Extents(0, 0, w, len(shown) * self.line_height)

    def last_visible_index(self) -> int:
        # Byte index of the grapheme holding the last shown character.
        shown = self._shown()
        if not shown:
            return 0
        return last_char_byte_index(self.text[: shown[-1][1]], cursor_positions(self.text))

    def last_character_index(self) -> int:
        text = self.text.rstrip()
        return last_char_byte_index(text, cursor_positions(text))

    def vertical_offset(self) -> int:
        ink = self.ink_extents()
        return (self.height - ink.height) // 2 - ink.y

    def render(self, canvas_width_pt=None, canvas_height_pt=None, x_pt=0.0, y_pt=0.0) -> bytes:
        w = canvas_width_pt if canvas_width_pt is not None else self.units.scaled_to_pt(self.width)
        h = canvas_height_pt if canvas_height_pt is not None else self.units.scaled_to_pt(self.height)
        self.renders.append((w, h, x_pt, y_pt))
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w:g}pt" height="{h:g}pt" viewBox="0 0 {w:g} {h:g}">'
            f'<defs><g id="glyph-0-0"/></defs><g id="text" transform="translate({x_pt:g},{y_pt:g})"/></svg>'
        ).encode("utf-8")


class FakeFactory:
    """LayoutFactory that records the layouts it creates."""

    def __init__(self, **layout_kwargs) -> None:
        self.layout_kwargs = layout_kwargs
        self.created: list[FakeLayout] = []

    def __call__(self, markup, font, alignment, units) -> FakeLayout:
        layout = FakeLayout(markup, font, alignment, units, **self.layout_kwargs)
        self.created.append(layout)
        return layout


def no_check(markup: str) -> None:
    """Markup checker that accepts everything."""
    return None
