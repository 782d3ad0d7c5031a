# svgtextbox/core/oracle.py
"""
Shaping oracle: a mutable layout handle answering fit questions for one box and size.
PangoLayoutHandle wraps a Pango layout (PyGObject) and renders through a cairo SVG surface.
Pango is imported on first use; see _pango().
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Callable, Protocol, Sequence

from svgtextbox.core.config import DEFAULT_UNITS, UnitConfig
from svgtextbox.core.error_codes import MarkupError, OracleError
from svgtextbox.core.fonts import Alignment, FontDescriptor
from svgtextbox.core.geometry import Extents

logger = logging.getLogger(__name__)


class LayoutHandle(Protocol):
    """
    One layout owned by one resolution call. Every setter mutates in place;
    later queries reflect the last box and size applied. Not safe to share.
    Box sizes and font sizes are in scaled units.
    """

    def set_box(self, width: int, height: int) -> None: ...

    def box_size(self) -> tuple[int, int]: ...

    def set_font_size(self, size: int) -> None: ...

    def is_ellipsized(self) -> bool: ...

    def ink_extents(self) -> Extents: ...

    def last_visible_index(self) -> int: ...

    def last_character_index(self) -> int: ...

    def vertical_offset(self) -> int: ...

    def render(
        self,
        canvas_width_pt: float | None = None,
        canvas_height_pt: float | None = None,
        x_pt: float = 0.0,
        y_pt: float = 0.0,
    ) -> bytes: ...


LayoutFactory = Callable[[str, FontDescriptor, Alignment, UnitConfig], LayoutHandle]


def _pango():
    """Import Pango and PangoCairo through GObject introspection."""
    try:
        import gi

        gi.require_version("Pango", "1.0")
        gi.require_version("PangoCairo", "1.0")
        from gi.repository import Pango, PangoCairo
    except (ImportError, ValueError) as e:
        raise OracleError(f"Pango is not available: {e}") from e
    return Pango, PangoCairo


def last_char_byte_index(text: str, cursor_positions: Sequence[bool] | None = None) -> int:
    """
    UTF-8 byte offset of the start of the last grapheme of text; -1 for empty text.
    cursor_positions[i] marks a grapheme boundary before character i, as in Pango's
    log attrs; xy_to_index reports indices on these boundaries. Without it every
    character is taken as its own grapheme.
    """
    if not text:
        return -1
    start = len(text) - 1
    if cursor_positions is not None:
        while start > 0 and not cursor_positions[start]:
            start -= 1
    return len(text[:start].encode("utf-8"))


def check_markup(markup: str) -> None:
    """Trial-parse markup with Pango; raise MarkupError(MalformedMarkup) on failure."""
    Pango, _ = _pango()
    from gi.repository import GLib

    try:
        Pango.parse_markup(markup, -1, "\0")
    except GLib.Error as e:
        raise MarkupError("MalformedMarkup", f"Markup rejected by Pango: {e.message}") from e


def _font_description(Pango, font: FontDescriptor):
    fd = Pango.FontDescription.from_string(font.description)
    if font.family:
        fd.set_family(font.family)
    if font.style:
        fd.set_style(getattr(Pango.Style, font.style.upper()))
    if font.weight:
        fd.set_weight(getattr(Pango.Weight, font.weight.upper()))
    if font.variant:
        fd.set_variant(getattr(Pango.Variant, font.variant.upper()))
    if font.stretch:
        fd.set_stretch(getattr(Pango.Stretch, font.stretch.upper()))
    return fd


class PangoLayoutHandle:
    """LayoutHandle backed by a word-wrapping, end-ellipsizing Pango layout."""

    def __init__(
        self,
        markup: str,
        font: FontDescriptor,
        alignment: Alignment = "center",
        units: UnitConfig = DEFAULT_UNITS,
    ) -> None:
        Pango, PangoCairo = _pango()
        self._Pango = Pango
        self._PangoCairo = PangoCairo
        self.units = units
        fontmap = PangoCairo.FontMap.get_default()
        if fontmap is None:
            raise OracleError("No default Pango font map")
        context = fontmap.create_context()
        if context is None:
            raise OracleError("Could not create Pango context")
        layout = Pango.Layout.new(context)
        self._font = _font_description(Pango, font)
        layout.set_font_description(self._font)
        layout.set_ellipsize(Pango.EllipsizeMode.END)
        layout.set_wrap(Pango.WrapMode.WORD)
        layout.set_alignment(
            {
                "left": Pango.Alignment.LEFT,
                "center": Pango.Alignment.CENTER,
                "right": Pango.Alignment.RIGHT,
            }[alignment]
        )
        layout.set_markup(markup, -1)
        self._layout = layout

    def set_box(self, width: int, height: int) -> None:
        self._layout.set_width(width)
        self._layout.set_height(height)

    def box_size(self) -> tuple[int, int]:
        return self._layout.get_width(), self._layout.get_height()

    def set_font_size(self, size: int) -> None:
        self._font.set_size(size)
        self._layout.set_font_description(self._font)

    def is_ellipsized(self) -> bool:
        return bool(self._layout.is_ellipsized())

    def ink_extents(self) -> Extents:
        ink, _logical = self._layout.get_extents()
        return Extents(ink.x, ink.y, ink.width, ink.height)

    def last_visible_index(self) -> int:
        # Byte index of the character nearest the bottom-right corner.
        width, height = self.box_size()
        _inside, index, _trailing = self._layout.xy_to_index(width, height)
        return index

    def last_character_index(self) -> int:
        attrs = self._layout.get_log_attrs()
        return last_char_byte_index(self._layout.get_text(), [a.is_cursor_position for a in attrs])

    def vertical_offset(self) -> int:
        """Shift (scaled) that centres the ink vertically in the box."""
        ink = self.ink_extents()
        surplus = self._layout.get_height() - ink.height
        return surplus // 2 - ink.y

    def render(
        self,
        canvas_width_pt: float | None = None,
        canvas_height_pt: float | None = None,
        x_pt: float = 0.0,
        y_pt: float = 0.0,
    ) -> bytes:
        """
        Draw the layout onto an SVG surface sized in points (defaults to the layout box),
        at (x_pt, y_pt) plus the vertical centring offset.
        """
        import cairo

        width, height = self.box_size()
        if canvas_width_pt is None:
            canvas_width_pt = self.units.scaled_to_pt(width)
        if canvas_height_pt is None:
            canvas_height_pt = self.units.scaled_to_pt(height)
        buf = BytesIO()
        try:
            surface = cairo.SVGSurface(buf, canvas_width_pt, canvas_height_pt)
            cr = cairo.Context(surface)
            cr.move_to(x_pt, y_pt + self.units.scaled_to_pt(self.vertical_offset()))
            self._PangoCairo.show_layout(cr, self._layout)
            surface.finish()
        except cairo.Error as e:
            raise OracleError(f"Could not render SVG surface: {e}") from e
        return buf.getvalue()


def create_layout(
    markup: str,
    font: FontDescriptor,
    alignment: Alignment = "center",
    units: UnitConfig = DEFAULT_UNITS,
) -> LayoutHandle:
    """Default LayoutFactory."""
    logger.debug(f"Creating Pango layout ({len(markup)} chars, font={font.description!r})")
    return PangoLayoutHandle(markup, font, alignment, units)
