# svgtextbox/core/render_svg.py
"""
Post-process rendered text box SVG: background rect and border lines,
base64 / data-URI / <image> embedding, file export.
Sizes passed here are in SVG user units (pt, as written by the cairo surface).
"""

from __future__ import annotations

import base64
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Mapping

from svgtextbox.core.config import SVG_NS, XLINK_NS
from svgtextbox.core.error_codes import OracleError
from svgtextbox.core.types import RenderResult

ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

_RESERVED_RECT_ATTRS = ("x", "y")


def _fmt(v: float) -> str:
    """Compact number for attributes: 75.0 -> '75', 7.5 -> '7.5'."""
    return f"{v:.4f}".rstrip("0").rstrip(".")


def _parse(svg: bytes) -> ET.Element:
    try:
        return ET.fromstring(svg)
    except ET.ParseError as e:
        raise OracleError(f"Rendered SVG could not be parsed: {e}") from e


def _insert_index(root: ET.Element) -> int:
    """Position right after <defs>, or at the start when there is none."""
    for i, child in enumerate(root):
        if child.tag in (f"{{{SVG_NS}}}defs", "defs"):
            return i + 1
    return 0


def background_elements(
    width: float,
    height: float,
    attrs: Mapping[str, str] | None = None,
    border_top: str | None = None,
    border_bottom: str | None = None,
) -> list[ET.Element]:
    """Background rect covering (0, 0, width, height) plus optional top/bottom lines."""
    rect_attrs = {k: str(v) for k, v in (attrs or {}).items() if k not in _RESERVED_RECT_ATTRS}
    rect_attrs.update({"x": "0", "y": "0", "width": _fmt(width), "height": _fmt(height)})
    out = [ET.Element(f"{{{SVG_NS}}}rect", rect_attrs)]
    for style, y in ((border_top, 0.0), (border_bottom, height)):
        if style is None:
            continue
        out.append(
            ET.Element(
                f"{{{SVG_NS}}}line",
                {"x1": "0", "y1": _fmt(y), "x2": _fmt(width), "y2": _fmt(y), "style": style},
            )
        )
    return out


def insert_background(
    svg: bytes,
    width: float,
    height: float,
    attrs: Mapping[str, str] | None = None,
    border_top: str | None = None,
    border_bottom: str | None = None,
) -> bytes:
    """Return svg with the background drawn beneath the text (inserted after <defs>)."""
    root = _parse(svg)
    index = _insert_index(root)
    group = ET.Element(f"{{{SVG_NS}}}g")
    group.extend(background_elements(width, height, attrs, border_top, border_bottom))
    root.insert(index, group)
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def to_base64(svg: bytes) -> str:
    return base64.b64encode(svg).decode("ascii")


def to_data_uri(svg: bytes) -> str:
    return f"data:image/svg+xml;base64,{to_base64(svg)}"


def image_element(result: RenderResult, x: int = 0, y: int = 0) -> ET.Element:
    """<image> element embedding the result at (x, y), sized in px."""
    return ET.Element(
        f"{{{SVG_NS}}}image",
        {
            "x": str(x),
            "y": str(y),
            "width": str(result.width_px),
            "height": str(result.height_px),
            f"{{{XLINK_NS}}}href": to_data_uri(result.svg),
        },
    )


def to_image_tag(result: RenderResult, x: int = 0, y: int = 0) -> str:
    """Standalone <image .../> tag string."""
    return ET.tostring(image_element(result, x, y), encoding="unicode")


def write_svg(result: RenderResult, out_path: str | Path) -> Path:
    """Write result SVG bytes to out_path (parent dirs created). Returns the path."""
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(result.svg)
    return p
