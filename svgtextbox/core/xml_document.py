# svgtextbox/core/xml_document.py
"""
Transform an SVG document: every <textbox> element is fitted, rendered and
replaced in place by an <image> embedding the result as a base64 data URI.

    <textbox x="0" y="0" width="200" height="100 200" padding="10" fill="red">
        <markup>Hello <b>World</b></markup>
    </textbox>
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from xml.sax.saxutils import escape, quoteattr

from svgtextbox.core.attributes import request_from_attributes
from svgtextbox.core.config import DEFAULT_UNITS, MARKUP_TAG, TEXTBOX_TAG, UnitConfig
from svgtextbox.core.error_codes import InputValidationError
from svgtextbox.core.markup import MarkupChecker
from svgtextbox.core.oracle import LayoutFactory, create_layout
from svgtextbox.core.render_svg import image_element
from svgtextbox.core.resolver import render_textbox

logger = logging.getLogger(__name__)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _serialize_markup(el: ET.Element) -> str:
    """Inner content of el as Pango markup: namespaces dropped, text re-escaped."""
    parts = [escape(el.text or "")]
    for child in el:
        attrs = "".join(f" {_local(k)}={quoteattr(v)}" for k, v in child.attrib.items())
        name = _local(child.tag)
        parts.append(f"<{name}{attrs}>{_serialize_markup(child)}</{name}>")
        parts.append(escape(child.tail or ""))
    return "".join(parts)


def _markup_of(textbox: ET.Element) -> str:
    for child in textbox:
        if _local(child.tag) == MARKUP_TAG:
            return _serialize_markup(child)
    raise InputValidationError("<textbox> has no <markup> child")


def transform_document(
    src: str | bytes,
    factory: LayoutFactory = create_layout,
    check: MarkupChecker | None = None,
    units: UnitConfig = DEFAULT_UNITS,
) -> bytes:
    """Return the document with all <textbox> elements rendered to <image> elements."""
    try:
        root = ET.fromstring(src)
    except ET.ParseError as e:
        raise InputValidationError(f"Document is not well-formed XML: {e}") from None
    parents = {child: parent for parent in root.iter() for child in parent}
    textboxes = [el for el in root.iter() if _local(el.tag) == TEXTBOX_TAG]
    for n, textbox in enumerate(textboxes):
        parent = parents.get(textbox)
        if parent is None:
            raise InputValidationError("<textbox> cannot be the document root")
        attrs = {_local(k): v for k, v in textbox.attrib.items()}
        attrs.setdefault("__id", f"textbox-{n:02d}")
        request = request_from_attributes(_markup_of(textbox), attrs, check=check)
        result = render_textbox(request, factory, units)
        logger.info(
            f"{request.id}: {result.width_px}x{result.height_px}px at {result.font_size_pt:g}pt"
        )
        image = image_element(result, request.x, request.y)
        image.tail = textbox.tail
        index = list(parent).index(textbox)
        parent.remove(textbox)
        parent.insert(index, image)
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)
