# svgtextbox/core/io.py
"""
Load text box requests from JSON config files and SVG documents from disk.
A JSON config is one object or a list of objects, each with a "markup" key
plus the same keys as <textbox> attributes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from svgtextbox.core.attributes import request_from_attributes
from svgtextbox.core.error_codes import InputValidationError
from svgtextbox.core.markup import MarkupChecker
from svgtextbox.core.types import TextBoxRequest


def _resolve_path(path: str | Path, base_dir: Path | None) -> Path:
    """Resolve path; if relative, against base_dir (or cwd if base_dir is None)."""
    p = Path(path)
    if not p.is_absolute() and base_dir is not None:
        p = base_dir / p
    return p.resolve()


def read_text_file(path: str | Path, base_dir: Path | None = None) -> str:
    """Read a UTF-8 file; FileNotFoundError if missing."""
    resolved = _resolve_path(path, base_dir)
    if not resolved.exists():
        raise FileNotFoundError(f"Input file not found: {resolved}")
    return resolved.read_text(encoding="utf-8")


def requests_from_config(data: Any, check: MarkupChecker | None = None) -> list[TextBoxRequest]:
    """Convert parsed JSON (object or list of objects) into requests."""
    items = data if isinstance(data, list) else [data]
    out: list[TextBoxRequest] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise InputValidationError(f"Config entry {i} is not an object")
        attrs = dict(item)
        if "markup" not in attrs:
            raise InputValidationError(f"Config entry {i} has no 'markup'")
        markup = attrs.pop("markup")
        attrs.setdefault("__id", f"textbox-{i:02d}")
        out.append(request_from_attributes(str(markup), attrs, check=check))
    return out


def load_config(
    path: str | Path,
    base_dir: Path | None = None,
    check: MarkupChecker | None = None,
) -> list[TextBoxRequest]:
    """
    Load a JSON config file into text box requests.
    Raises FileNotFoundError if missing, InputValidationError if malformed.
    """
    text = read_text_file(path, base_dir)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputValidationError(f"Config is not valid JSON: {e}") from None
    return requests_from_config(data, check=check)
