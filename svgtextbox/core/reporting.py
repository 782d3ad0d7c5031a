# svgtextbox/core/reporting.py
"""
Summaries of fitted text boxes for fit_report.json: chosen sizes, font size,
padding, plus a run metadata snapshot of the unit configuration.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from svgtextbox.core.config import MAX_MARKUP_LENGTH
from svgtextbox.core.dimensions import serialize_dimension
from svgtextbox.core.types import PaddedResult, RenderResult, TextBoxRequest

SCHEMA_VERSION = "1"


def fit_result_to_dict(result: RenderResult, request: TextBoxRequest | None = None) -> dict:
    """Exact structure of one entry in fit_report.json."""
    out: dict = {
        "width_px": result.width_px,
        "height_px": result.height_px,
        "font_size_pt": result.font_size_pt,
        "font_size_scaled": result.font_size_scaled,
        "candidates_tried": result.candidates_tried,
        "svg_bytes": len(result.svg),
    }
    if isinstance(result, PaddedResult):
        out["content"] = {
            "width_px": result.content_width_px,
            "height_px": result.content_height_px,
            "offset_px": {"x": result.content_offset[0], "y": result.content_offset[1]},
        }
        p = result.padding
        out["padding"] = {"top": p.top, "right": p.right, "bottom": p.bottom, "left": p.left}
    if request is not None:
        spec = request.spec
        out["id"] = request.id
        out["position"] = {"x": request.x, "y": request.y}
        out["request"] = {
            "width": serialize_dimension(spec.width),
            "height": serialize_dimension(spec.height),
            "font_sizes_pt": spec.font_size_candidates(),
            "alignment": spec.alignment,
            "font_desc": spec.font.description,
        }
    return out


def report_dict(results: list[RenderResult], requests: list[TextBoxRequest] | None = None) -> dict:
    """Top-level report: schema version, timestamp, unit config and one entry per box."""
    reqs = requests or [None] * len(results)
    units = results[0].units if results else None
    return {
        "schema_version": SCHEMA_VERSION,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "config": {
            "px_to_pt": units.px_to_pt if units else None,
            "scale": units.scale if units else None,
            "MAX_MARKUP_LENGTH": MAX_MARKUP_LENGTH,
        },
        "textboxes": [fit_result_to_dict(r, q) for r, q in zip(results, reqs)],
    }


def write_report_json(
    out_path: str | Path,
    results: list[RenderResult],
    requests: list[TextBoxRequest] | None = None,
) -> Path:
    """Write the report to out_path. Returns path to file."""
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report_dict(results, requests), indent=2), encoding="utf-8")
    return path
