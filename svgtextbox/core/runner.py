# svgtextbox/core/runner.py
"""
CLI entrypoint: fit markup into a box and write SVG, or render every
text box from a JSON config, or transform an SVG document containing <textbox> elements.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from svgtextbox.core.attributes import request_from_attributes
from svgtextbox.core.config import LOG_LEVEL, SVGTEXTBOX_DEBUG
from svgtextbox.core.error_codes import SvgTextBoxError
from svgtextbox.core.io import load_config, read_text_file
from svgtextbox.core.render_svg import to_base64, to_image_tag, write_svg
from svgtextbox.core.reporting import write_report_json
from svgtextbox.core.resolver import render_textbox
from svgtextbox.core.xml_document import transform_document

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if (verbose or SVGTEXTBOX_DEBUG) else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format="[svgtextbox] %(levelname)s: %(message)s")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fit Pango markup into a box and render it as SVG.")
    p.add_argument("markup", nargs="?", default=None, help="Pango markup to render")
    p.add_argument("--width", type=str, default=None, help="Width px: '300', '100 400' (range) or '400 100' (set)")
    p.add_argument("--height", type=str, default=None, help="Height px, same forms as --width")
    p.add_argument("--font-size", type=str, default=None, dest="font_size", help="Font size pt; one value means fixed")
    p.add_argument("--padding", type=str, default=None, help="CSS shorthand padding px, e.g. '10 20'")
    p.add_argument("--alignment", type=str, default=None, help="left, center or right")
    p.add_argument("--font-desc", type=str, default=None, dest="font_desc", help="Pango font description, e.g. 'Serif Bold'")
    p.add_argument("--background", type=str, default=None, help="Background fill colour")
    p.add_argument("--config", type=str, default=None, help="JSON config with one or more text boxes")
    p.add_argument("--transform", type=str, default=None, help="SVG document whose <textbox> elements are rendered")
    p.add_argument("--output", "-o", type=str, default="textbox.svg", help="Output path (config mode: directory)")
    p.add_argument("--format", choices=("svg", "base64", "image-tag"), default="svg", help="Output format")
    p.add_argument("--report", type=str, default=None, help="Write fit_report.json to this path")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def _cli_attributes(args: argparse.Namespace) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for key, value in (
        ("width", args.width),
        ("height", args.height),
        ("font-size", args.font_size),
        ("padding", args.padding),
        ("alignment", args.alignment),
        ("font-desc", args.font_desc),
        ("fill", args.background),
    ):
        if value is not None:
            attrs[key] = value
    return attrs


def _emit(result, request, out: Path, fmt: str) -> Path:
    if fmt == "svg":
        return write_svg(result, out)
    text = to_base64(result.svg) if fmt == "base64" else to_image_tag(result, request.x, request.y)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    return out


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)
    try:
        if args.transform:
            src = read_text_file(args.transform)
            out = Path(args.output)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_bytes(transform_document(src))
            print(out)
            return 0

        if args.config:
            requests = load_config(args.config)
            out_dir = Path(args.output)
            if out_dir.suffix:
                out_dir = out_dir.with_suffix("")
        elif args.markup is not None:
            requests = [request_from_attributes(args.markup, _cli_attributes(args))]
            out_dir = None
        else:
            print("error: give markup, --config or --transform", file=sys.stderr)
            return 2

        results = []
        for request in requests:
            result = render_textbox(request)
            results.append(result)
            if out_dir is None:
                path = Path(args.output)
            else:
                ext = ".svg" if args.format == "svg" else ".txt"
                path = out_dir / f"{request.id or 'textbox'}{ext}"
            print(_emit(result, request, path, args.format))
            logger.info(f"{result.width_px}x{result.height_px}px at {result.font_size_pt:g}pt")
        if args.report:
            print(write_report_json(args.report, results, requests))
    except (SvgTextBoxError, FileNotFoundError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
