"""Command-line interface for taghelper."""

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .dom_model import dom_to_html
from .escaping import escape_once
from .io_utils import read_document, warn, write_text
from .models import MarkupDocument
from .tag_helper import cdata_section


def _load_document(path: Path) -> MarkupDocument:
    if not path.exists():
        raise SystemExit(f"Document not found: {path}")
    try:
        payload = read_document(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise SystemExit(f"Could not read {path}: {exc}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Could not parse {path}: {exc}") from exc

    payload = payload or {}
    if isinstance(payload, list):
        payload = {"nodes": payload}
    try:
        return MarkupDocument.model_validate(payload)
    except ValidationError as exc:
        raise SystemExit(f"Invalid markup document {path}: {exc}") from exc


def _read_text_arg(value: Optional[str]) -> str:
    if value is not None:
        return value
    return sys.stdin.read()


def _handle_render(args: argparse.Namespace) -> None:
    document = _load_document(Path(args.input))
    if not document.nodes:
        warn(f"{args.input} contains no nodes; nothing to render.")

    escape = document.escape and not args.no_escape
    output = dom_to_html(document.to_dom(), escape=escape)

    if args.output:
        write_text(Path(args.output), str(output) + "\n")
        print(f"Wrote {len(document.nodes)} node(s) to {args.output}.")
    else:
        print(output)


def _handle_escape(args: argparse.Namespace) -> None:
    print(escape_once(_read_text_arg(args.text)))


def _handle_cdata(args: argparse.Namespace) -> None:
    content = _read_text_arg(args.text)
    if "]]>" in content:
        warn("Content contains ']]>' which terminates the CDATA section early.")
    print(cdata_section(content))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taghelper",
        description="Build escaped HTML tags from YAML/JSON documents.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a markup document.",
        description="Validate a YAML/JSON markup document and print the HTML.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the YAML or JSON document.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Write the HTML to this file instead of stdout.",
    )
    render_parser.add_argument(
        "--no-escape",
        dest="no_escape",
        action="store_true",
        help="Skip name escaping and use the quote-only attribute escape.",
    )
    render_parser.set_defaults(func=_handle_render)

    escape_parser = subparsers.add_parser(
        "escape",
        help="Escape text once.",
        description="Escape text for HTML, leaving existing entities untouched.",
    )
    escape_parser.add_argument("text", nargs="?", default=None, help="Text to escape (default: stdin).")
    escape_parser.set_defaults(func=_handle_escape)

    cdata_parser = subparsers.add_parser(
        "cdata",
        help="Wrap text in a CDATA section.",
        description="Wrap text verbatim in <![CDATA[ ... ]]>.",
    )
    cdata_parser.add_argument("text", nargs="?", default=None, help="Text to wrap (default: stdin).")
    cdata_parser.set_defaults(func=_handle_cdata)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
