"""
Command line interface.

Commands:
    build   Build a PDF sheet from an item source JSON (or a saved store)
    prompt  Print the chat prompt that produces the item source JSON
    export  Normalize an item source and write it back as JSON
    toggle  Flip the checked state of a stored item

Usage:
    python -m cheatsheet_toolkit build concepts.json -o sheet.pdf --columns 2
    python -m cheatsheet_toolkit prompt "Entropy" "Enthalpy" --formulas
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cheatsheet_toolkit import __version__
from cheatsheet_toolkit.builder import BuildError, BuilderConfig, ItemStore, build_sheet
from cheatsheet_toolkit.builder.loading import LoaderError, export_items, load_items
from cheatsheet_toolkit.builder.text import build_prompt

logger = logging.getLogger("cheatsheet_toolkit")

# CLI option -> BuilderConfig field
_SETTING_OPTIONS = {
    "header_size": "header_font_size",
    "body_size": "body_font_size",
    "line_height": "line_height",
    "max_items": "max_items_per_page",
    "columns": "column_count",
    "spacing": "item_spacing",
    "title_spacing": "title_body_spacing",
    "header_text": "header_text",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cheatsheet",
        description="Turn a list of named concepts into a paginated PDF study sheet",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build a PDF sheet")
    build.add_argument("source", type=Path, nargs="?", help="Item source JSON (omit to use --store)")
    build.add_argument("-o", "--output", type=Path, default=Path("study-guide.pdf"), help="PDF to write")
    build.add_argument("--preview", type=Path, help="Also write a PNG preview of page 1")
    build.add_argument("--store", type=Path, help="Remember items and settings in this JSON file")
    build.add_argument("--header-size", type=float, help="Header font size (pt)")
    build.add_argument("--body-size", type=float, help="Body font size (pt)")
    build.add_argument("--line-height", type=float, help="Line height multiplier")
    build.add_argument("--max-items", type=int, help="Maximum items per page")
    build.add_argument("--columns", type=int, help="Columns per page (1-3, experimental)")
    build.add_argument("--spacing", type=float, help="Spacing between items (mm)")
    build.add_argument("--title-spacing", type=float, help="Spacing below item titles (mm)")
    build.add_argument("--header-text", type=str, help="Page header text")
    build.add_argument(
        "--symbols",
        action="store_true",
        help="Keep formula symbols instead of spelling them out",
    )

    prompt = sub.add_parser("prompt", help="Print the chat prompt for a concept list")
    prompt.add_argument("concepts", nargs="+", help="Concept names")
    prompt.add_argument("--formulas", action="store_true", help="Ask for plain-text formulas")

    export = sub.add_parser("export", help="Normalize and re-write an item source")
    export.add_argument("source", type=Path, help="Item source JSON")
    export.add_argument("output", type=Path, help="JSON file to write")

    toggle = sub.add_parser("toggle", help="Flip checked state of a stored item")
    toggle.add_argument("item_id", type=int, help="Item id")
    toggle.add_argument("--store", type=Path, required=True, help="Store JSON file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "build":
        return _cmd_build(args)
    if args.command == "prompt":
        print(build_prompt(args.concepts, include_formulas=args.formulas))
        return 0
    if args.command == "export":
        return _cmd_export(args)
    if args.command == "toggle":
        return _cmd_toggle(args)
    return 2


def _cmd_build(args: argparse.Namespace) -> int:
    store = ItemStore(args.store) if args.store else None

    settings = store.get_settings() if store else {}
    for option, field_name in _SETTING_OPTIONS.items():
        value = getattr(args, option)
        if value is not None:
            settings[field_name] = value
    if args.symbols:
        settings["plain_text_formulas"] = False

    try:
        config = BuilderConfig.from_dict(settings)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.source is not None:
        try:
            items = load_items(args.source)
        except LoaderError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    elif store is not None:
        items = store.get_items()
    else:
        print("Error: provide an item source or --store", file=sys.stderr)
        return 1

    try:
        result = build_sheet(items, config, args.output, preview_path=args.preview)
    except BuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if store is not None:
        store.set_items(items)
        store.set_settings(config.to_dict())

    for warning in result.warnings:
        logger.warning(warning)
    print(f"Wrote {result.page_count} page(s) with {result.item_count} item(s) to {args.output}")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    try:
        items = load_items(args.source)
        export_items(items, args.output)
    except LoaderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Exported {len(items)} item(s) to {args.output}")
    return 0


def _cmd_toggle(args: argparse.Namespace) -> int:
    store = ItemStore(args.store)
    updated = store.toggle(args.item_id)
    if updated is None:
        print(f"Error: no item with id {args.item_id}", file=sys.stderr)
        return 1
    state = "checked" if updated.checked else "unchecked"
    print(f"{updated.name}: {state}")
    return 0
