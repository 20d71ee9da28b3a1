#!/usr/bin/env python3
"""CLI for pulling line ranges and anchored regions out of files."""

import argparse
import logging
import os
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

from snipkit.core import LineRange
from snipkit.extraction import (
    SelectorError,
    apply_selector,
    extract_anchored,
    extract_range,
    list_anchors,
    parse_selector,
)
from snipkit.snippets import SnippetExtractor

load_dotenv()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract line ranges or ANCHOR-delimited regions from a file"
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Source file to extract from (omit when using --manifest)"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--lines",
        metavar="SEL",
        help="Zero-based line selector: N, A:B, A: or :B (end exclusive)"
    )
    group.add_argument(
        "--anchor",
        metavar="NAME",
        help="Extract the region between 'ANCHOR: NAME' and 'ANCHOR_END: NAME'"
    )
    group.add_argument(
        "--select",
        metavar="SEL",
        help="Line selector or anchor name"
    )
    group.add_argument(
        "--list-anchors",
        action="store_true",
        help="List anchor names found in the file and exit"
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        help="YAML snippet manifest (default: $SNIPKIT_MANIFEST)"
    )
    parser.add_argument(
        "--id",
        dest="snippet_id",
        help="Only print the manifest snippet with this id"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def run_manifest(manifest: Path, snippet_id: str | None) -> int:
    extractor = SnippetExtractor(manifest_path=manifest)

    if snippet_id:
        snippet = extractor.get_snippet(snippet_id)
        if snippet is None:
            print(f"Error: No snippet with id '{snippet_id}' in {manifest}", file=sys.stderr)
            return 1
        print(snippet.content)
        return 0

    for snippet in extractor.extract_all():
        print(f"--- {snippet.id} ({snippet.source} [{snippet.selector}]) ---")
        print(snippet.content)
    return 0


def run_file(args: argparse.Namespace) -> int:
    text = args.file.read_text(encoding="utf-8")

    if args.list_anchors:
        for name in list_anchors(text):
            print(name)
        return 0

    if args.anchor is not None:
        print(extract_anchored(text, args.anchor))
    elif args.lines is not None:
        target = parse_selector(args.lines)
        if not isinstance(target, LineRange):
            raise SelectorError(f"Not a line selector: {args.lines!r}")
        print(extract_range(text, target))
    else:
        print(apply_selector(text, args.select or ""))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.file is not None:
        if args.manifest is not None or args.snippet_id is not None:
            parser.error("--manifest and --id cannot be combined with FILE")
    else:
        file_options = (args.lines, args.anchor, args.select)
        if args.list_anchors or any(option is not None for option in file_options):
            parser.error("--lines, --anchor, --select and --list-anchors need a FILE")

    manifest = args.manifest
    if manifest is None and os.environ.get("SNIPKIT_MANIFEST"):
        manifest = Path(os.environ["SNIPKIT_MANIFEST"])
    if args.file is None and manifest is None:
        parser.error("a FILE or --manifest is required")

    try:
        if args.file is None:
            return run_manifest(manifest, args.snippet_id)
        if not args.file.exists():
            raise FileNotFoundError(f"File not found: {args.file}")
        return run_file(args)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
