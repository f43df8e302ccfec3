"""Command line entry point: parse an annotation and print its elements as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from syntree.config import SYNTREE_AUTO_SUBSCRIPT
from syntree.exceptions import SyntreeError
from syntree.generator import TreeOptions, parse_tree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="syntree",
        description="Parse a bracketed phrase-structure annotation into tree elements.",
    )
    parser.add_argument("source", nargs="?", help="File path or URL with the annotation (default: stdin)")
    parser.add_argument("--data", help="Annotation text, e.g. '[S [NP the dog][VP barks]]'")
    parser.add_argument(
        "--no-auto-subscript",
        dest="auto_subscript",
        action="store_false",
        default=SYNTREE_AUTO_SUBSCRIPT,
        help="Do not number repeated phrase labels",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.source and args.data is not None:
        parser.error("Provide either SOURCE or --data, not both")

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    options = TreeOptions(auto_subscript=args.auto_subscript)
    try:
        if args.source:
            elements = parse_tree(data_path=args.source, options=options)
        else:
            data = args.data if args.data is not None else sys.stdin.read()
            elements = parse_tree(data=data, options=options)
    except SyntreeError as exc:
        logger.debug("Parsing failed", exc_info=True)
        print(f"syntree: {exc}", file=sys.stderr)
        return 1

    payload = [element.model_dump(mode="json") for element in elements]
    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
