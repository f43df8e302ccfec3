"""Turn user input and options into a parsed element list."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from syntree.config import SYNTREE_AUTO_SUBSCRIPT
from syntree.loader import load_text
from syntree.parser import Parser
from syntree.schemas import Element


@dataclass
class TreeOptions:
    """Options for tree parsing.

    Attributes:
        auto_subscript: If True, number repeated phrase labels (NP, NP_1, ...).
    """

    auto_subscript: bool = field(default_factory=lambda: SYNTREE_AUTO_SUBSCRIPT)


def parse_tree(
    *,
    data: str | None = None,
    data_path: str | Path | None = None,
    options: TreeOptions | None = None,
) -> list[Element]:
    """Parse an annotation given inline or by path/URL.

    Args:
        data: Annotation text.
        data_path: File path or http(s) URL to read the annotation from.
        options: Parsing options. Uses defaults if None.

    Returns:
        Elements in pre-order id order.

    Raises:
        ValueError: If not exactly one of ``data`` and ``data_path`` is given.
        LoadError: If ``data_path`` cannot be read.
        ParseError: If the annotation is structurally invalid.
    """
    if (data is None) == (data_path is None):
        raise ValueError("Provide exactly one of data or data_path")

    opts = options or TreeOptions()
    text = data if data is not None else load_text(data_path)

    parser = Parser(text, auto_subscript=opts.auto_subscript)
    return parser.parse()


def children_of(elements: list[Element], parent_id: int) -> list[Element]:
    """Return the direct children of ``parent_id`` in id order."""
    return [element for element in elements if element.parent == parent_id]
