"""Label counting and automatic subscripting of repeated phrase labels."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from syntree.schemas import Element

SUBSCRIPT_SEPARATOR = "_"


def count_node(counts: Counter[str], name: str) -> None:
    """Register one occurrence of a label, keyed by its trimmed text."""
    counts[name.strip()] += 1


def count_labels(elements: Iterable[Element]) -> Counter[str]:
    """Count label occurrences across a whole element collection."""
    counts: Counter[str] = Counter()
    for element in elements:
        count_node(counts, element.content)
    return counts


def auto_subscript(
    elements: list[Element], counts: Counter[str] | None = None
) -> list[Element]:
    """Number repeated branch labels in collection order.

    The first branch carrying a repeated label keeps it as is; later ones
    become ``NP_1``, ``NP_2`` and so on. Leaves are never touched. A number
    whose name is already used by another label is skipped, so every
    subscripted name is unique.

    Args:
        elements: Parsed elements in id order.
        counts: Label occurrence counts gathered while parsing. Counted from
            ``elements`` when omitted.

    Returns:
        A new list; rewritten branches are copies, everything else is shared.
    """
    if counts is None:
        counts = count_labels(elements)

    # Labels written in the input, plus every name handed out so far.
    taken = set(counts)
    seen: Counter[str] = Counter()
    result: list[Element] = []
    for element in elements:
        label = element.content
        if element.is_branch and counts.get(label.strip(), 0) > 1:
            subscript = seen[label]
            if subscript:
                name = f"{label}{SUBSCRIPT_SEPARATOR}{subscript}"
                while name in taken:
                    subscript += 1
                    name = f"{label}{SUBSCRIPT_SEPARATOR}{subscript}"
                taken.add(name)
                element = element.model_copy(update={"content": name})
            seen[label] = subscript + 1
        result.append(element)
    return result
