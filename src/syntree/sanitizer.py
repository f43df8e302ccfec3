"""Validate and normalize raw bracket annotations."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
ESCAPE = "\\"


def is_valid(text: str) -> bool:
    """Check that the text holds balanced, non-empty bracket groups.

    The text is rejected when it is empty, when a bracket pair encloses
    only whitespace, when a closing bracket has no opener, when an opener
    is never closed, or when there is no bracket group at all. Escaped
    brackets are content, not structure.

    Args:
        text: Raw annotation text.

    Returns:
        True if the text can be handed to the tokenizer.
    """
    if not text:
        return False

    # One entry per open group: whether it has seen any content yet.
    open_groups: list[bool] = []
    groups = 0
    escape = False

    for char in text:
        if escape:
            escape = False
            if open_groups:
                open_groups[-1] = True
            continue

        if char == ESCAPE:
            escape = True
        elif char == OPEN_BRACKET:
            if open_groups:
                open_groups[-1] = True
            open_groups.append(False)
        elif char == CLOSE_BRACKET:
            if not open_groups:
                logger.debug("Unmatched closing bracket in input")
                return False
            if not open_groups.pop():
                logger.debug("Empty bracket group in input")
                return False
            groups += 1
        elif open_groups and not char.isspace():
            open_groups[-1] = True

    if open_groups:
        logger.debug("%d bracket group(s) left open", len(open_groups))
        return False

    return groups > 0


def sanitize(text: str) -> str:
    """Normalize whitespace and spacing around brackets.

    Steps, in order: drop tabs, collapse whitespace runs to one space,
    join ``"] ["`` into ``"]["``, and drop the space before an opening
    bracket and right after one.
    """
    result = text.replace("\t", "")
    result = _collapse_whitespace(result)
    result = result.replace("] [", "][")
    result = result.replace(" [", "[")
    return _strip_space_after_open(result)


def _collapse_whitespace(text: str) -> str:
    chars: list[str] = []
    in_space = False
    for char in text:
        if char.isspace():
            if not in_space:
                chars.append(" ")
            in_space = True
        else:
            chars.append(char)
            in_space = False
    return "".join(chars)


def _strip_space_after_open(text: str) -> str:
    chars: list[str] = []
    escape = False
    after_open = False
    for char in text:
        if after_open and char == " ":
            after_open = False
            continue
        after_open = char == OPEN_BRACKET and not escape
        escape = char == ESCAPE and not escape
        chars.append(char)
    return "".join(chars)
