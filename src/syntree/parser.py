"""Build a flat element list from a bracketed phrase-structure annotation."""

from __future__ import annotations

import logging
from collections import Counter

from syntree.config import SYNTREE_AUTO_SUBSCRIPT
from syntree.exceptions import ParseError
from syntree.labels import auto_subscript, count_node
from syntree.sanitizer import is_valid, sanitize
from syntree.schemas import Element, ElementType
from syntree.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

ROOT_ID = 0
LITERAL_SPACE = "<>"
INVALID_DATA_MESSAGE = "invalid data provided to parser"


class Parser:
    """Parse a phrase into branches and leaves.

    ``[S [NP the dog][VP barks]]`` yields ``S`` at level 0, ``NP`` and ``VP``
    at level 1 under ``S``, and the words at level 2. Elements are numbered
    from 1 in pre-order; id 0 stands for the implicit root and is never
    materialized.

    Words written right after a group label become one leaf each, while a
    run of words after a closed group (``[S [NP a] barks loudly]``) stays a
    single leaf. Escapes are resolved before the ``^`` marker check, so a
    trailing ``\\^`` still marks a triangle; the caret cannot be escaped.

    Args:
        data: Raw annotation text.
        auto_subscript: Number repeated branch labels after parsing. Defaults
            to ``SYNTREE_AUTO_SUBSCRIPT``.

    Raises:
        ParseError: If the text is empty, has an empty bracket pair, or its
            brackets do not balance.
    """

    def __init__(self, data: str, *, auto_subscript: bool | None = None) -> None:
        if not is_valid(data):
            raise ParseError(INVALID_DATA_MESSAGE)

        self.data = sanitize(data)
        self.auto_sub = SYNTREE_AUTO_SUBSCRIPT if auto_subscript is None else auto_subscript
        self.id = ROOT_ID + 1
        self.level = 0
        self.node_types: Counter[str] = Counter()
        self._tokenizer = Tokenizer(self.data)
        self._result: list[Element] = []

    def parse(self) -> list[Element]:
        """Parse ``self.data`` into the result list and return a copy of it."""
        self.parse_recurse(ROOT_ID)
        if self.auto_sub:
            self.auto_subscript()
        logger.debug("Parsed %d elements from %d characters", len(self._result), len(self.data))
        return self.result()

    def parse_recurse(self, parent: int) -> None:
        """Consume sibling tokens under ``parent`` until its closing bracket.

        Nested groups push a frame instead of recursing, so deep trees do not
        grow the call stack. Each finished frame lowers the level by one; end
        of input finishes every open frame.
        """
        frames = [parent]

        while frames:
            token = self._tokenizer.scan()

            if not token.text:
                self.level -= len(frames)
                break

            if token.closes_group:
                frames.pop()
                self.level -= 1
            elif token.opens_group:
                new_parent = self._add_group(frames[-1], token.text[1:])
                self.level += 1
                frames.append(new_parent)
            else:
                self._add_element(token.text, frames[-1], self.level)

    def auto_subscript(self) -> None:
        """Append ``_N`` to repeated branch labels in the current result."""
        self._result = auto_subscript(self._result, self.node_types)

    def result(self) -> list[Element]:
        """Return a copy of the current result."""
        return [element.model_copy() for element in self._result]

    def _add_group(self, parent: int, body: str) -> int:
        """Create the branch for a group opener and any words that follow its label."""
        label, space, rest = body.partition(" ")
        if not space:
            return self._add_element(body, parent, self.level, ElementType.BRANCH).id

        branch = self._add_element(
            label.replace(LITERAL_SPACE, " "), parent, self.level, ElementType.BRANCH
        )
        # A collapsed phrase keeps its words together under the triangle.
        words = [rest.strip()] if branch.triangle else rest.split()
        for word in words:
            self._add_element(word.replace(LITERAL_SPACE, " "), branch.id, self.level + 1)
        return branch.id

    def _add_element(
        self,
        content: str,
        parent: int,
        level: int,
        element_type: ElementType = ElementType.LEAF,
    ) -> Element:
        element = Element.create(self.id, content, parent, level, element_type)
        self.id += 1
        self._result.append(element)
        count_node(self.node_types, element.content)
        return element
