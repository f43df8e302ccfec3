"""Tests for the element model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from syntree.schemas import Element, ElementType


class TestElementCreate:
    """Tests for Element.create."""

    def test_applies_defaults(self) -> None:
        """Type defaults to leaf and geometry to zero."""
        element = Element.create(1, "dog", 0, 0)

        assert element.element_type == ElementType.LEAF
        assert element.width == 0
        assert element.indent == 0
        assert not element.triangle

    @pytest.mark.parametrize(("content", "expected"), [("NP^", "NP"), ("^NP", "NP")])
    def test_triangle_marker_is_stripped(self, content: str, expected: str) -> None:
        """A leading or trailing caret becomes the triangle flag."""
        element = Element.create(1, content, 0, 0, ElementType.BRANCH)

        assert element.triangle
        assert element.content == expected

    def test_caret_inside_content_is_kept(self) -> None:
        """Only a marker at either end counts."""
        element = Element.create(1, "a^b", 0, 0)

        assert not element.triangle
        assert element.content == "a^b"

    def test_rejects_negative_ids(self) -> None:
        """Ids, parents and levels are non-negative."""
        with pytest.raises(ValidationError):
            Element.create(-1, "x", 0, 0)

    def test_serializes_type_by_value(self) -> None:
        """JSON output carries readable element types."""
        element = Element.create(1, "S", 0, 0, ElementType.BRANCH)

        assert element.model_dump(mode="json")["element_type"] == "branch"
        assert element.is_branch
