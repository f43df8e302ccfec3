"""Tree element model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

TRIANGLE_MARKER = "^"


class ElementType(str, Enum):
    """Kind of node produced by the parser."""

    BRANCH = "branch"
    LEAF = "leaf"
    UNDEFINED = "undefined"


class Element(BaseModel):
    """A single tree node, either a phrase (branch) or a word (leaf).

    Attributes:
        id: Unique id, assigned from 1 in creation order. 0 is the implicit root.
        content: Label text with escapes resolved and triangle marker removed.
        parent: Id of the owning element, 0 for top-level elements.
        level: Depth in the tree; top-level elements sit at level 0.
        triangle: Draw the subtree collapsed under a triangle.
        element_type: Branch, leaf, or undefined (reserved for renderers).
        width: Rendered width, owned by the renderer.
        indent: Rendered indent, owned by the renderer.
    """

    id: int = Field(..., ge=0)
    content: str
    parent: int = Field(..., ge=0)
    level: int = Field(..., ge=0)
    triangle: bool = False
    element_type: ElementType = ElementType.LEAF
    width: int = 0
    indent: int = 0

    @classmethod
    def create(
        cls,
        id: int,
        content: str,
        parent: int,
        level: int,
        element_type: ElementType = ElementType.LEAF,
    ) -> Element:
        """Build an element, turning a ``^`` marker into the triangle flag."""
        triangle = False
        if content.endswith(TRIANGLE_MARKER):
            content = content[: -len(TRIANGLE_MARKER)]
            triangle = True
        elif content.startswith(TRIANGLE_MARKER):
            content = content[len(TRIANGLE_MARKER) :]
            triangle = True

        return cls(
            id=id,
            content=content,
            parent=parent,
            level=level,
            triangle=triangle,
            element_type=element_type,
        )

    @property
    def is_branch(self) -> bool:
        return self.element_type == ElementType.BRANCH
