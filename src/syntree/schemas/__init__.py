"""Shared schemas for syntree."""

from syntree.schemas.element import Element, ElementType

__all__ = ["Element", "ElementType"]
