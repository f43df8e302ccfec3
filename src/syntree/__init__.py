"""syntree: parse bracketed phrase-structure annotations into tree elements."""

from syntree.exceptions import LoadError, ParseError, SyntreeError
from syntree.generator import TreeOptions, children_of, parse_tree
from syntree.labels import auto_subscript
from syntree.loader import load_text
from syntree.parser import Parser
from syntree.schemas import Element, ElementType
from syntree.tokenizer import Tokenizer

__all__ = [
    "Element",
    "ElementType",
    "LoadError",
    "ParseError",
    "Parser",
    "SyntreeError",
    "Tokenizer",
    "TreeOptions",
    "auto_subscript",
    "children_of",
    "load_text",
    "parse_tree",
]
