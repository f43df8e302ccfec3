"""Custom exceptions for syntree."""


class SyntreeError(Exception):
    """Base exception for syntree operations."""


class ParseError(SyntreeError):
    """Bracket annotation is structurally invalid."""


class LoadError(SyntreeError):
    """Annotation text could not be read from a file or URL."""
