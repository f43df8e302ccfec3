"""Cursor-based scanner for sanitized bracket annotations."""

from __future__ import annotations

from typing import NamedTuple

from syntree.sanitizer import CLOSE_BRACKET, ESCAPE, OPEN_BRACKET

_LINE_BREAKS = frozenset("\r\n")


class Token(NamedTuple):
    """One lexical unit pulled from the input.

    Attributes:
        text: Trimmed token text with escapes resolved. A group opener keeps
            its leading ``[``.
        opens_group: The token starts with an unescaped ``[``.
        closes_group: The token is an unescaped standalone ``]``.
    """

    text: str
    opens_group: bool = False
    closes_group: bool = False


END_OF_INPUT = Token("")


class Tokenizer:
    """Pull tokens from sanitized text one at a time.

    A token is a group opener (``[NP the dog``), a bare word run, or a lone
    ``]``. An unescaped ``[`` after other characters ends the current token
    without being consumed, so the next call starts on it. A backslash makes
    the following character literal.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def exhausted(self) -> bool:
        return self.pos + 1 >= len(self.text)

    def next_token(self) -> str:
        """Return the next token text, or an empty string at end of input."""
        return self.scan().text

    def scan(self) -> Token:
        """Return the next token, or ``END_OF_INPUT`` once the input is used up."""
        while not self.exhausted:
            token = self._scan_once()
            # Whitespace ahead of a closing bracket trims to nothing.
            if token.text:
                return token
        return END_OF_INPUT

    def _scan_once(self) -> Token:
        chars: list[str] = []
        escape = False
        opens_group = False
        closes_group = False
        got_token = False
        i = 0

        while self.pos + i < len(self.text) and not got_token:
            char = self.text[self.pos + i]
            if escape:
                chars.append(char)
                escape = False
            elif char == OPEN_BRACKET:
                if i > 0:
                    got_token = True
                else:
                    chars.append(char)
                    opens_group = True
            elif char == CLOSE_BRACKET:
                if i == 0:
                    chars.append(char)
                    closes_group = True
                got_token = True
            elif char == ESCAPE:
                escape = True
            elif char in _LINE_BREAKS:
                got_token = False
            else:
                chars.append(char)
            i += 1

        # Leave the terminating bracket under the cursor for the next call.
        self.pos += i - 1 if i > 1 else 1

        return Token("".join(chars).strip(), opens_group, closes_group)
