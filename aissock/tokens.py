"""A tokeniser that walks a string, handing out one token at a time."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["StringTokens"]

_BLANKS = " \t"


class StringTokens:
    """Hold a string and a position, and break tokens out of it.

    The position normally points at the first character of the next token.
    Without a delimiter, tokens are separated by runs of spaces and tabs.
    """

    def __init__(self, string: str, position: int = 0) -> None:
        self.string = str(string)
        self.position = position

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"StringTokens({self.string!r}, {self.position})"

    def has_more_tokens(self) -> bool:
        """Return whether the position has not yet reached the end of the string."""
        return self.position < len(self.string)

    def _skip_blanks(self) -> None:
        end = len(self.string)
        while self.position < end and self.string[self.position] in _BLANKS:
            self.position += 1

    def count_tokens(self, delimiter: str | None = None) -> int:
        """Count the tokens in the whole string, as next_token would hand them out."""
        return sum(1 for _ in StringTokens(self.string)._tokens(delimiter))

    def next_token(self, delimiter: str | None = None) -> str:
        """Return the next token and move the position past it.

        With ``delimiter`` the token runs up to the next occurrence of it;
        otherwise it runs up to the next space or tab. An empty string is
        returned once the string is exhausted.
        """
        text = self.string
        if delimiter is None:
            self._skip_blanks()
            start = self.position
            end = start
            while end < len(text) and text[end] not in _BLANKS:
                end += 1
            self.position = end
            self._skip_blanks()
            return text[start:end]

        if len(delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        start = self.position
        if start >= len(text):
            return ""
        end = text.find(delimiter, start)
        if end == -1:
            self.position = len(text)
            return text[start:]
        self.position = end + 1
        return text[start:end]

    def next_colon_token(self) -> str:
        """Return the next IRC-style token.

        A token starting with ``:`` takes the whole rest of the string
        (without the colon); otherwise this behaves like next_token().
        """
        self._skip_blanks()
        if self.has_more_tokens() and self.string[self.position] == ":":
            token = self.string[self.position + 1:]
            self.position = len(self.string)
            return token
        return self.next_token()

    def rest(self) -> str:
        """Return everything from the position to the end, without moving it."""
        return self.string[self.position:]

    def _tokens(self, delimiter: str | None) -> Iterator[str]:
        if delimiter is None:
            self._skip_blanks()
        while self.has_more_tokens():
            yield self.next_token(delimiter)

    def __iter__(self) -> Iterator[str]:
        """Yield the remaining blank-separated tokens, advancing the position."""
        return self._tokens(None)