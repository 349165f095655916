"""Wild-card string masks using ``*`` and ``?``."""

from __future__ import annotations

__all__ = ["StringMask"]


def _wildcard_match(mask: str, text: str) -> bool:
    """Return whether ``text`` matches ``mask`` where ``*`` is any run and ``?`` any character."""
    m = t = 0
    star = -1
    mark = 0
    while t < len(text):
        if m < len(mask) and mask[m] == "*":
            star = m
            mark = t
            m += 1
        elif m < len(mask) and (mask[m] == "?" or mask[m] == text[t]):
            m += 1
            t += 1
        elif star != -1:
            m = star + 1
            mark += 1
            t = mark
        else:
            return False
    while m < len(mask) and mask[m] == "*":
        m += 1
    return m == len(mask)


class StringMask:
    """A mask holding ``*`` and ``?`` meta-characters that strings are matched against.

    The default mask is ``*``, which matches everything.
    """

    __slots__ = ("mask",)

    def __init__(self, mask: str = "*") -> None:
        self.mask = str(mask)

    def matches_case(self, string: str) -> bool:
        """Match ``string`` against the mask, case-sensitively."""
        return _wildcard_match(self.mask, string)

    def matches(self, string: str) -> bool:
        """Match ``string`` against the mask, ignoring case."""
        return _wildcard_match(self.mask.lower(), string.lower())

    def __str__(self) -> str:
        return self.mask

    def __repr__(self) -> str:
        return f"StringMask({self.mask!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringMask):
            return self.mask == other.mask
        if isinstance(other, str):
            return self.mask == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.mask)