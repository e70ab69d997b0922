"""Display-width helpers measured in extended grapheme clusters."""

import regex

_GRAPHEME_RE = regex.compile(r"\X")


def grapheme_count(text: str) -> int:
    """Number of user-perceived characters in *text*.

    A base letter followed by combining marks counts once, so column
    arithmetic stays aligned with what the pager actually draws.
    """
    return sum(1 for _ in _GRAPHEME_RE.finditer(text))


def pad(width: int) -> str:
    """Return *width* SPACE characters."""
    if width < 0:
        raise ValueError(f"pad width must be non-negative, got {width}")
    return " " * width
