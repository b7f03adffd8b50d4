"""Plain-text helpers."""

import re

# A tag opens with "<" directly followed by a name, "/", "!" or "?", so prose
# such as "< 3%" or "1<2" is left alone.
_TAG_RE = re.compile(r"<[A-Za-z/!?][^<>]*>")
# An unterminated trailing tag ("<div class=") is removed as well.
_TRAILING_TAG_RE = re.compile(r"<[A-Za-z/!?][^<>]*$")
_WHITESPACE_RE = re.compile(r"\s+")


def strip_tags(text: str) -> str:
    """Remove markup and collapse every whitespace run to a single space."""
    # Removing one tag can expose another ("<<b>i>"), so repeat until stable
    while True:
        stripped = _TRAILING_TAG_RE.sub("", _TAG_RE.sub("", text))
        if stripped == text:
            break
        text = stripped
    return _WHITESPACE_RE.sub(" ", text).strip()


def word_count(text: str) -> int:
    return len(text.split())
