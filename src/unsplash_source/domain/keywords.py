"""Keyword filter parsing."""

from collections.abc import Sequence
from urllib.parse import quote

# Characters left untouched by JavaScript's encodeURI, on top of the
# alphanumerics and "_.-~" that quote() never escapes.
_URI_SAFE = ";,/?:@&=+$!*'()#"


def split_keywords(keywords: str | Sequence[str]) -> list[str]:
    """Resolve a comma separated string or a list into trimmed tokens."""
    if isinstance(keywords, str):
        tokens: Sequence[object] = keywords.split(",")
    elif isinstance(keywords, (list, tuple)):
        tokens = keywords
    else:
        raise TypeError(
            f"keywords must be a string or a list of strings, "
            f"got {type(keywords).__name__}"
        )
    cleaned: list[str] = []
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError(f"keyword must be a string, got {type(token).__name__}")
        cleaned.append(token.strip())
    return cleaned


def encode_keywords(keywords: str | Sequence[str]) -> str:
    """Return the URI-escaped, comma-joined keyword query."""
    return quote(",".join(split_keywords(keywords)), safe=_URI_SAFE)
