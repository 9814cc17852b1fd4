import re
from typing import Iterable, Optional

WILDCARD_STYLE = "all styles"


def normalize_style_key(s: Optional[str]) -> str:
    """Trim, lowercase, collapse whitespace and tighten "/" spacing.

    "Party / Dressy" and "party/dressy" both become "party/dressy".
    """
    if not s:
        return ""
    s = s.strip().lower()
    s = re.sub(r"\s+", " ", s)
    s = re.sub(r"\s*/\s*", "/", s)
    return s


def normalize_weather(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def normalize_category(s: Optional[str]) -> str:
    return normalize_style_key(s)


def mentions(keywords: Iterable[str], name: Optional[str], tags: Iterable[str] = ()) -> bool:
    """True when any keyword is a substring of the name or of any tag (case-insensitive)."""
    hay = [(name or "").lower()] + [(t or "").lower() for t in tags or []]
    return any(k in h for k in keywords for h in hay)
