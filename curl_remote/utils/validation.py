"""Sanitization filters and the URL grammar used to validate configuration."""
from __future__ import annotations
import re
import string

# Characters a URL may carry untouched; everything else is stripped by sanitize_url.
URL_SAFE_CHARS = frozenset(string.ascii_letters + string.digits + "$-_.+!*'(),{}|\\^~[]`<>#%\";/?:@&=")

_LABEL = r"[a-z\u00a1-\uffff0-9]+(?:-[a-z\u00a1-\uffff0-9]+)*"

URL_PATTERN = re.compile(
    r"(?:https?|ftp)://"
    # user:pass authentication
    r"(?:\S+(?::\S*)?@)?"
    r"(?:"
    # private and local networks are excluded
    r"(?!10(?:\.\d{1,3}){3})"
    r"(?!127(?:\.\d{1,3}){3})"
    r"(?!169\.254(?:\.\d{1,3}){2})"
    r"(?!192\.168(?:\.\d{1,3}){2})"
    r"(?!172\.(?:1[6-9]|2\d|3[0-1])(?:\.\d{1,3}){2})"
    r"(?:[1-9]\d?|1\d\d|2[01]\d|22[0-3])"
    r"(?:\.(?:1?\d{1,2}|2[0-4]\d|25[0-5])){2}"
    r"(?:\.(?:[1-9]\d?|1\d\d|2[0-4]\d|25[0-4]))"
    r"|"
    rf"{_LABEL}(?:\.{_LABEL})*"
    # TLD
    r"(?:\.[a-z\u00a1-\uffff]{2,})"
    r")"
    r"(?::\d{2,5})?"
    r"(?:[/?#]\S*)?",
    re.IGNORECASE,
)

_TAG_PATTERN = re.compile(r"<[^>]*(?:>|$)")
_CONTROL_PATTERN = re.compile(r"[\x00-\x1f\x7f]")

def sanitize_url(value: str) -> str:
    """Remove every character not allowed in a URL."""
    return "".join(ch for ch in value if ch in URL_SAFE_CHARS)

def sanitize_string(value: str) -> str:
    """Strip tags and control characters and encode quotes."""
    cleaned = _TAG_PATTERN.sub("", value)
    cleaned = _CONTROL_PATTERN.sub("", cleaned)
    return cleaned.replace('"', "&#34;").replace("'", "&#39;")

def is_valid_url(value: str) -> bool:
    """True when the URL survives sanitization unchanged and matches the grammar."""
    if not isinstance(value, str) or sanitize_url(value) != value:
        return False
    return URL_PATTERN.fullmatch(value) is not None

def is_valid_user_agent(value: str) -> bool:
    """True when the agent string survives sanitization unchanged."""
    return isinstance(value, str) and sanitize_string(value) == value
