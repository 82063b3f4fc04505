"""General helper utilities."""
from __future__ import annotations
from typing import Mapping
from urllib.parse import urlsplit, urlunsplit

def build_query_string(data: Mapping[str, str] | None) -> str:
    """Join key/value pairs as key=value&... with values inserted verbatim."""
    if not data:
        return ""
    return "&".join(f"{key}={value}" for key, value in data.items())

def append_query_string(url: str, query: str) -> str:
    """Add a query string to a URL ahead of any fragment, extending an existing query."""
    if not query:
        return url
    parts = urlsplit(url)
    merged = f"{parts.query}&{query}" if parts.query else query
    return urlunsplit(parts._replace(query=merged))
