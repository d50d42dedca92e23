"""
Syntactic URI-reference checks (RFC 3986 §4.1).

Only syntax is checked. References are never resolved, normalized or fetched.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

# unreserved / gen-delims / sub-delims / "%"
_URI_CHARS = re.compile(r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*$")
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


def is_uri_reference(text: str) -> bool:
    """Return True if ``text`` is a syntactically valid URI-reference.

    Both absolute URIs and relative references are accepted; the empty string
    is a valid same-document reference.
    """
    if not _URI_CHARS.match(text):
        return False
    if _BAD_PERCENT.search(text):
        return False
    if text.count("#") > 1:
        return False
    if not has_scheme(text):
        # relative-path references must not carry a colon in the first segment
        first_segment = re.split(r"[/?#]", text, maxsplit=1)[0]
        if ":" in first_segment:
            return False
    try:
        parts = urlsplit(text)
        parts.port
    except ValueError:
        return False
    if "[" in parts.path or "]" in parts.path or "[" in parts.query or "]" in parts.query:
        return False
    return True


def has_scheme(text: str) -> bool:
    """Return True if ``text`` starts with a URI scheme (absolute URI)."""
    return bool(_SCHEME.match(text))
