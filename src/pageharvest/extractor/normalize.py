"""
Normalization rules applied to raw values read from the page.

Each function returns None for a value that should be dropped.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

TEL_PREFIX = "tel:"

COPYRIGHT_PATTERN = re.compile(
    r"©\s*([0-9]{4}(?:\s*[-–—]\s*[0-9]{4})?)|copyright\s*([0-9]{4}(?:\s*[-–—]\s*[0-9]{4})?)",
    re.IGNORECASE,
)

# Schemes whose URLs treat "\" as "/" and always carry a path.
SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp", "file"})

_NON_DIGITS = re.compile(r"[^0-9]")
_WHITESPACE_RUN = re.compile(r"\s+")
_TAB_OR_NEWLINE = re.compile(r"[\t\n\r]")
_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):")
_BEFORE_QUERY = re.compile(r"[^?#]*")

# Characters left as-is in each component; "%" keeps existing escapes intact.
_PATH_SAFE = "/%:@!$&'()*+,;=[]^|"
_QUERY_SAFE = "/?%:@!$&()*+,;=[]^|{}`\\"
_FRAGMENT_SAFE = "/?#%:@!$&'()*+,;=[]^|{}\\"


def _encode_special_url(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit(
        (
            parts.scheme,
            parts.netloc,
            quote(parts.path, safe=_PATH_SAFE) or "/",
            quote(parts.query, safe=_QUERY_SAFE),
            quote(parts.fragment, safe=_FRAGMENT_SAFE),
        )
    )


def resolve_image_url(raw: Optional[str], base_url: str) -> Optional[str]:
    """Resolve an image ``src`` against ``base_url`` into an absolute URL.

    For http(s), file and the other special schemes, backslashes before the
    query become slashes and characters not allowed in a URL are
    percent-encoded as UTF-8. Other schemes (``data:``, ``blob:``) are joined
    untouched.

    >>> resolve_image_url("/img/a.png", "https://example.com/page")
    'https://example.com/img/a.png'
    >>> resolve_image_url("/img/my banner.jpg", "https://example.com/page")
    'https://example.com/img/my%20banner.jpg'
    """
    if not raw:
        return None
    src = _TAB_OR_NEWLINE.sub("", raw.strip())
    if not src:
        return None

    match = _SCHEME.match(src)
    scheme = (match.group(1) if match else urlsplit(base_url).scheme).lower()
    if scheme not in SPECIAL_SCHEMES:
        return urljoin(base_url, src) or None

    end = _BEFORE_QUERY.match(src).end()
    src = src[:end].replace("\\", "/") + src[end:]
    return _encode_special_url(urljoin(base_url, src))


def normalize_heading(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return text.strip() or None


def normalize_phone(href: Optional[str], min_digits: int = 8, max_digits: int = 12) -> Optional[str]:
    """Reduce a ``tel:`` link to its digits.

    Numbers with fewer than ``min_digits`` or more than ``max_digits`` digits
    are dropped.
    """
    if not href or not href.startswith(TEL_PREFIX):
        return None
    number = href.replace(TEL_PREFIX, "", 1).strip()
    digits = _NON_DIGITS.sub("", number)
    if min_digits <= len(digits) <= max_digits:
        return digits
    return None


def normalize_address(text: Optional[str], min_length: int = 10) -> Optional[str]:
    """Collapse whitespace runs; keep the address only if longer than ``min_length``."""
    if text is None:
        return None
    address = _WHITESPACE_RUN.sub(" ", text.strip())
    if len(address) > min_length:
        return address
    return None


def find_copyright_notices(footer_texts: Iterable[str]) -> list[str]:
    """Return every copyright notice found in the joined footer text, verbatim."""
    text = " ".join(footer_texts).strip()
    return [match.group(0) for match in COPYRIGHT_PATTERN.finditer(text)]
