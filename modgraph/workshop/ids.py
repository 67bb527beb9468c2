"""Identifier and URL helpers shared by the parser and the resolver."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

# 16 uppercase hexadecimal characters, e.g. ``595F2BF2F44836FB``.
WORKSHOP_ID_PATTERN = r"[A-F0-9]{16}"

_URL_ID_RE = re.compile(rf"/workshop/({WORKSHOP_ID_PATTERN})")
_LABEL_ID_RE = re.compile(rf"\bID\s+({WORKSHOP_ID_PATTERN})\b")
_FULL_ID_RE = re.compile(rf"^{WORKSHOP_ID_PATTERN}$")


def extract_workshop_id(url: str) -> Optional[str]:
    """Return the identifier from the first ``/workshop/<ID>`` segment of *url*."""
    match = _URL_ID_RE.search(url)
    if match:
        return match.group(1)
    return None


def extract_workshop_id_from_text(text: str) -> Optional[str]:
    """Scan raw page text for an ``ID <16 hex>`` label."""
    match = _LABEL_ID_RE.search(text)
    if match:
        return match.group(1)
    return None


def is_workshop_id(value: object) -> bool:
    """Return ``True`` if *value* is a well-formed workshop identifier."""
    return isinstance(value, str) and bool(_FULL_ID_RE.match(value))


def normalize_dependency_url(raw: str, base_url: str) -> str:
    """Turn a dependency link into an absolute URL rooted at *base_url*.

    Absolute ``http(s)://`` links pass through unchanged; ``/path`` is
    appended to the origin and anything else is joined beneath it.
    """
    if raw.startswith("http://") or raw.startswith("https://"):
        return raw
    origin = base_url.rstrip("/")
    if raw.startswith("/"):
        return f"{origin}{raw}"
    return f"{origin}/{raw}"


def dedupe(values: Iterable[str]) -> List[str]:
    """Remove duplicates from *values*, keeping first-occurrence order."""
    seen: set[str] = set()
    unique: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique
