"""Workshop page parsing.

A workshop page is semi-structured: newer pages embed their state as JSON in
a ``<script id="__WORKSHOP_STATE__">`` element, older or partially rendered
ones only expose the information in markup.  Extraction is therefore an
ordered chain of independent strategies, tried in turn until one produces a
value.  The identifier chain and the dependency chain run independently.

Identifier chain::

    embedded state  ->  caller hint  ->  "ID <hex>" label  ->  data-props

Dependency chain::

    embedded state  ->  "Dependencies" section  ->  every workshop link
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from bs4 import BeautifulSoup

from modgraph.config import DEFAULT_BASE_URL
from modgraph.workshop.errors import ParseError
from modgraph.workshop.ids import (
    dedupe,
    extract_workshop_id_from_text,
    is_workshop_id,
    normalize_dependency_url,
)
from modgraph.workshop.models import Page

STATE_SCRIPT_ID = "__WORKSHOP_STATE__"
ID_KEYS = ("workshopId", "id")
DEPENDENCY_KEYS = ("dependencies",)

_SCENARIO_MARKER = "Scenario ID"
_SCENARIO_RE = re.compile(r'\{[A-F0-9]{16}\}Missions/[^\s"<>]+\.conf')
_WORKSHOP_LINK = "/workshop/"


# ---------------------------------------------------------------------------
# Parse context
# ---------------------------------------------------------------------------

@dataclass
class PageSource:
    """Everything a strategy may look at for one page."""

    html: str
    soup: BeautifulSoup
    state: Optional[dict[str, Any]]
    id_hint: Optional[str] = None

    @classmethod
    def from_html(cls, html: str, id_hint: Optional[str] = None) -> PageSource:
        soup = BeautifulSoup(html, "html.parser")
        return cls(html=html, soup=soup, state=_embedded_state(soup), id_hint=id_hint)


def _embedded_state(soup: BeautifulSoup) -> Optional[dict[str, Any]]:
    """Return the JSON object inside the workshop state script, if any."""
    script = soup.find("script", id=STATE_SCRIPT_ID)
    if script is None or script.string is None:
        return None
    try:
        value = json.loads(script.string.strip())
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


def _first_workshop_id(value: dict[str, Any], keys: Sequence[str]) -> Optional[str]:
    """Try each alias in turn, skipping values that are not identifiers."""
    for key in keys:
        found = value.get(key)
        if isinstance(found, str):
            workshop_id = _as_workshop_id(found)
            if workshop_id:
                return workshop_id
    return None


def _first_string_list(value: dict[str, Any], keys: Sequence[str]) -> List[str]:
    for key in keys:
        found = value.get(key)
        if isinstance(found, list):
            return [entry for entry in found if isinstance(entry, str)]
    return []


def _as_workshop_id(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip().upper()
    return value if is_workshop_id(value) else None


# ---------------------------------------------------------------------------
# Identifier strategies
# ---------------------------------------------------------------------------

def id_from_embedded_state(source: PageSource) -> Optional[str]:
    """``workshopId``/``id`` from the embedded state block."""
    if source.state is None:
        return None
    return _first_workshop_id(source.state, ID_KEYS)


def id_from_hint(source: PageSource) -> Optional[str]:
    """The identifier the caller already derived (usually from the URL)."""
    return _as_workshop_id(source.id_hint)


def id_from_label(source: PageSource) -> Optional[str]:
    """An ``ID <16 hex>`` label anywhere in the raw text."""
    return extract_workshop_id_from_text(source.html)


def id_from_data_props(source: PageSource) -> Optional[str]:
    """The first ``data-props`` JSON attribute exposing an identifier."""
    for node in source.soup.find_all(attrs={"data-props": True}):
        try:
            props = json.loads(node["data-props"])
        except ValueError:
            continue
        if not isinstance(props, dict):
            continue
        found = _first_workshop_id(props, ID_KEYS)
        if found:
            return found
    return None


ID_STRATEGIES: List[Callable[[PageSource], Optional[str]]] = [
    id_from_embedded_state,
    id_from_hint,
    id_from_label,
    id_from_data_props,
]


# ---------------------------------------------------------------------------
# Dependency strategies
# ---------------------------------------------------------------------------

def _workshop_links(container: Any) -> List[str]:
    links = (a.get("href", "") for a in container.find_all("a", href=True))
    return dedupe(href for href in links if _WORKSHOP_LINK in href)


def dependencies_from_embedded_state(source: PageSource) -> List[str]:
    """The ``dependencies`` array of the embedded state block."""
    if source.state is None:
        return []
    return _first_string_list(source.state, DEPENDENCY_KEYS)


def dependencies_from_section(source: PageSource) -> List[str]:
    """Workshop links inside the first container mentioning "Dependencies"."""
    for node in source.soup.find_all(["section", "div"]):
        if "Dependencies" not in node.get_text():
            continue
        links = _workshop_links(node)
        if links:
            return links
    return []


def dependencies_from_document(source: PageSource) -> List[str]:
    """Every workshop link in the page."""
    return _workshop_links(source.soup)


DEPENDENCY_STRATEGIES: List[Callable[[PageSource], List[str]]] = [
    dependencies_from_embedded_state,
    dependencies_from_section,
    dependencies_from_document,
]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_identifier(source: PageSource) -> Optional[str]:
    """Run the identifier chain, returning the first hit."""
    for strategy in ID_STRATEGIES:
        found = strategy(source)
        if found:
            return found
    return None


def extract_dependencies(source: PageSource) -> List[str]:
    """Run the dependency chain, returning the first non-empty link list."""
    for strategy in DEPENDENCY_STRATEGIES:
        links = strategy(source)
        if links:
            return links
    return []


def parse_root_page(
    html: str,
    id_hint: Optional[str] = None,
    base_url: str = DEFAULT_BASE_URL,
) -> Page:
    """Parse a workshop item page into a :class:`Page`.

    Dependency links are made absolute against *base_url* and deduplicated
    in order of appearance.

    Raises:
        ParseError: If no strategy yields an identifier.
    """
    source = PageSource.from_html(html, id_hint=id_hint)

    identifier = extract_identifier(source)
    if identifier is None:
        raise ParseError("workshop id not found")

    urls = dedupe(
        normalize_dependency_url(link, base_url)
        for link in extract_dependencies(source)
    )
    return Page(identifier=identifier, dependency_urls=tuple(urls))


def parse_scenarios_page(html: str) -> List[str]:
    """Return the unique scenario ids listed on a ``/scenarios`` page.

    Pages without a "Scenario ID" marker have no scenarios; this never raises.
    """
    if _SCENARIO_MARKER not in html:
        return []
    return dedupe(match.group(0) for match in _SCENARIO_RE.finditer(html))
