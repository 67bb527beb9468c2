"""Workshop package: page parsing and dependency resolution."""

from modgraph.workshop.errors import FetchError, ParseError, UrlFormatError, WorkshopError
from modgraph.workshop.fetcher import Fetcher, HttpxFetcher
from modgraph.workshop.ids import extract_workshop_id, normalize_dependency_url
from modgraph.workshop.models import Page, ResolveResult
from modgraph.workshop.parser import parse_root_page, parse_scenarios_page
from modgraph.workshop.resolver import WorkshopResolver

__all__ = [
    "WorkshopResolver",
    "Fetcher",
    "HttpxFetcher",
    "Page",
    "ResolveResult",
    "WorkshopError",
    "UrlFormatError",
    "FetchError",
    "ParseError",
    "extract_workshop_id",
    "normalize_dependency_url",
    "parse_root_page",
    "parse_scenarios_page",
]
