"""Breadth-first resolution of a workshop item's dependency graph."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional, Tuple

from modgraph.config import settings
from modgraph.workshop.errors import FetchError, ParseError, UrlFormatError, WorkshopError
from modgraph.workshop.fetcher import Fetcher
from modgraph.workshop.ids import extract_workshop_id
from modgraph.workshop.models import Page, ResolveResult
from modgraph.workshop.parser import parse_root_page, parse_scenarios_page

logger = logging.getLogger(__name__)

SCENARIOS_SUFFIX = "/scenarios"


class WorkshopResolver:
    """Resolve the root id, scenarios and transitive dependencies of a mod.

    Pages are fetched one at a time in breadth-first order, so
    ``dependency_ids`` and ``errors`` follow discovery order exactly.  All
    traversal state is local to a single :meth:`resolve` call.

    Args:
        fetcher: Anything implementing :class:`~modgraph.workshop.fetcher.Fetcher`.
        base_url: Origin used to absolutise relative dependency links.
            Defaults to ``settings.workshop_base_url``.
    """

    def __init__(self, fetcher: Fetcher, base_url: Optional[str] = None) -> None:
        self.fetcher = fetcher
        self.base_url = base_url or settings.workshop_base_url

    def resolve(self, url: str, max_depth: Optional[int] = None) -> ResolveResult:
        """Resolve *url* and its dependencies up to *max_depth* levels deep.

        Raises:
            UrlFormatError: *url* carries no workshop identifier.
            FetchError: The root or scenarios page could not be fetched.
            ParseError: The root page yielded no identifier.
        """
        if max_depth is None:
            max_depth = settings.default_max_depth
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")

        root_id = extract_workshop_id(url)
        if root_id is None:
            raise UrlFormatError(url)

        root_page = self._parse(url, self.fetcher.fetch_text(url), root_id)

        scenarios_html = self.fetcher.fetch_text(url.rstrip("/") + SCENARIOS_SUFFIX)
        scenarios = parse_scenarios_page(scenarios_html)

        visited_ids = {root_id}
        visited_urls = {url}
        dependency_ids: List[str] = []
        errors: List[str] = []
        failures: List[WorkshopError] = []

        queue: Deque[Tuple[str, int]] = deque()
        if max_depth > 0:
            queue.extend((dep_url, 1) for dep_url in root_page.dependency_urls)

        while queue:
            dep_url, depth = queue.popleft()
            if depth > max_depth or dep_url in visited_urls:
                continue
            visited_urls.add(dep_url)
            logger.debug("Visiting %s (depth %d)", dep_url, depth)

            try:
                html = self.fetcher.fetch_text(dep_url)
            except FetchError as exc:
                logger.warning("Dependency fetch failed: %s", exc)
                errors.append(f"failed to fetch dependency {dep_url}: {exc.cause}")
                failures.append(exc)
                continue

            try:
                page = self._parse(dep_url, html, extract_workshop_id(dep_url))
            except ParseError as exc:
                logger.warning("Dependency parse failed: %s", exc)
                errors.append(f"failed to parse dependency {dep_url}: {exc.cause}")
                failures.append(exc)
                continue

            if page.identifier not in visited_ids:
                visited_ids.add(page.identifier)
                dependency_ids.append(page.identifier)

            if depth < max_depth:
                queue.extend(
                    (next_url, depth + 1)
                    for next_url in page.dependency_urls
                    if next_url not in visited_urls
                )

        logger.info(
            "Resolved %s: %d dependencies, %d scenarios, %d errors",
            root_id, len(dependency_ids), len(scenarios), len(errors),
        )
        return ResolveResult(
            root_id=root_id,
            root_url=url,
            scenarios=tuple(scenarios),
            dependency_ids=tuple(dependency_ids),
            errors=tuple(errors),
            failures=tuple(failures),
        )

    def _parse(self, url: str, html: str, id_hint: Optional[str]) -> Page:
        try:
            return parse_root_page(html, id_hint=id_hint, base_url=self.base_url)
        except ParseError as exc:
            raise exc.with_url(url) from exc
