"""Data models for the workshop resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from modgraph.workshop.errors import WorkshopError


@dataclass(frozen=True)
class Page:
    """A single parsed workshop page."""

    identifier: str
    dependency_urls: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolveResult:
    """Outcome of one :meth:`WorkshopResolver.resolve` call.

    ``errors`` holds one human-readable line per dependency page that failed
    to fetch or parse; ``failures`` holds the matching typed exceptions in the
    same order.  Only ``errors`` is part of the serialised shape.
    """

    root_id: str
    root_url: str
    scenarios: Tuple[str, ...] = ()
    dependency_ids: Tuple[str, ...] = ()
    errors: Tuple[str, ...] = ()
    failures: Tuple[WorkshopError, ...] = field(default=(), compare=False, repr=False)

    @property
    def ok(self) -> bool:
        """``True`` when every reachable dependency was fetched and parsed."""
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON result shape (camelCase keys)."""
        return {
            "rootId": self.root_id,
            "rootUrl": self.root_url,
            "scenarios": list(self.scenarios),
            "dependencyIds": list(self.dependency_ids),
            "errors": list(self.errors),
        }
