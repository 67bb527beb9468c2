"""Exception types raised while resolving workshop dependencies.

``resolve`` lets these escape for the root and scenarios pages (call-level
failures).  For every other page they are caught, recorded on the result and
traversal continues.
"""

from __future__ import annotations


class WorkshopError(Exception):
    """Base class for all resolver failures."""


class UrlFormatError(WorkshopError):
    """The root URL carries no ``/workshop/<ID>`` segment."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"failed to extract workshop id from url {url!r}")


class FetchError(WorkshopError):
    """A page could not be retrieved (transport error or non-2xx status)."""

    def __init__(self, url: str, cause: str) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to fetch {url}: {cause}")


class ParseError(WorkshopError):
    """A fetched page did not yield a workshop identifier."""

    def __init__(self, cause: str, url: str | None = None) -> None:
        self.url = url
        self.cause = cause
        message = f"failed to parse {url}: {cause}" if url else cause
        super().__init__(message)

    def with_url(self, url: str) -> ParseError:
        """Return a copy of this error bound to *url*."""
        return ParseError(self.cause, url=url)
