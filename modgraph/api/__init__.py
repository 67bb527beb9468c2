"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from modgraph.api import app

    uvicorn modgraph.api:app --reload
"""

from modgraph.api.app import app, create_app

__all__ = ["app", "create_app"]
