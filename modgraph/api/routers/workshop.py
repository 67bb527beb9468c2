"""Workshop resolution endpoint.

Routes
------
POST /workshop/resolve    Body: {"url": "https://...", "maxDepth": 5}  → resolve
"""

from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from modgraph.config import settings
from modgraph.workshop import UrlFormatError, WorkshopError

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResolveRequest(_CamelModel):
    url: str
    max_depth: int = Field(default_factory=lambda: settings.default_max_depth, ge=0)


class ResolveResponse(_CamelModel):
    root_id: str
    root_url: str
    scenarios: List[str]
    dependency_ids: List[str]
    errors: List[str]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/resolve", response_model=ResolveResponse)
def resolve_endpoint(body: ResolveRequest, request: Request) -> dict[str, Any]:
    """Resolve a workshop item's scenarios and transitive dependencies.

    Soft failures on individual dependency pages are reported in ``errors``;
    a failure on the root or scenarios page fails the whole request.
    """
    if not body.url.strip():
        raise HTTPException(status_code=400, detail="url must not be empty")

    resolver = request.app.state.resolver
    try:
        result = resolver.resolve(body.url, body.max_depth)
    except UrlFormatError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except WorkshopError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return result.to_dict()
