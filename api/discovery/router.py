"""
GET /api: describe every endpoint of this API.

The document is built from the registered routes, so it always matches the
route table. Descriptions come from the endpoint docstrings.
"""

from __future__ import annotations

import inspect

from fastapi import APIRouter, Request
from fastapi.routing import APIRoute

router = APIRouter()

API_PREFIX = "/api"


def _describe(route: APIRoute) -> dict:
    doc = inspect.getdoc(route.endpoint) or route.summary or ""
    entry: dict = {"description": doc.strip().splitlines()[0] if doc.strip() else ""}
    queries = [param.alias for param in route.dependant.query_params]
    if queries:
        entry["queries"] = queries
    return entry


def describe_endpoints(routes: list) -> dict[str, dict]:
    endpoints: dict[str, dict] = {}
    for route in routes:
        if not isinstance(route, APIRoute) or not route.path.startswith(API_PREFIX):
            continue
        for method in sorted(route.methods):
            endpoints[f"{method} {route.path}"] = _describe(route)
    return endpoints


@router.get(API_PREFIX)
async def get_endpoints(request: Request) -> dict:
    """
    List every available endpoint with a short description.
    """
    return {"api": describe_endpoints(request.app.routes)}
