"""Serve canned responses through Playwright route interception.

A fixture is registered for a route path and fulfilled in-browser, so no
backend has to be running. Register fixtures before navigating to them.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Union

from playwright.async_api import BrowserContext, Page, Route

logger = logging.getLogger(__name__)

RouteTarget = Union[Page, BrowserContext]

HTML = "text/html"
JSON = "application/json"


def route_pattern(route_path: str) -> str:
    """Glob matching any URL that ends with `route_path`."""
    if not route_path.startswith("/"):
        route_path = "/" + route_path
    return f"**{route_path}"


async def serve_fixture(
    target: RouteTarget,
    route_path: str,
    content: str,
    content_type: str = HTML,
    status: int = 200,
) -> str:
    """Fulfil every request matching `route_path` with `content`.

    Re-registering the same path replaces the previous handler.
    Returns the glob pattern that was registered.
    """
    pattern = route_pattern(route_path)

    async def fulfill(route: Route) -> None:
        await route.fulfill(status=status, content_type=content_type, body=content)

    await target.unroute(pattern)
    await target.route(pattern, fulfill)
    logger.debug("Serving %s fixture for %s (status %s, %d bytes)", content_type, pattern, status, len(content))
    return pattern


async def serve_json(target: RouteTarget, route_path: str, payload: Any, status: int = 200) -> str:
    """Serve a JSON document for API-style fixtures."""
    return await serve_fixture(target, route_path, json.dumps(payload), content_type=JSON, status=status)
