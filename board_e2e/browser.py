"""Thin wrapper around Playwright pages for the board suite.

`Browser` is the capability set the dispatcher, tag checks and scenarios
rely on: navigation, content injection, text lookup, visibility, computed
style and route interception.
"""
from __future__ import annotations

import re
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, Optional, Pattern, Union

import anyio
from playwright.async_api import BrowserContext, Locator, Page, Route, expect
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeout

from board_e2e.config import settings
from board_e2e.playwright_client import PlaywrightClient

TextMatcher = Union[str, Pattern[str]]
RouteHandler = Callable[[Route], Awaitable[None]]

TAG_SELECTOR = ".tag"

_COMPUTED_STYLE_JS = """(el, props) => {
    const style = window.getComputedStyle(el);
    const out = {};
    for (const prop of props) { out[prop] = style.getPropertyValue(prop); }
    return out;
}"""


@dataclass
class ToolError(Exception):
    """Raised when a browser operation fails."""

    name: str
    payload: Dict[str, Any]
    message: str

    def __str__(self) -> str:  # pragma: no cover - human readable helper
        return f"{self.name} failed ({self.message}) with payload={self.payload}"


class Browser:
    """Convenience wrapper over a Playwright page and its browser context."""

    def __init__(self, page: Page, context: Optional[BrowserContext] = None) -> None:
        self._page = page
        self._context = context or page.context
        self.current_url: str | None = None

    @property
    def page(self) -> Page:
        return self._page

    @property
    def context(self) -> BrowserContext:
        return self._context

    def _update_state(self) -> None:
        self.current_url = self._page.url

    async def reset(self) -> None:
        """Navigate to about:blank (reset state)."""
        await self._page.goto("about:blank")
        self._update_state()

    # ---- navigation --------------------------------------------------------------
    async def navigate(self, url: str, wait_until: str = "load") -> Dict[str, Any]:
        """Navigate to URL and return the response status.

        Relative URLs resolve against the context base URL (the fixture origin).
        """
        try:
            response = await self._page.goto(url, wait_until=wait_until)
        except PlaywrightTimeout:
            raise
        except PlaywrightError as exc:
            raise ToolError(name="navigate", payload={"url": url, "wait_until": wait_until}, message=str(exc))
        self._update_state()
        return {"url": self.current_url, "status": response.status if response else None}

    async def reload(self) -> None:
        await self._page.reload()
        self._update_state()

    async def set_content(self, html: str) -> None:
        await self._page.set_content(html)
        self._update_state()

    async def intercept_route(self, pattern: str, handler: RouteHandler) -> None:
        await self._page.route(pattern, handler)

    # ---- element lookup ----------------------------------------------------------
    def locator(self, selector: str, within: Optional[Locator] = None) -> Locator:
        scope = within if within is not None else self._page
        return scope.locator(selector)

    def locate_text(self, text: TextMatcher, within: Optional[Locator] = None, exact: bool = False) -> Locator:
        """First element whose text contains `text` (case-insensitive unless exact)."""
        scope = within if within is not None else self._page
        if isinstance(text, re.Pattern):
            return scope.get_by_text(text).first
        return scope.get_by_text(text, exact=exact).first

    def locate_tag(self, text: TextMatcher, within: Optional[Locator] = None, selector: str = TAG_SELECTOR) -> Locator:
        """First tag element whose text contains `text`; titles and other card text never match."""
        return self.locator(selector, within=within).filter(has_text=text).first

    async def count_text(self, text: str, within: Optional[Locator] = None) -> int:
        return await self.locator(f"text={text}", within=within).count()

    async def is_visible(self, locator: Locator) -> bool:
        return await locator.is_visible()

    async def expect_visible(self, locator: Locator, message: Optional[str] = None) -> None:
        """Hard assertion that waits for the element to become visible."""
        await expect(locator, message).to_be_visible()

    async def computed_style(self, locator: Locator, *properties: str) -> Dict[str, str]:
        """Computed CSS values keyed by hyphenated property name."""
        return await locator.evaluate(_COMPUTED_STYLE_JS, list(properties))

    # ---- interaction -------------------------------------------------------------
    async def click(self, selector: str) -> None:
        try:
            await self._page.click(selector)
        except PlaywrightTimeout:
            raise
        except PlaywrightError as exc:
            raise ToolError(name="click", payload={"selector": selector}, message=str(exc))
        self._update_state()

    async def text(self, selector: str) -> str:
        """Get text content of element."""
        text = await self._page.text_content(selector)
        return text or ""

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        """Execute JavaScript in the page context."""
        try:
            return await self._page.evaluate(script, arg)
        except PlaywrightError as exc:
            raise ToolError(name="evaluate", payload={"script": script}, message=str(exc))

    async def wait_for_text(self, selector: str, expected: str, timeout: float = 3.0, interval: float = 0.25) -> str:
        """Poll for text content until it contains the expected substring."""
        deadline = anyio.current_time() + timeout
        content = ""
        while anyio.current_time() <= deadline:
            content = await self.text(selector)
            if expected in content:
                return content
            await anyio.sleep(interval)
        raise AssertionError(f"Timed out waiting for '{expected}' in selector '{selector}' (last: {content!r})")

    async def set_viewport(self, width: int, height: int) -> None:
        await self._page.set_viewport_size({"width": width, "height": height})

    async def set_offline(self, offline: bool) -> None:
        await self._context.set_offline(offline)

    async def add_init_script(self, script: str) -> None:
        await self._page.add_init_script(script)


@asynccontextmanager
async def browser_session(base_url: Optional[str] = None) -> AsyncIterator[Browser]:
    """Yield a Browser on a fresh context whose relative URLs resolve to `base_url`."""
    async with PlaywrightClient(
        browser_type=settings.browser_type,
        headless=settings.playwright_headless,
        timeout=settings.timeout_ms,
        base_url=base_url or settings.fixture_origin,
    ) as client:
        yield Browser(client.page, client.context)
