"""
In-process Playwright launcher for the board suite.

Each client owns one browser and a default context/page. Every context it
creates shares the fixture origin as `base_url` and the configured step
timeout, so routes, cookies, offline emulation and viewport never leak
between tests that each get their own client.

Usage:
    async with PlaywrightClient(base_url="http://localhost:3000") as client:
        await client.page.goto("/login")
"""

import logging
from typing import Any, Dict, Optional, TypeVar

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from board_e2e.config import SUPPORTED_BROWSERS

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PlaywrightClient:
    """Browser, default context and default page for one test."""

    def __init__(
        self,
        browser_type: str = "chromium",
        headless: bool = True,
        timeout: int = 10000,
        base_url: Optional[str] = None,
    ):
        """
        Args:
            browser_type: one of chromium, firefox, webkit
            headless: launch without a visible window
            timeout: default timeout for every page action, in milliseconds
            base_url: origin that relative navigations resolve against
        """
        if browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(f"Unsupported browser type: {browser_type}")
        self.browser_type = browser_type
        self.headless = headless
        self.timeout = timeout
        self.base_url = base_url

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> "PlaywrightClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @staticmethod
    def _require(value: Optional[T], what: str) -> T:
        if value is None:
            raise RuntimeError(f"Client not connected ({what} unavailable). Use 'async with' or call connect()")
        return value

    def context_options(self, **overrides: Any) -> Dict[str, Any]:
        options: Dict[str, Any] = {}
        if self.base_url:
            options["base_url"] = self.base_url
        options.update(overrides)
        return options

    async def connect(self) -> None:
        """Start Playwright, launch the browser and open the default page.

        A failed launch leaves nothing running; the Playwright error propagates.
        """
        self._playwright = await async_playwright().start()
        try:
            engine = getattr(self._playwright, self.browser_type)
            self._browser = await engine.launch(headless=self.headless)
            self._context = await self.new_context()
            self._page = await self._context.new_page()
        except Exception:
            await self.close()
            raise
        logger.debug("Launched %s (headless=%s, base_url=%s)", self.browser_type, self.headless, self.base_url)

    async def new_context(self, **overrides: Any) -> BrowserContext:
        """Open another context on the same browser (viewport, base_url, ... may be overridden)."""
        browser = self._require(self._browser, "browser")
        context = await browser.new_context(**self.context_options(**overrides))
        context.set_default_timeout(self.timeout)
        return context

    async def new_page(self) -> Page:
        return await self._require(self._context, "context").new_page()

    async def close(self) -> None:
        """Tear down in reverse order; safe to call more than once."""
        context, browser, playwright = self._context, self._browser, self._playwright
        self._page = self._context = self._browser = self._playwright = None
        if context is not None:
            await context.close()
        if browser is not None:
            await browser.close()
        if playwright is not None:
            await playwright.stop()

    @property
    def browser(self) -> Browser:
        return self._require(self._browser, "browser")

    @property
    def context(self) -> BrowserContext:
        return self._require(self._context, "context")

    @property
    def page(self) -> Page:
        return self._require(self._page, "page")
