"""Shared page-object behavior."""
from __future__ import annotations

from playwright.async_api import Locator, Page


class BasePage:
    """Selector-level helpers shared by every page object."""

    path = "/"

    def __init__(self, page: Page) -> None:
        self.page = page

    async def navigate(self) -> None:
        await self.page.goto(self.path)

    async def navigate_to(self, url: str) -> None:
        await self.page.goto(url)

    async def is_element_visible(self, selector: str) -> bool:
        return await self.page.locator(selector).first.is_visible()

    async def wait_for_element_visible(self, selector: str, timeout: float = 5000) -> None:
        await self.page.locator(selector).first.wait_for(state="visible", timeout=timeout)

    async def click_element(self, selector: str) -> None:
        await self.page.locator(selector).first.click()

    def first(self, selector: str) -> Locator:
        return self.page.locator(selector).first
