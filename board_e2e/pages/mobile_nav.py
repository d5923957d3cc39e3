"""Hamburger navigation on narrow viewports."""
from __future__ import annotations

from playwright.async_api import Page

from board_e2e.pages.base import BasePage

MOBILE_VIEWPORT = {"width": 375, "height": 667}


class MobileNavigation(BasePage):
    HAMBURGER = '.hamburger-menu, .mobile-menu-toggle, [aria-label="Menu"]'
    MENU = ".mobile-menu, .nav-menu"
    CLOSE_BUTTON = '.close-menu, .menu-close, [aria-label="Close menu"]'

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.hamburger_button = self.first(self.HAMBURGER)
        self.mobile_menu = self.first(self.MENU)
        self.close_button = self.first(self.CLOSE_BUTTON)

    async def set_mobile_viewport(self) -> None:
        await self.page.set_viewport_size(MOBILE_VIEWPORT)

    async def open_menu(self) -> None:
        await self.hamburger_button.click()

    async def close_menu(self) -> None:
        await self.close_button.click()

    async def click_menu_item(self, label: str) -> None:
        await self.mobile_menu.get_by_text(label, exact=True).click()

    async def click_outside_menu(self) -> None:
        await self.page.click("body", position={"x": 50, "y": 50})

    async def is_menu_visible(self) -> bool:
        return await self.mobile_menu.is_visible()
