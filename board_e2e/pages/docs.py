"""API documentation page."""
from __future__ import annotations

from playwright.async_api import Locator, Page

from board_e2e.pages.base import BasePage


class ApiDocsPage(BasePage):
    path = "/api-docs"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.title = self.first("h1")
        self.try_it_out_button = self.first('button:has-text("Try it out")')
        self.interactive_section = self.first(".try-it-out, .test-endpoint")

    def endpoints(self) -> Locator:
        return self.page.locator(".endpoint, .api-endpoint")

    def endpoint_row(self, method: str, path: str) -> Locator:
        return self.endpoints().filter(has_text=method).filter(has_text=path).first

    def authentication_indicators(self) -> Locator:
        return self.page.locator("text=Authentication Required")
