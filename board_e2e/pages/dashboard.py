"""Board dashboard and card lookup."""
from __future__ import annotations

from typing import List, Sequence

from playwright.async_api import Locator, Page, expect

from board_e2e.pages.base import BasePage


class DashboardPage(BasePage):
    path = "/dashboard"

    CARD_CONTAINER = '[data-testid="card-container"], .card-container, .cards-grid'
    CARD = '[data-testid="card"], .card, .task-card'
    CARD_TITLE = '[data-testid="card-title"], .card-title, h3'
    CARD_TAG = '[data-testid="card-tag"], .tag, .badge'
    CATEGORY_SECTION = '[data-testid="category-section"], .category-section'
    LOGOUT_BUTTON = '[data-testid="logout"], .logout, .logout-btn'

    async def wait_for_cards_to_load(self) -> None:
        await self.wait_for_element_visible(self.CARD_CONTAINER)

    def cards(self) -> Locator:
        return self.page.locator(self.CARD)

    async def card_count(self) -> int:
        return await self.cards().count()

    async def card_titles(self) -> List[str]:
        return [text.strip() for text in await self.cards().locator(self.CARD_TITLE).all_text_contents()]

    async def card_tags(self, index: int) -> List[str]:
        tags = self.cards().nth(index).locator(self.CARD_TAG)
        return [text.strip() for text in await tags.all_text_contents()]

    def category_section(self, category: str) -> Locator:
        selector = ", ".join(f'{part.strip()}[data-category="{category}"]' for part in self.CATEGORY_SECTION.split(","))
        return self.page.locator(selector)

    async def logout(self) -> None:
        await self.click_element(self.LOGOUT_BUTTON)


class BoardPage(BasePage):
    """Card assertions by title, independent of the board markup."""

    def card_title(self, title: str) -> Locator:
        return self.page.get_by_text(title, exact=False).first

    def card_container(self, title: str) -> Locator:
        return self.card_title(title).locator("xpath=ancestor::*[self::div or self::article or self::li][1]")

    async def expect_card_visible(self, title: str) -> None:
        await expect(self.card_title(title), f'Card with title containing "{title}" should be visible').to_be_visible()

    async def expect_card_has_tags(self, title: str, tags: Sequence[str]) -> None:
        card = self.card_container(title)
        for tag in tags:
            await expect(card.get_by_text(tag, exact=False).first, f'Tag "{tag}" for card "{title}"').to_be_visible()
