"""Landing page with the marketing sections: hero, content calendar and email campaign."""
from __future__ import annotations

from typing import Optional

from playwright.async_api import Locator, Page

from board_e2e.pages.base import BasePage


class LandingPage(BasePage):
    path = "/"

    LANDING_CONTENT = '[data-testid="landing-content"], .landing-content'
    SOCIAL_CALENDAR = '[data-testid="social-calendar"], .social-calendar'
    EMAIL_CAMPAIGN = '[data-testid="email-campaign"], .email-campaign'

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.landing_content = self.first(self.LANDING_CONTENT)
        self.social_calendar = self.first(self.SOCIAL_CALENDAR)
        self.email_campaign = self.first(self.EMAIL_CAMPAIGN)

    def element(self, test_id: str) -> Locator:
        return self.page.get_by_test_id(test_id).first

    async def section_text(self, section: Locator) -> Optional[str]:
        """Inner text of a section, or None when the page does not show it."""
        if not await section.is_visible():
            return None
        return await section.inner_text()

    async def landing_page_content(self) -> Optional[str]:
        return await self.section_text(self.landing_content)

    async def social_calendar_content(self) -> Optional[str]:
        return await self.section_text(self.social_calendar)

    async def email_campaign_content(self) -> Optional[str]:
        return await self.section_text(self.email_campaign)
