"""
Web Application Suite

Drives the mock board application through the page objects: user
authentication, the mobile navigation menu, design system tokens, the payment
form, the API documentation page and the marketing sections of the landing
page.

Run one group with e.g. `board-e2e auth` (selects TestUserAuthentication).
"""
import re

import pytest
from playwright.async_api import expect

from board_e2e.cards import Category, cards_by_category
from board_e2e.pages import (
    ApiDocsPage,
    BoardPage,
    DashboardPage,
    LandingPage,
    LoginPage,
    MobileNavigation,
    PaymentDetails,
    PaymentPage,
    SignupDetails,
    SignupPage,
)


pytestmark = pytest.mark.asyncio


@pytest.fixture
def webapp(test_data):
    return test_data["webapp"]


async def login_as(page, credentials):
    login = LoginPage(page)
    await login.navigate()
    await login.login(credentials["email"], credentials["password"])
    return login


class TestUserAuthentication:
    """Login, signup and logout against the mock board app."""

    async def test_login_with_valid_credentials(self, board_browser, webapp):
        page = board_browser.page
        login = await login_as(page, webapp["userAuth"]["login"]["validCredentials"])

        await expect(page).to_have_url(re.compile(r"/dashboard$"))
        assert await login.is_logged_in()

    async def test_login_with_invalid_credentials(self, board_browser, webapp):
        page = board_browser.page
        invalid = webapp["userAuth"]["login"]["invalidCredentials"]
        login = await login_as(page, invalid)

        await expect(login.error_message).to_contain_text("Invalid credentials")
        await expect(page).to_have_url(re.compile(r"/login$"))
        await expect(login.email_input).to_have_value(invalid["email"])
        await expect(login.password_input).to_have_value("")

    async def test_empty_form_marks_fields_invalid(self, board_browser):
        login = LoginPage(board_browser.page)
        await login.navigate()
        await login.submit_empty_form()

        await expect(login.error_message).to_be_visible()
        assert await login.validation_errors() == {"email": "true", "password": "true"}

    async def test_signup_then_login(self, board_browser, webapp):
        page = board_browser.page
        details = SignupDetails.from_dict(webapp["userAuth"]["signup"]["validUser"])
        signup = SignupPage(page)
        await signup.navigate()
        await signup.signup(details)

        login = LoginPage(page)
        await expect(page).to_have_url(re.compile(r"/login\?signup=1$"))
        await expect(login.success_message).to_contain_text("Account created")

        await login.login(details.email, details.password)
        await expect(page).to_have_url(re.compile(r"/dashboard$"))

    async def test_signup_password_mismatch(self, board_browser, webapp):
        signup = SignupPage(board_browser.page)
        await signup.navigate()
        await signup.signup(SignupDetails.from_dict(webapp["userAuth"]["signup"]["passwordMismatch"]))

        await expect(signup.error_message).to_contain_text("Passwords do not match")

    async def test_dashboard_shows_cards_by_category(self, board_browser, webapp, cards):
        page = board_browser.page
        await login_as(page, webapp["userAuth"]["login"]["validCredentials"])

        dashboard = DashboardPage(page)
        await dashboard.wait_for_cards_to_load()
        assert await dashboard.card_count() == len(cards)
        grouped = [card for category in Category for card in cards_by_category(cards, category)]
        assert await dashboard.card_titles() == [card.title for card in grouped]
        assert await dashboard.card_tags(0) == list(cards[0].tags)
        for category in ("web-application", "mobile", "marketing"):
            await expect(dashboard.category_section(category)).to_be_visible()

        board = BoardPage(page)
        await board.expect_card_visible("Offline mode")
        await board.expect_card_has_tags("Offline mode", ["Feature", "High Priority"])

    async def test_logout(self, board_browser, webapp):
        page = board_browser.page
        await login_as(page, webapp["userAuth"]["login"]["validCredentials"])
        await DashboardPage(page).logout()

        await expect(page).to_have_url(re.compile(r"/login$"))
        await DashboardPage(page).navigate()
        await expect(page).to_have_url(re.compile(r"/login$"))


class TestMobileNavigation:
    """Hamburger menu on a phone-sized viewport."""

    async def open_menu(self, board_browser):
        nav = MobileNavigation(board_browser.page)
        await nav.set_mobile_viewport()
        await nav.navigate()
        await expect(nav.hamburger_button).to_be_visible()
        await nav.open_menu()
        await expect(nav.mobile_menu).to_be_visible()
        return nav

    async def test_hamburger_opens_menu(self, board_browser):
        nav = await self.open_menu(board_browser)
        assert await nav.is_menu_visible()

    async def test_close_button_hides_menu(self, board_browser):
        nav = await self.open_menu(board_browser)
        await nav.close_menu()
        await expect(nav.mobile_menu).to_be_hidden()

    async def test_click_outside_hides_menu(self, board_browser):
        nav = await self.open_menu(board_browser)
        await nav.click_outside_menu()
        await expect(nav.mobile_menu).to_be_hidden()

    async def test_menu_items(self, board_browser, webapp):
        items = webapp["navigation"]["mobileMenu"]["menuItems"]
        nav = await self.open_menu(board_browser)
        for item in items:
            await expect(nav.mobile_menu.get_by_text(item, exact=True)).to_be_visible()

        await nav.click_menu_item(items[1])
        await expect(nav.mobile_menu).to_be_hidden()

    async def test_desktop_viewport_hides_hamburger(self, board_browser):
        nav = MobileNavigation(board_browser.page)
        await board_browser.set_viewport(1280, 800)
        await nav.navigate()
        await expect(nav.hamburger_button).to_be_hidden()


class TestDesignSystem:
    """Color palette and typography tokens."""

    async def test_primary_button_color(self, board_browser, webapp):
        page = board_browser.page
        await page.goto("/")
        await expect(page.locator(".btn-primary").first).to_have_css(
            "background-color", webapp["designSystem"]["colorPalette"]["primary"]
        )

    async def test_input_border_uses_secondary_color(self, board_browser, webapp):
        login = LoginPage(board_browser.page)
        await login.navigate()
        await expect(login.email_input).to_have_css(
            "border-top-color", webapp["designSystem"]["colorPalette"]["secondary"]
        )

    async def test_error_color(self, board_browser, webapp):
        login = await login_as(board_browser.page, webapp["userAuth"]["login"]["invalidCredentials"])
        await expect(login.error_message).to_have_css("color", webapp["designSystem"]["colorPalette"]["error"])

    async def test_success_color(self, board_browser, webapp):
        login = LoginPage(board_browser.page)
        await login.navigate_to("/login?signup=1")
        await expect(login.success_message).to_have_css("color", webapp["designSystem"]["colorPalette"]["success"])

    async def test_typography(self, board_browser, webapp):
        page = board_browser.page
        typography = webapp["designSystem"]["typography"]
        await page.goto("/")
        await expect(page.locator("body")).to_have_css("font-family", typography["fontFamily"])
        await expect(page.locator("h1").first).to_have_css("font-size", typography["headingSizes"]["h1"])
        await expect(page.locator("h2").first).to_have_css("font-size", typography["headingSizes"]["h2"])


class TestPaymentGateway:
    """Payment form outcomes for the gateway test cards."""

    async def test_successful_payment(self, board_browser, webapp):
        gateway = webapp["apiIntegration"]["paymentGateway"]
        payment = PaymentPage(board_browser.page)
        await payment.navigate()
        await payment.process_payment(PaymentDetails(gateway["testCards"]["success"], gateway["amounts"]["small"]))

        await expect(payment.success_message).to_contain_text("Payment successful")

    async def test_declined_payment(self, board_browser, webapp):
        gateway = webapp["apiIntegration"]["paymentGateway"]
        payment = PaymentPage(board_browser.page)
        await payment.navigate()
        await payment.process_payment(PaymentDetails(gateway["testCards"]["declined"], gateway["amounts"]["medium"]))

        await expect(payment.error_message).to_contain_text("Payment declined")

    async def test_empty_form_validation(self, board_browser):
        payment = PaymentPage(board_browser.page)
        await payment.navigate()
        await payment.submit_empty_form()

        await expect(payment.error_message).to_be_visible()
        assert await payment.validation_errors() == {"cardNumber": "true", "expiryDate": "true", "cvv": "true"}


class TestApiDocumentation:
    """API documentation page lists every endpoint."""

    async def test_endpoints_listed(self, board_browser, webapp):
        endpoints = webapp["documentation"]["apiEndpoints"]
        docs = ApiDocsPage(board_browser.page)
        await docs.navigate()

        await expect(docs.title).to_have_text("API Documentation")
        await expect(docs.endpoints()).to_have_count(len(endpoints))
        for endpoint in endpoints:
            row = docs.endpoint_row(endpoint["method"], endpoint["path"])
            await expect(row).to_contain_text(endpoint["description"])

    async def test_authentication_indicators(self, board_browser, webapp):
        endpoints = webapp["documentation"]["apiEndpoints"]
        docs = ApiDocsPage(board_browser.page)
        await docs.navigate()

        await expect(docs.authentication_indicators()).to_have_count(sum(1 for e in endpoints if e["requiresAuth"]))

    async def test_try_it_out(self, board_browser):
        docs = ApiDocsPage(board_browser.page)
        await docs.navigate()

        await expect(docs.interactive_section).to_be_visible()
        await expect(docs.try_it_out_button).to_be_enabled()


class TestMarketing:
    """Landing page content, content calendar and Q2 email campaign for a signed-in user."""

    @pytest.fixture
    def marketing(self, webapp):
        return webapp["marketing"]

    async def open_landing(self, board_browser, webapp):
        page = board_browser.page
        await login_as(page, webapp["userAuth"]["login"]["validCredentials"])
        await expect(page).to_have_url(re.compile(r"/dashboard$"))
        landing = LandingPage(page)
        await landing.navigate()
        return landing

    async def test_social_calendar_plans_next_month(self, board_browser, webapp, marketing):
        planning = marketing["socialMedia"]["contentPlanning"]
        landing = await self.open_landing(board_browser, webapp)

        content = await landing.social_calendar_content()
        assert content
        for item in planning["campaignItems"]:
            assert item in content
        for test_id in planning["calendarElements"]:
            await expect(landing.element(test_id)).to_be_visible()
        await expect(landing.page.get_by_test_id("calendar-entry")).to_have_count(len(planning["campaignItems"]))

    async def test_q2_email_campaign(self, board_browser, webapp, marketing):
        campaign = marketing["emailCampaign"]["q2Campaign"]
        landing = await self.open_landing(board_browser, webapp)

        content = await landing.email_campaign_content()
        assert content
        for text in campaign["campaignContent"]:
            assert text in content
        for test_id in campaign["campaignElements"]:
            await expect(landing.element(test_id)).to_be_visible()

    async def test_landing_content_is_approved(self, board_browser, webapp, marketing):
        approval = marketing["landingPage"]["contentApproval"]
        landing = await self.open_landing(board_browser, webapp)

        content = await landing.landing_page_content()
        assert content
        for text in approval["approvedContent"]:
            assert text in content
        assert "lorem ipsum" not in content.lower()
        for test_id in approval["pageElements"]:
            await expect(landing.element(test_id)).to_be_visible()

    async def test_sections_missing_from_other_pages(self, board_browser):
        landing = LandingPage(board_browser.page)
        await landing.navigate_to("/api-docs")

        assert await landing.email_campaign_content() is None
