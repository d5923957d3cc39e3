"""Named interaction scenarios keyed by card title.

A scenario replaces the generic tag checks for its card. It serves the
fixtures it needs, drives the page and ends in hard assertions; failures
propagate as-is.
"""
from __future__ import annotations

import logging
import re
import time
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Mapping

from playwright.async_api import expect

from board_e2e import fixture_pages
from board_e2e.browser import Browser
from board_e2e.cards import load_test_data
from board_e2e.config import settings
from board_e2e.fixtures import serve_fixture, serve_json
from board_e2e.pages import LoginPage, MobileNavigation, PaymentDetails, PaymentPage, SignupDetails, SignupPage

logger = logging.getLogger(__name__)

Scenario = Callable[[Browser], Awaitable[None]]

SUCCESS_CARD = "4242424242424242"
DECLINED_CARD = "4000000000000002"

GRANT_NOTIFICATIONS_JS = "window.Notification = { requestPermission: () => Promise.resolve('granted') };"


@lru_cache(maxsize=1)
def ui_tokens() -> Dict[str, Any]:
    return load_test_data().get("ui", {})


# ---- web application -------------------------------------------------------------
async def user_authentication(browser: Browser) -> None:
    credentials = settings.require_login_credentials()
    logger.debug("Login scenario as %s", credentials.email)
    await serve_fixture(browser.page, "/login", fixture_pages.login_page())
    await serve_fixture(browser.page, "/dashboard", fixture_pages.dashboard_page())

    login = LoginPage(browser.page)
    await login.navigate()
    await login.login(credentials.email, credentials.password)

    await expect(browser.page).to_have_url(re.compile(r"/dashboard$"))
    await expect(browser.page.locator(".welcome-message")).to_be_visible()


async def signup_then_login(browser: Browser) -> None:
    await serve_fixture(browser.page, "/signup", fixture_pages.signup_page())
    await serve_fixture(browser.page, "/login", fixture_pages.login_page())

    signup = SignupPage(browser.page)
    await signup.navigate()
    await signup.signup(
        SignupDetails(
            first_name="Test",
            last_name="User",
            email=f"test{int(time.time() * 1000)}@example.com",
            password="Password123!",
            confirm_password="Password123!",
        )
    )

    await expect(browser.page).to_have_url(re.compile(r"/login$"))
    await expect(browser.page.locator(".success-message")).to_contain_text("Logged in")


async def _open_mobile_menu(browser: Browser) -> MobileNavigation:
    await serve_fixture(browser.page, "/", fixture_pages.mobile_menu_page())
    nav = MobileNavigation(browser.page)
    await nav.set_mobile_viewport()
    await browser.navigate("/")
    await nav.open_menu()
    await expect(nav.mobile_menu).to_be_visible()
    return nav


async def mobile_menu_close_button(browser: Browser) -> None:
    nav = await _open_mobile_menu(browser)
    await nav.close_menu()
    await expect(nav.mobile_menu).not_to_be_visible()


async def mobile_menu_click_outside(browser: Browser) -> None:
    nav = await _open_mobile_menu(browser)
    await nav.click_outside_menu()
    await expect(nav.mobile_menu).not_to_be_visible()


async def design_system_colors(browser: Browser) -> None:
    await serve_fixture(browser.page, "/", fixture_pages.design_system_page())
    await browser.navigate("/")
    await expect(browser.page.locator("button.primary")).to_have_css(
        "background-color", ui_tokens()["primaryButton"]["color"]
    )


async def design_system_typography(browser: Browser) -> None:
    await serve_fixture(browser.page, "/", fixture_pages.design_system_page())
    await browser.navigate("/")
    await expect(browser.page.locator("body")).to_have_css("font-family", ui_tokens()["bodyFontFamily"]["family"])
    await expect(browser.page.locator("h1")).to_have_css("font-size", ui_tokens()["h1"]["fontSize"])


async def run_payment(browser: Browser, card_number: str, amount: int, expected_status: str) -> None:
    """Submit the payment form against a canned gateway response."""
    declined = card_number == DECLINED_CARD
    logger.info("Payment scenario: card ending %s, amount %d, expecting %s", card_number[-4:], amount, expected_status)
    await serve_fixture(browser.page, "/payment", fixture_pages.payment_page())
    await serve_json(
        browser.page,
        "/api/payments/process",
        {"status": "declined" if declined else "succeeded"},
        status=400 if declined else 200,
    )

    payment = PaymentPage(browser.page)
    await payment.navigate()
    await payment.process_payment(PaymentDetails(card_number=card_number, amount=amount))
    await expect(browser.page.get_by_text(re.compile(expected_status, re.IGNORECASE))).to_be_visible()


async def payment_succeeds(browser: Browser) -> None:
    await run_payment(browser, SUCCESS_CARD, 1000, "succeeded")


async def payment_declined(browser: Browser) -> None:
    await run_payment(browser, DECLINED_CARD, 2000, "declined")


async def docs_list_users(browser: Browser) -> None:
    await serve_fixture(browser.page, "/api-docs", fixture_pages.docs_page())
    await browser.navigate("/api-docs")
    await expect(browser.page.get_by_text("GET /api/users")).to_be_visible()


async def docs_create_user(browser: Browser) -> None:
    await serve_fixture(browser.page, "/api-docs", fixture_pages.docs_page())
    await browser.navigate("/api-docs")
    await expect(browser.page.get_by_text("POST /api/users")).to_be_visible()


# ---- mobile ----------------------------------------------------------------------
async def push_notifications(browser: Browser) -> None:
    await serve_fixture(browser.page, "/", fixture_pages.push_page())
    await browser.add_init_script(GRANT_NOTIFICATIONS_JS)
    await browser.navigate("/")
    await browser.click("button#enablePush")
    await expect(browser.page.get_by_text(re.compile("notifications enabled", re.IGNORECASE))).to_be_visible()


async def offline_indicator(browser: Browser) -> None:
    await serve_fixture(browser.page, "/", fixture_pages.offline_page())
    await browser.navigate("/")
    await expect(browser.page.get_by_text(re.compile("online", re.IGNORECASE))).to_be_visible()
    await browser.set_offline(True)
    try:
        await expect(browser.page.get_by_text(re.compile("offline", re.IGNORECASE))).to_be_visible()
    finally:
        await browser.set_offline(False)


async def offline_sync(browser: Browser) -> None:
    await serve_fixture(browser.page, "/", fixture_pages.offline_page())
    await browser.navigate("/")
    await browser.set_offline(True)
    try:
        await expect(browser.page.get_by_text(re.compile("offline", re.IGNORECASE))).to_be_visible()
    finally:
        await browser.set_offline(False)
    await expect(browser.page.get_by_text(re.compile("online", re.IGNORECASE))).to_be_visible()


async def app_icons(browser: Browser) -> None:
    await serve_fixture(browser.page, "/", fixture_pages.icons_page())
    await browser.navigate("/")
    await expect(browser.page.locator('link[rel="icon"][sizes="32x32"]')).to_have_count(1)
    await expect(browser.page.locator('link[rel="apple-touch-icon"][sizes="180x180"]')).to_have_count(1)


async def app_icon_sizes(browser: Browser) -> None:
    await serve_fixture(browser.page, "/", fixture_pages.icons_page())
    await browser.navigate("/")
    for size in ("16x16", "32x32", "180x180"):
        rel = "apple-touch-icon" if size == "180x180" else "icon"
        await expect(browser.page.locator(f'link[rel="{rel}"][sizes="{size}"]')).to_have_count(1)


# ---- marketing -------------------------------------------------------------------
async def calendar_weeks(browser: Browser) -> None:
    await serve_fixture(browser.page, "/calendar", fixture_pages.calendar_page())
    await browser.navigate("/calendar")
    await expect(browser.page.locator("table#calendar tbody tr")).to_have_count(4)


async def calendar_next_month(browser: Browser) -> None:
    await serve_fixture(browser.page, "/calendar", fixture_pages.calendar_page())
    await browser.navigate("/calendar")
    await expect(browser.page.get_by_text(re.compile("next month plan", re.IGNORECASE))).to_be_visible()


async def email_call_to_action(browser: Browser) -> None:
    await serve_fixture(browser.page, "/email-preview", fixture_pages.email_page())
    await browser.navigate("/email-preview")
    await expect(browser.page.get_by_text(re.compile("CTA", re.IGNORECASE))).to_be_visible()


async def email_q2_campaign(browser: Browser) -> None:
    await serve_fixture(browser.page, "/email-preview", fixture_pages.email_page())
    await browser.navigate("/email-preview")
    await expect(browser.page.get_by_text(re.compile("Q2", re.IGNORECASE))).to_be_visible()


async def landing_copy_reviewed(browser: Browser) -> None:
    await serve_fixture(browser.page, "/landing", fixture_pages.landing_page())
    await browser.navigate("/landing")
    await expect(browser.page.get_by_text(re.compile("no lorem ipsum", re.IGNORECASE))).to_be_visible()


async def landing_copy_approved(browser: Browser) -> None:
    await serve_fixture(browser.page, "/landing", fixture_pages.landing_page())
    await browser.navigate("/landing")
    await expect(browser.page.get_by_text(re.compile("approved", re.IGNORECASE))).to_be_visible()


# Keyed by card title, plus card descriptions that name a scenario of their own.
SCENARIOS: Mapping[str, Scenario] = MappingProxyType(
    {
        "Implement user authentication": user_authentication,
        "Add login and signup functionality": signup_then_login,
        "Fix navigation bug": mobile_menu_close_button,
        "Menu does not close on mobile": mobile_menu_click_outside,
        "Design system updates": design_system_colors,
        "Update color palette and typography": design_system_typography,
        "API integration": payment_succeeds,
        "Connect to payment gateway": payment_declined,
        "Update documentation": docs_list_users,
        "Add API endpoints documentation": docs_create_user,
        "Push notification system": push_notifications,
        "Implement push notifications for iOS and Android": push_notifications,
        "Offline mode": offline_indicator,
        "Enable offline data synchronization": offline_sync,
        "App icon design": app_icons,
        "Create app icons for all required sizes": app_icon_sizes,
        "Social media calendar": calendar_weeks,
        "Plan content for next month": calendar_next_month,
        "Email campaign": email_call_to_action,
        "Design and implement Q2 email campaign": email_q2_campaign,
        "Landing page copy": landing_copy_reviewed,
        "Review and approve landing page content": landing_copy_approved,
    }
)
