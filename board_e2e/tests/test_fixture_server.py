"""Route-intercepted fixtures in a real browser.

Run with: pytest board_e2e/tests/test_fixture_server.py -v
"""
import pytest

from board_e2e.browser import browser_session
from board_e2e.config import settings
from board_e2e.fixtures import route_pattern, serve_fixture, serve_json


def test_route_pattern():
    assert route_pattern("/login") == "**/login"
    assert route_pattern("api/users") == "**/api/users"


@pytest.mark.asyncio
class TestServeFixture:

    async def test_fixture_served_at_path(self, browser):
        pattern = await serve_fixture(browser.page, "/login", "<h1>Login fixture</h1>")
        result = await browser.navigate("/login")

        assert pattern == "**/login"
        assert result["status"] == 200
        assert await browser.text("h1") == "Login fixture"

    async def test_reregistering_replaces_previous_fixture(self, browser):
        await serve_fixture(browser.page, "/landing", "<p>first</p>")
        await serve_fixture(browser.page, "/landing", "<p>second</p>")
        await browser.navigate("/landing")

        assert await browser.text("p") == "second"

    async def test_registering_same_fixture_twice_is_idempotent(self, browser):
        body = "<h1>Payment gateway</h1>"
        await serve_fixture(browser.page, "/payment", body)
        await serve_fixture(browser.page, "/payment", body)

        responses = []
        for _ in range(2):
            result = await browser.navigate("/payment")
            responses.append((result["status"], await browser.page.content()))

        assert responses[0] == responses[1]
        assert responses[0][0] == 200
        assert await browser.text("h1") == "Payment gateway"

    async def test_json_fixture_with_status(self, browser):
        await serve_fixture(browser.page, "/", "<p>home</p>")
        await serve_json(browser.page, "/api/payments/process", {"status": "declined"}, status=400)
        await browser.navigate("/")

        response = await browser.evaluate(
            "() => fetch('/api/payments/process', {method: 'POST'}).then(r => r.json().then(body => [r.status, body]))"
        )
        assert response == [400, {"status": "declined"}]

    async def test_context_level_fixture(self, browser):
        await serve_fixture(browser.context, "/calendar", "<h1>Calendar</h1>")
        await browser.navigate("/calendar")

        assert await browser.text("h1") == "Calendar"

    async def test_reload_picks_up_replaced_fixture(self, browser):
        await serve_fixture(browser.page, "/landing", "<p>Draft</p>")
        await browser.navigate("/landing")
        await serve_fixture(browser.page, "/landing", "<p>Approved</p>")
        await browser.reload()

        assert await browser.wait_for_text("p", "Approved") == "Approved"

    async def test_intercept_route_with_custom_handler(self, browser):
        seen = []

        async def handler(route):
            seen.append(route.request.method)
            await route.fulfill(status=201, content_type="text/html", body="<p>created</p>")

        await browser.intercept_route("**/signup", handler)
        result = await browser.navigate("/signup")

        assert seen == ["GET"]
        assert result["status"] == 201
        assert browser.current_url == settings.url("/signup")


@pytest.mark.asyncio
async def test_browser_session_uses_fixture_origin(playwright_client):
    async with browser_session() as session:
        await serve_fixture(session.context, "/email-preview", "<h1>Q2 Campaign</h1>")
        result = await session.navigate("/email-preview")

        assert result["url"] == settings.url("/email-preview")
        assert await session.text("h1") == "Q2 Campaign"
