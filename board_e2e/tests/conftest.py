import sys
import threading
from pathlib import Path

import pytest
import pytest_asyncio
from playwright.async_api import Error as PlaywrightError

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from board_e2e.browser import Browser
from board_e2e.cards import load_cards, load_test_data
from board_e2e.config import settings
from board_e2e.dispatcher import ScenarioDispatcher
from board_e2e.playwright_client import PlaywrightClient


@pytest_asyncio.fixture()
async def playwright_client():
    """Create a Playwright client whose relative URLs resolve to the fixture origin."""
    client = PlaywrightClient(
        browser_type=settings.browser_type,
        headless=settings.playwright_headless,
        timeout=settings.timeout_ms,
        base_url=settings.fixture_origin,
    )
    try:
        await client.connect()
    except PlaywrightError as exc:
        pytest.skip(f"Playwright browser not available - install with: board-e2e install ({exc})")
    yield client
    await client.close()


@pytest_asyncio.fixture()
async def browser(playwright_client):
    """Create a Browser instance with the Playwright page."""
    browser = Browser(playwright_client.page, playwright_client.context)
    await browser.reset()
    return browser


@pytest.fixture(scope="session")
def dispatcher():
    return ScenarioDispatcher()


@pytest.fixture(scope="session")
def strict_mode():
    """TAG_IS_STRICT for this run, handed to every dispatch."""
    return settings.tag_checks_strict


@pytest.fixture(scope="session")
def test_data():
    return load_test_data()


@pytest.fixture(scope="session")
def cards():
    return load_cards()


# ============================================================================
# Mock board application fixtures
# ============================================================================

@pytest.fixture(scope="function")
def board_app_server():
    """Fixture that provides a running mock board application."""
    from werkzeug.serving import make_server
    from board_e2e.mock_board_app import create_app, reset_mock_state

    class MockServer:
        def __init__(self, host="127.0.0.1", port=0):
            self.host = host
            self.app = create_app()
            self.server = make_server(host, port, self.app, threaded=True)
            self.port = self.server.server_port
            self.thread = None

        def start(self):
            self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
            self.thread.start()

        def stop(self):
            self.server.shutdown()
            if self.thread:
                self.thread.join(timeout=5)

        @property
        def url(self):
            return f"http://{self.host}:{self.port}"

    reset_mock_state()
    server = MockServer()
    server.start()

    yield server

    server.stop()
    reset_mock_state()


@pytest_asyncio.fixture()
async def board_browser(playwright_client, board_app_server):
    """Browser on a fresh context whose relative URLs resolve to the mock board app."""
    context = await playwright_client.new_context(base_url=board_app_server.url)
    page = await context.new_page()
    yield Browser(page, context)
    await context.close()
