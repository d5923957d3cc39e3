"""Shared configuration for the board browser suite.

Values come from environment variables, with defaults read from the
workspace `.env` file (see `board_e2e.env_defaults`).

Credentials are never defaulted: scenarios that need them call
`settings.require_login_credentials()`, which fails fast with the names of
the missing variables.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin

from board_e2e.env_defaults import getenv

TRUTHY = {"1", "true", "yes", "on"}
SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")
DEFAULT_DATA_FILE = Path(__file__).resolve().parent / "data" / "test_data.json"


class ConfigurationError(RuntimeError):
    """Raised when a required environment variable is missing or invalid."""


def env_flag(value: Optional[str]) -> bool:
    """Interpret a boolean-like environment value; absent or unknown is False."""
    if value is None:
        return False
    return value.strip().lower() in TRUTHY


@dataclass(frozen=True)
class LoginCredentials:
    """Credentials used by the login scenario."""

    email: str
    password: str


class BoardTestConfig:
    """Configuration resolved from the environment at construction time.

    Build a fresh instance (or call `reload()`) after changing the
    environment; the module level `settings` reflects the process start.
    """

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        self.playwright_headless: bool = (getenv("PLAYWRIGHT_HEADLESS", "true") or "true").lower() in {"true", "1"}

        browser_type = (getenv("PLAYWRIGHT_BROWSER", "chromium") or "chromium").lower()
        if browser_type not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"PLAYWRIGHT_BROWSER={browser_type!r} is not supported; "
                f"use one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        self.browser_type: str = browser_type

        timeout_raw = getenv("PLAYWRIGHT_TIMEOUT_MS", "10000")
        try:
            self.timeout_ms: int = int(timeout_raw)
        except (TypeError, ValueError):
            raise ConfigurationError(f"PLAYWRIGHT_TIMEOUT_MS must be an integer, got {timeout_raw!r}")

        self.fixture_origin: str = (getenv("BOARD_FIXTURE_ORIGIN", "http://localhost:3000") or "").rstrip("/")

        # Read once per run and handed to the dispatcher explicitly.
        self.tag_checks_strict: bool = env_flag(getenv("TAG_IS_STRICT"))

        data_file = getenv("BOARD_DATA_FILE")
        self.data_file: Path = Path(data_file) if data_file else DEFAULT_DATA_FILE
        if data_file and not self.data_file.exists():
            print(f"[CONFIG] Warning: BOARD_DATA_FILE={data_file} not found, card loading will fail")

        self.report_dir: Path = Path(getenv("BOARD_REPORT_DIR", "reports") or "reports")

    # ---- helpers -----------------------------------------------------------------
    def url(self, path: str) -> str:
        """Return an absolute fixture URL for the provided path."""
        return urljoin(self.fixture_origin + "/", path.lstrip("/"))

    def require_login_credentials(self) -> LoginCredentials:
        """Return login credentials or fail naming the missing variables."""
        email = getenv("BOARD_LOGIN_EMAIL")
        password = getenv("BOARD_LOGIN_PASSWORD")
        missing = [
            name
            for name, value in (("BOARD_LOGIN_EMAIL", email), ("BOARD_LOGIN_PASSWORD", password))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"{' and '.join(missing)} environment variable(s) required for the login scenario.\n"
                f"Export them or add them to the workspace .env file."
            )
        return LoginCredentials(email=email, password=password)


# Singleton instance - initialized on first import
settings = BoardTestConfig()
