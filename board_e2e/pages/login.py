"""Login and signup forms."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from playwright.async_api import Page

from board_e2e.pages.base import BasePage


@dataclass
class SignupDetails:
    first_name: str
    last_name: str
    email: str
    password: str
    confirm_password: str

    @classmethod
    def from_dict(cls, raw: Dict[str, str]) -> "SignupDetails":
        return cls(
            first_name=raw["firstName"],
            last_name=raw["lastName"],
            email=raw["email"],
            password=raw["password"],
            confirm_password=raw["confirmPassword"],
        )


class LoginPage(BasePage):
    path = "/login"

    EMAIL_INPUT = '[data-testid="email-input"], input[type="email"], #email'
    PASSWORD_INPUT = '[data-testid="password-input"], input[type="password"], #password'
    LOGIN_BUTTON = '[data-testid="login-button"], button[type="submit"], .login-btn'
    ERROR_MESSAGE = '[data-testid="error-message"], .error-message, .alert-error'
    SUCCESS_MESSAGE = '[data-testid="success-message"], .success-message, .alert-success'
    LOGGED_IN_MARKERS = (
        '[data-testid="dashboard"]',
        ".dashboard",
        '[data-testid="user-menu"]',
        ".user-menu",
        '[data-testid="logout"]',
        ".logout",
    )

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.email_input = self.first(self.EMAIL_INPUT)
        self.password_input = self.first(self.PASSWORD_INPUT)
        self.submit_button = self.first(self.LOGIN_BUTTON)
        self.error_message = self.first(self.ERROR_MESSAGE)
        self.success_message = self.first(self.SUCCESS_MESSAGE)

    async def login(self, email: str, password: str) -> None:
        await self.email_input.fill(email)
        await self.password_input.fill(password)
        await self.submit_button.click()

    async def submit_empty_form(self) -> None:
        await self.submit_button.click()

    async def validation_errors(self) -> Dict[str, Optional[str]]:
        return {
            "email": await self.email_input.get_attribute("aria-invalid"),
            "password": await self.password_input.get_attribute("aria-invalid"),
        }

    async def is_logged_in(self) -> bool:
        for selector in self.LOGGED_IN_MARKERS:
            if await self.is_element_visible(selector):
                return True
        return False


class SignupPage(BasePage):
    path = "/signup"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.first_name_input = self.first('input[name="firstName"]')
        self.last_name_input = self.first('input[name="lastName"]')
        self.email_input = self.first('input[type="email"]')
        self.password_input = self.first('input[name="password"]')
        self.confirm_password_input = self.first('input[name="confirmPassword"]')
        self.submit_button = self.first('button[type="submit"]')
        self.error_message = self.first(".error-message")
        self.success_message = self.first(".success-message")

    async def signup(self, details: SignupDetails) -> None:
        await self.first_name_input.fill(details.first_name)
        await self.last_name_input.fill(details.last_name)
        await self.email_input.fill(details.email)
        await self.password_input.fill(details.password)
        await self.confirm_password_input.fill(details.confirm_password)
        await self.submit_button.click()
