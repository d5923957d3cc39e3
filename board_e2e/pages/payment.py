"""Card payment form."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from playwright.async_api import Page

from board_e2e.pages.base import BasePage


@dataclass
class PaymentDetails:
    card_number: str
    amount: int
    expiry_date: str = "12/25"
    cvv: str = "123"


class PaymentPage(BasePage):
    path = "/payment"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.card_number_input = self.first('input[name="cardNumber"]')
        self.expiry_date_input = self.first('input[name="expiryDate"]')
        self.cvv_input = self.first('input[name="cvv"]')
        self.amount_input = self.first('input[name="amount"]')
        self.submit_button = self.first('button[type="submit"]')
        self.error_message = self.first(".error-message")
        self.success_message = self.first(".success-message")

    async def process_payment(self, details: PaymentDetails) -> None:
        await self.card_number_input.fill(details.card_number)
        await self.expiry_date_input.fill(details.expiry_date)
        await self.cvv_input.fill(details.cvv)
        await self.amount_input.fill(str(details.amount))
        await self.submit_button.click()

    async def submit_empty_form(self) -> None:
        await self.submit_button.click()

    async def validation_errors(self) -> Dict[str, Optional[str]]:
        return {
            "cardNumber": await self.card_number_input.get_attribute("aria-invalid"),
            "expiryDate": await self.expiry_date_input.get_attribute("aria-invalid"),
            "cvv": await self.cvv_input.get_attribute("aria-invalid"),
        }
