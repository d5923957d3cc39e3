"""Page objects for the board application and its fixtures."""
from board_e2e.pages.base import BasePage
from board_e2e.pages.dashboard import BoardPage, DashboardPage
from board_e2e.pages.docs import ApiDocsPage
from board_e2e.pages.landing import LandingPage
from board_e2e.pages.login import LoginPage, SignupDetails, SignupPage
from board_e2e.pages.mobile_nav import MobileNavigation
from board_e2e.pages.payment import PaymentDetails, PaymentPage

__all__ = [
    "ApiDocsPage",
    "BasePage",
    "BoardPage",
    "DashboardPage",
    "LandingPage",
    "LoginPage",
    "MobileNavigation",
    "PaymentDetails",
    "PaymentPage",
    "SignupDetails",
    "SignupPage",
]
