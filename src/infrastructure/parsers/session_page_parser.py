"""Parser for the home and login pages."""

from enum import Enum

from loguru import logger

from .document import parse_html, trailing_text
from .selectors import (
    LOGIN_ERROR_BANNER,
    LOGIN_SUCCESS_BANNER,
    USER_PROFILE_LINK,
    USER_PROFILE_PREFIX,
)


class LoginOutcome(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    UNKNOWN = "unknown"


class SessionPageParser:
    """Reads authentication state out of AtCoder pages."""

    @staticmethod
    def parse_username(html: str) -> str | None:
        """
        Extract the logged-in username from the home page.

        Returns:
            Username, or None when no profile link is shown
        """
        link = parse_html(html).select_one(USER_PROFILE_LINK)
        if link is None:
            return None

        href = link.get("href")
        if not isinstance(href, str) or not href.startswith(USER_PROFILE_PREFIX):
            return None
        return href[len(USER_PROFILE_PREFIX):]

    @staticmethod
    def parse_login_result(html: str) -> tuple[LoginOutcome, str]:
        """
        Classify the page returned after posting the login form.

        Both banners share the ``alert`` class, so the error banner is
        checked first.

        Returns:
            Outcome and the banner message (empty for success)
        """
        soup = parse_html(html)

        error = soup.select_one(LOGIN_ERROR_BANNER)
        if error is not None:
            message = trailing_text(error)
            logger.debug(f"Login error banner: {message}")
            return LoginOutcome.FAILURE, message

        if soup.select_one(LOGIN_SUCCESS_BANNER) is not None:
            return LoginOutcome.SUCCESS, ""

        return LoginOutcome.UNKNOWN, "Unknown error"
