"""Service for session state and authentication."""

from collections.abc import Callable

from loguru import logger

from infrastructure.errors import HTTPStatusError, LoginFailedError, LoginRequiredError
from infrastructure.parsers import (
    HTTPClientProtocol,
    LoginOutcome,
    SessionPageParser,
    SessionCheckProtocol,
    URLBuilder,
)
from infrastructure.parsers.document import extract_csrf_token, parse_html
from infrastructure.parsers.selectors import (
    CSRF_TOKEN_FIELD,
    LOGIN_FORM_PASSWORD,
    LOGIN_FORM_USERNAME,
)

NOT_FOUND = 404


class SessionService:
    """Answers "who is logged in" and performs logins."""

    def __init__(
        self,
        *,
        http_client: HTTPClientProtocol,
        page_parser: SessionPageParser | None = None,
    ):
        """Initialize service with dependencies."""
        self.http_client = http_client
        self.page_parser = page_parser or SessionPageParser()

    async def current_username(self) -> str | None:
        """Return the logged-in username, or None if the session is anonymous."""
        html = await self.http_client.get_text(URLBuilder.home())
        username = self.page_parser.parse_username(html)
        logger.debug(f"Current user: {username or '<anonymous>'}")
        return username

    async def require_login(self) -> str:
        """
        Return the logged-in username.

        Raises:
            LoginRequiredError: If the session is anonymous
        """
        username = await self.current_username()
        if username is None:
            raise LoginRequiredError()
        return username

    async def login(self, username: str, password: str) -> None:
        """
        Log in with the given credentials.

        Raises:
            ParsingError: If the login form has no csrf token
            LoginFailedError: If the site rejects the login
        """
        logger.info(f"Logging in as {username}")

        login_page = await self.http_client.get_text(URLBuilder.login())
        csrf_token = extract_csrf_token(parse_html(login_page))

        response = await self.http_client.post_form(
            URLBuilder.login(),
            {
                LOGIN_FORM_USERNAME: username,
                LOGIN_FORM_PASSWORD: password,
                CSRF_TOKEN_FIELD: csrf_token,
            },
        )

        outcome, message = self.page_parser.parse_login_result(response)
        if outcome is not LoginOutcome.SUCCESS:
            logger.warning(f"Login failed for {username}: {message}")
            raise LoginFailedError(message)

        logger.info(f"Logged in as {username}")


async def fetch_with_session_context(
    http_client: HTTPClientProtocol,
    session: SessionCheckProtocol,
    url: str,
    on_logged_in: Callable[[], Exception],
) -> str:
    """
    GET ``url``, explaining a 404 by the session state.

    AtCoder answers 404 both for missing pages and for pages the user may not
    see. On a 404 the session is checked: an anonymous session turns the error
    into ``LoginRequiredError``, otherwise ``on_logged_in()`` is raised. Other
    errors propagate unchanged.
    """
    try:
        return await http_client.get_text(url)
    except HTTPStatusError as e:
        if e.status_code != NOT_FOUND:
            raise

        logger.debug(f"404 for {url}, checking session state")
        username = await session.current_username()
        if username is None:
            raise LoginRequiredError() from e
        raise on_logged_in() from e
