"""API routes for session state."""

from litestar import Controller, get, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.dependencies import ClientDependency
from api.schemas.session import LoginRequest, SessionResponse


class SessionController(Controller):
    """Controller for login and session inspection."""

    path = "/session"

    @get("/", status_code=HTTP_200_OK)
    async def get_session(self, client: ClientDependency) -> SessionResponse:
        """Report who is logged in."""
        username = await client.username()
        return SessionResponse(logged_in=username is not None, username=username)

    @post("/", status_code=HTTP_200_OK)
    async def login(self, data: LoginRequest, client: ClientDependency) -> SessionResponse:
        """Log in and persist the session cookies."""
        logger.debug(f"API request for login: username={data.username}")

        await client.login(data.username, data.password)
        return SessionResponse(logged_in=True, username=data.username)
