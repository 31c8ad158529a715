"""Litestar application exposing the AtCoder client over HTTP."""

from collections.abc import Callable

from litestar import Litestar, Request, Response
from litestar.di import Provide
from litestar.status_codes import (
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_422_UNPROCESSABLE_ENTITY,
    HTTP_502_BAD_GATEWAY,
)
from loguru import logger

from api.dependencies import ClientProvider, make_client_provider
from api.routes import ContestController, SessionController, SubmissionController
from infrastructure.config import Settings
from infrastructure.errors import (
    ContestUnavailableError,
    HTTPStatusError,
    LanguageUnavailableError,
    LoginFailedError,
    LoginRequiredError,
    ParsingError,
    ProblemNotFoundError,
    TransportError,
)
from infrastructure.log_config import configure_logging

ERROR_STATUS = {
    LoginRequiredError: HTTP_401_UNAUTHORIZED,
    LoginFailedError: HTTP_401_UNAUTHORIZED,
    ContestUnavailableError: HTTP_404_NOT_FOUND,
    ProblemNotFoundError: HTTP_404_NOT_FOUND,
    LanguageUnavailableError: HTTP_422_UNPROCESSABLE_ENTITY,
    ParsingError: HTTP_502_BAD_GATEWAY,
    HTTPStatusError: HTTP_502_BAD_GATEWAY,
    TransportError: HTTP_502_BAD_GATEWAY,
}


def _error_handler(status_code: int) -> Callable[[Request, Exception], Response]:
    def handler(request: Request, exc: Exception) -> Response:
        logger.warning(f"{request.method} {request.url.path} failed: {exc}")
        return Response(content={"detail": str(exc)}, status_code=status_code)

    return handler


def create_app(
    client_provider: ClientProvider | None = None, settings: Settings | None = None
) -> Litestar:
    """
    Build the application.

    Args:
        client_provider: Dependency yielding an AtCoderClient per request
        settings: Settings for the default provider, read from the environment if omitted
    """
    if client_provider is None:
        client_provider = make_client_provider(settings or Settings.from_env())

    return Litestar(
        route_handlers=[ContestController, SessionController, SubmissionController],
        dependencies={"client": Provide(client_provider)},
        exception_handlers={exc: _error_handler(code) for exc, code in ERROR_STATUS.items()},
    )


def create_app_from_env() -> Litestar:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    return create_app(settings=settings)
