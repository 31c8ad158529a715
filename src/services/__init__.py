from infrastructure.config import Settings
from services.client import AtCoderClient
from services.contest import ContestService
from services.problem import ProblemService
from services.session import SessionService, fetch_with_session_context
from services.submission import SubmissionService


def create_atcoder_client(settings: Settings | None = None) -> AtCoderClient:
    """Factory function to create an AtCoder client with all dependencies."""
    from infrastructure.http_client import AsyncHTTPClient

    settings = settings or Settings.from_env()
    http_client = AsyncHTTPClient(
        session_file=settings.session_file,
        timeout=settings.http_timeout,
        impersonate=settings.impersonate,
    )
    return AtCoderClient(http_client, language=settings.submit_language)


__all__ = [
    "AtCoderClient",
    "ContestService",
    "ProblemService",
    "SessionService",
    "SubmissionService",
    "create_atcoder_client",
    "fetch_with_session_context",
]
