"""Service for submitting solutions."""

from loguru import logger

from domain.models.submission import SubmissionResult
from infrastructure.parsers import HTTPClientProtocol, SubmitPageParser, URLBuilder
from infrastructure.parsers.selectors import (
    CSRF_TOKEN_FIELD,
    SUBMIT_FORM_LANGUAGE,
    SUBMIT_FORM_SOURCE,
    SUBMIT_FORM_TASK,
)

from .session import SessionService


class SubmissionService:
    """Submits source code to a contest task."""

    def __init__(
        self,
        *,
        http_client: HTTPClientProtocol,
        session: SessionService,
        page_parser: SubmitPageParser | None = None,
        language: str = "rust",
    ):
        """
        Initialize service with dependencies.

        Args:
            http_client: HTTP client sharing the session cookies
            session: Session service used to check the login
            page_parser: Submit page parser
            language: Language name prefix to submit with
        """
        self.http_client = http_client
        self.session = session
        self.page_parser = page_parser or SubmitPageParser()
        self.language = language

    async def submit(self, contest_id: str, problem_id: str, source_code: str) -> SubmissionResult:
        """
        Submit ``source_code`` to ``problem_id`` of ``contest_id``.

        Only sends the form; judging results are not awaited.

        Raises:
            LoginRequiredError: If nobody is logged in
            ProblemNotFoundError: If the contest has no such problem
            LanguageUnavailableError: If the language is not offered
            ParsingError: If the submit form is malformed
        """
        await self.session.require_login()

        url = URLBuilder.contest_submit(contest_id)
        html = await self.http_client.get_text(url)
        target = self.page_parser.parse_target(html, problem_id, self.language)

        await self.http_client.post_form(
            url,
            {
                SUBMIT_FORM_TASK: target.task_screen_name,
                SUBMIT_FORM_LANGUAGE: target.language_id,
                SUBMIT_FORM_SOURCE: source_code,
                CSRF_TOKEN_FIELD: target.csrf_token,
            },
        )

        logger.info(
            f"Submitted to problem `{target.task_screen_name}`, "
            f"using language `{target.language_name}`"
        )
        return SubmissionResult(
            contest_id=contest_id,
            task_screen_name=target.task_screen_name,
            language_name=target.language_name,
        )
