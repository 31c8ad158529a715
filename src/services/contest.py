"""Service for handling contest-related operations."""

from loguru import logger

from domain.models.contest import Contest
from infrastructure.errors import ContestUnavailableError
from infrastructure.parsers import (
    ContestPageParser,
    HTTPClientProtocol,
    SessionCheckProtocol,
    URLBuilder,
)

from .session import fetch_with_session_context


class ContestService:
    """Service for reading AtCoder contest metadata."""

    def __init__(
        self,
        *,
        http_client: HTTPClientProtocol,
        session: SessionCheckProtocol,
        page_parser: ContestPageParser | None = None,
    ):
        """Initialize service with dependencies."""
        self.http_client = http_client
        self.session = session
        self.page_parser = page_parser or ContestPageParser()

    async def contest_info(self, contest_id: str) -> Contest:
        """
        Get the problems of a contest from its task list.

        Raises:
            LoginRequiredError: If the page is hidden and nobody is logged in
            ContestUnavailableError: If the page is hidden from the current user
            ParsingError: If the task table is malformed
        """
        logger.debug(f"Getting contest info: {contest_id}")

        html = await fetch_with_session_context(
            self.http_client,
            self.session,
            URLBuilder.contest_tasks(contest_id),
            lambda: ContestUnavailableError(contest_id),
        )
        contest = self.page_parser.parse_tasks(html, contest_id)

        logger.info(f"Fetched contest {contest_id} with {len(contest.problems)} problem(s)")
        return contest

    async def problem_ids_from_score_table(self, contest_id: str) -> list[str] | None:
        """
        Get problem ids from the score table on the contest top page.

        Useful before the contest starts, when the task list is not visible yet.
        Returns None when there is no single recognisable score table.
        """
        logger.debug(f"Getting score table: {contest_id}")

        html = await self.http_client.get_text(URLBuilder.contest(contest_id))
        problem_ids = self.page_parser.parse_score_table(html)

        if problem_ids is None:
            logger.info(f"No usable score table for contest {contest_id}")
        return problem_ids
