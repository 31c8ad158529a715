"""Facade bundling all AtCoder services over one HTTP session."""

from domain.models import Contest, SubmissionResult, TestCase
from infrastructure.parsers import HTTPClientProtocol

from .contest import ContestService
from .problem import ProblemService
from .session import SessionService
from .submission import SubmissionService


class AtCoderClient:
    """
    One authenticated AtCoder session.

    Operations run one at a time; do not share an instance between
    concurrent tasks.
    """

    def __init__(self, http_client: HTTPClientProtocol, *, language: str = "rust"):
        self.http_client = http_client
        self.session = SessionService(http_client=http_client)
        self.contests = ContestService(http_client=http_client, session=self.session)
        self.problems = ProblemService(http_client=http_client)
        self.submissions = SubmissionService(
            http_client=http_client, session=self.session, language=language
        )

    async def __aenter__(self) -> "AtCoderClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        close = getattr(self.http_client, "close", None)
        if close is not None:
            await close()

    async def username(self) -> str | None:
        return await self.session.current_username()

    async def login(self, username: str, password: str) -> None:
        await self.session.login(username, password)

    async def contest_info(self, contest_id: str) -> Contest:
        return await self.contests.contest_info(contest_id)

    async def problem_ids_from_score_table(self, contest_id: str) -> list[str] | None:
        return await self.contests.problem_ids_from_score_table(contest_id)

    async def test_cases(self, problem_url: str) -> list[TestCase]:
        return await self.problems.test_cases(problem_url)

    async def submit(self, contest_id: str, problem_id: str, source_code: str) -> SubmissionResult:
        return await self.submissions.submit(contest_id, problem_id, source_code)
