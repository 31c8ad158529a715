"""API routes for contest metadata and samples."""

from litestar import Controller, get
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.dependencies import ClientDependency
from api.schemas.contest import (
    ContestResponse,
    ProblemResponse,
    ScoreTableResponse,
    TestCaseResponse,
    TestCasesResponse,
)
from infrastructure.errors import ProblemNotFoundError


class ContestController(Controller):
    """Controller for contest-related endpoints."""

    path = "/contests"

    @get("/{contest_id:str}", status_code=HTTP_200_OK)
    async def get_contest(self, contest_id: str, client: ClientDependency) -> ContestResponse:
        """
        Get the problems of a contest.

        Path parameters:
        - contest_id: AtCoder contest ID (e.g., "abc300")
        """
        logger.debug(f"API request for contest: contest_id={contest_id}")

        contest = await client.contest_info(contest_id)
        return ContestResponse(
            contest_id=contest.contest_id,
            problems=[ProblemResponse.model_validate(p) for p in contest.problems],
        )

    @get("/{contest_id:str}/score-table", status_code=HTTP_200_OK)
    async def get_score_table(
        self, contest_id: str, client: ClientDependency
    ) -> ScoreTableResponse:
        """Get problem ids from the contest's score table."""
        logger.debug(f"API request for score table: contest_id={contest_id}")

        problem_ids = await client.problem_ids_from_score_table(contest_id)
        return ScoreTableResponse(contest_id=contest_id, problem_ids=problem_ids)

    @get("/{contest_id:str}/problems/{problem_id:str}/test-cases", status_code=HTTP_200_OK)
    async def get_test_cases(
        self, contest_id: str, problem_id: str, client: ClientDependency
    ) -> TestCasesResponse:
        """
        Get sample test cases of a problem.

        Path parameters:
        - contest_id: AtCoder contest ID
        - problem_id: Problem id as shown in the task list (case-insensitive)
        """
        logger.debug(f"API request for test cases: {contest_id}/{problem_id}")

        contest = await client.contest_info(contest_id)
        problem = contest.problem(problem_id)
        if problem is None:
            raise ProblemNotFoundError(problem_id)

        test_cases = await client.test_cases(problem.url)
        return TestCasesResponse(
            contest_id=contest_id,
            problem_id=problem.id,
            test_cases=[TestCaseResponse.model_validate(t) for t in test_cases],
        )
