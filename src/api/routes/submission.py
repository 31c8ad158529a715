"""API routes for submissions."""

from litestar import Controller, post
from litestar.status_codes import HTTP_201_CREATED
from loguru import logger

from api.dependencies import ClientDependency
from api.schemas.submission import SubmissionRequest, SubmissionResponse


class SubmissionController(Controller):
    """Controller for submitting solutions."""

    path = "/contests/{contest_id:str}/submissions"

    @post("/", status_code=HTTP_201_CREATED)
    async def submit(
        self, contest_id: str, data: SubmissionRequest, client: ClientDependency
    ) -> SubmissionResponse:
        """
        Submit source code to a problem.

        The response only confirms the submission was accepted; judging is
        not awaited.
        """
        logger.debug(f"API request for submission: {contest_id}/{data.problem_id}")

        result = await client.submit(contest_id, data.problem_id, data.source_code)
        return SubmissionResponse.model_validate(result)
