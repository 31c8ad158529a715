"""Service for handling problem-related operations."""

from loguru import logger

from domain.models.test_case import TestCase
from infrastructure.parsers import HTTPClientProtocol, ProblemPageParser, URLBuilder


class ProblemService:
    """Service for reading problem pages."""

    def __init__(
        self,
        *,
        http_client: HTTPClientProtocol,
        page_parser: ProblemPageParser | None = None,
    ):
        """Initialize service with dependencies."""
        self.http_client = http_client
        self.page_parser = page_parser or ProblemPageParser()

    async def test_cases(self, problem_url: str) -> list[TestCase]:
        """
        Get sample test cases of a problem.

        Args:
            problem_url: Problem page URL, absolute or relative to the site
        """
        url = URLBuilder.resolve(problem_url)
        logger.debug(f"Getting test cases: {url}")

        html = await self.http_client.get_text(url)
        test_cases = self.page_parser.parse_test_cases(html)

        logger.info(f"Found {len(test_cases)} sample(s) at {url}")
        return test_cases
