"""Parser for the contest submission form."""

from bs4 import BeautifulSoup
from loguru import logger

from domain.models.submission import SubmissionTarget
from infrastructure.errors import LanguageUnavailableError, ProblemNotFoundError

from .document import extract_csrf_token, first_token, parse_html, require_attr
from .selectors import LANGUAGE_SELECT_OPTIONS, TASK_SELECT_OPTIONS


class SubmitPageParser:
    """Resolves form values for a submission from ``/contests/{id}/submit``."""

    def parse_target(self, html: str, problem_id: str, language: str) -> SubmissionTarget:
        """
        Resolve the task, language and csrf token for a submission.

        Args:
            html: Submit page body
            problem_id: Short problem id such as "a" or "B"
            language: Language name prefix such as "rust"

        Raises:
            ProblemNotFoundError: If no task option matches ``problem_id``
            LanguageUnavailableError: If the task offers no matching language
            ParsingError: If an option value or the csrf token is missing
        """
        soup = parse_html(html)

        task_screen_name = self._resolve_task(soup, problem_id)
        language_id, language_name = self._resolve_language(
            soup, task_screen_name, problem_id, language
        )

        return SubmissionTarget(
            task_screen_name=task_screen_name,
            language_id=language_id,
            language_name=language_name,
            csrf_token=extract_csrf_token(soup),
        )

    @staticmethod
    def _resolve_task(soup: BeautifulSoup, problem_id: str) -> str:
        wanted = problem_id.lower()
        for option in soup.select(TASK_SELECT_OPTIONS):
            if first_token(option.get_text()).lower().startswith(wanted):
                return require_attr(option, "value", "task screen name")
        raise ProblemNotFoundError(problem_id)

    @staticmethod
    def _resolve_language(
        soup: BeautifulSoup, task_screen_name: str, problem_id: str, language: str
    ) -> tuple[str, str]:
        wanted = language.lower()
        selector = LANGUAGE_SELECT_OPTIONS.format(task_screen_name=task_screen_name)
        for option in soup.select(selector):
            label = option.get_text(strip=True)
            if first_token(label).lower().startswith(wanted):
                logger.debug(f"Resolved language '{label}' for {task_screen_name}")
                return require_attr(option, "value", "language id"), label
        raise LanguageUnavailableError(problem_id, language)
