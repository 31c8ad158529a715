"""Value objects for solution submission."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionTarget:
    """Identifiers resolved from one fetch of the submit page."""

    task_screen_name: str
    language_id: str
    language_name: str
    csrf_token: str


@dataclass(frozen=True)
class SubmissionResult:
    """What was submitted, as accepted by the server."""

    contest_id: str
    task_screen_name: str
    language_name: str
