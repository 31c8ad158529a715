"""Errors raised while talking to AtCoder."""


class AtCoderError(Exception):
    """Base class for all client errors."""

    pass


class TransportError(AtCoderError):
    """Network failure before any HTTP status was received."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Request to {url} failed: {reason}")


class HTTPStatusError(AtCoderError):
    """Server answered with a non-success status code."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} for {url}")


class LoginRequiredError(AtCoderError):
    """The session is not authenticated."""

    def __init__(self, message: str = "You are not logged in. Please login first."):
        super().__init__(message)


class ContestUnavailableError(AtCoderError):
    """Contest does not exist, or the user is not participating in it."""

    def __init__(self, contest_id: str):
        self.contest_id = contest_id
        super().__init__(
            f"You are not participating in `{contest_id}`, or it does not yet exist"
        )


class ParsingError(AtCoderError, ValueError):
    """Page layout does not match what the parser expects."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class SampleExtractionError(ParsingError):
    """Sample blocks were found in neither language in balanced numbers."""

    def __init__(self, ja_inputs: int, ja_outputs: int, en_inputs: int, en_outputs: int):
        self.counts = (ja_inputs, ja_outputs, en_inputs, en_outputs)
        super().__init__(
            "Could not scrape sample test cases "
            f"(JA inputs: {ja_inputs}, JA outputs: {ja_outputs}, "
            f"EN inputs: {en_inputs}, EN outputs: {en_outputs})",
            field="samples",
        )


class LoginFailedError(AtCoderError):
    """The site rejected the credentials."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Login failed: {message}")


class ProblemNotFoundError(AtCoderError):
    """No task option matches the requested problem id."""

    def __init__(self, problem_id: str):
        self.problem_id = problem_id
        super().__init__(f"Problem not found: {problem_id}")


class LanguageUnavailableError(AtCoderError):
    """The target language is not offered for the problem."""

    def __init__(self, problem_id: str, language: str):
        self.problem_id = problem_id
        self.language = language
        super().__init__(f"{language} seems to be not available in problem {problem_id}")
