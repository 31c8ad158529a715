"""Protocol interfaces for parsers and their collaborators."""

from typing import Protocol


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_text(self, url: str) -> str:
        """Get text content from URL."""
        ...

    async def post_form(self, url: str, data: dict[str, str]) -> str:
        """Post a form and return the response body."""
        ...


class SessionCheckProtocol(Protocol):
    """Anything that can tell who is logged in."""

    async def current_username(self) -> str | None:
        """Return the logged-in username, or None."""
        ...
