"""Shared fixtures."""

from unittest.mock import AsyncMock

import pytest
from loguru import logger

from infrastructure.errors import HTTPStatusError


@pytest.fixture
def make_http_client():
    """
    Build an AsyncMock HTTP client serving canned pages.

    ``pages`` maps absolute URLs to bodies; an int value is raised as that
    HTTP status, an exception instance is raised as is.
    """

    def factory(pages: dict[str, object], post_response: str = "") -> AsyncMock:
        http_client = AsyncMock()

        async def get_text(url: str) -> str:
            page = pages[url]
            if isinstance(page, int):
                raise HTTPStatusError(url, page)
            if isinstance(page, Exception):
                raise page
            return page

        http_client.get_text.side_effect = get_text
        http_client.post_form.return_value = post_response
        return http_client

    return factory


@pytest.fixture
def error_logs():
    """Collect messages logged at ERROR level or above."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="ERROR")
    yield messages
    logger.remove(handler_id)
