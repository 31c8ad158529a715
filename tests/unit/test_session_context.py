"""Unit tests for explaining 404 responses by session state."""

from unittest.mock import AsyncMock

import pytest

from infrastructure.errors import (
    ContestUnavailableError,
    HTTPStatusError,
    LoginRequiredError,
    TransportError,
)
from services.session import fetch_with_session_context

URL = "https://atcoder.jp/contests/abc999/tasks"


def _session(username):
    session = AsyncMock()
    session.current_username.return_value = username
    return session


@pytest.mark.asyncio
async def test_returns_body_without_probing_session(make_http_client):
    session = _session(None)

    body = await fetch_with_session_context(
        make_http_client({URL: "<html></html>"}),
        session,
        URL,
        lambda: ContestUnavailableError("abc999"),
    )

    assert body == "<html></html>"
    session.current_username.assert_not_awaited()


@pytest.mark.asyncio
async def test_404_when_logged_in_raises_custom_error(make_http_client):
    with pytest.raises(ContestUnavailableError) as exc_info:
        await fetch_with_session_context(
            make_http_client({URL: 404}),
            _session("tanakh"),
            URL,
            lambda: ContestUnavailableError("abc999"),
        )

    assert "abc999" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, HTTPStatusError)


@pytest.mark.asyncio
async def test_404_when_anonymous_requires_login(make_http_client):
    with pytest.raises(LoginRequiredError):
        await fetch_with_session_context(
            make_http_client({URL: 404}),
            _session(None),
            URL,
            lambda: ContestUnavailableError("abc999"),
        )


@pytest.mark.asyncio
async def test_other_status_codes_propagate(make_http_client):
    session = _session("tanakh")

    with pytest.raises(HTTPStatusError) as exc_info:
        await fetch_with_session_context(
            make_http_client({URL: 503}),
            session,
            URL,
            lambda: ContestUnavailableError("abc999"),
        )

    assert exc_info.value.status_code == 503
    session.current_username.assert_not_awaited()


@pytest.mark.asyncio
async def test_session_check_failure_propagates(make_http_client):
    session = AsyncMock()
    session.current_username.side_effect = TransportError("https://atcoder.jp/", "timed out")

    with pytest.raises(TransportError):
        await fetch_with_session_context(
            make_http_client({URL: 404}),
            session,
            URL,
            lambda: ContestUnavailableError("abc999"),
        )
