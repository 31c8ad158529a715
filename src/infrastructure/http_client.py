"""Async HTTP client with a persistent cookie session."""

import json
import os
from pathlib import Path

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from .errors import HTTPStatusError, TransportError

SESSION_FILE_MODE = 0o600


class AsyncHTTPClient:
    """
    Thin wrapper over a curl_cffi session.

    Cookies are loaded from ``session_file`` on construction and written back
    on ``close()`` when they changed, so a login survives between processes.
    The file holds the login cookie and is kept readable by its owner only.
    One instance is not meant to be used by concurrent requests.
    """

    def __init__(
        self,
        session_file: Path | None = None,
        timeout: float = 30.0,
        impersonate: str = "chrome",
    ):
        """
        Initialize client.

        Args:
            session_file: JSON cookie store, or None to keep cookies in memory
            timeout: Per-request timeout in seconds
            impersonate: Browser fingerprint passed to curl_cffi
        """
        self.session_file = session_file
        self.timeout = timeout
        self._session = AsyncSession(impersonate=impersonate, timeout=timeout)
        self._load_session()
        self._saved_cookies = self._cookie_records()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def get_text(self, url: str) -> str:
        """GET a page and return its body."""
        logger.debug(f"GET {url}")
        try:
            response = await self._session.get(url, allow_redirects=True)
        except CurlError as e:
            raise TransportError(url, str(e)) from e
        return self._check(url, response)

    async def post_form(self, url: str, data: dict[str, str]) -> str:
        """POST an urlencoded form and return the response body."""
        logger.debug(f"POST {url} fields={list(data)}")
        try:
            response = await self._session.post(url, data=data, allow_redirects=True)
        except CurlError as e:
            raise TransportError(url, str(e)) from e
        return self._check(url, response)

    async def close(self) -> None:
        """Persist cookies and release the underlying session."""
        try:
            self.save_session()
        finally:
            await self._session.close()

    def save_session(self) -> None:
        """Write the cookie jar to ``session_file`` if it changed since load."""
        if self.session_file is None:
            return

        cookies = self._cookie_records()
        if cookies == self._saved_cookies:
            logger.debug(f"Cookies unchanged, leaving {self.session_file} as is")
            return

        self.session_file.parent.mkdir(parents=True, exist_ok=True)
        self.session_file.write_text(json.dumps(cookies, indent=2), encoding="utf-8")
        os.chmod(self.session_file, SESSION_FILE_MODE)
        self._saved_cookies = cookies
        logger.debug(f"Saved {len(cookies)} cookie(s) to {self.session_file}")

    def _cookie_records(self) -> list[dict[str, str]]:
        return [
            {
                "name": cookie.name,
                "value": cookie.value,
                "domain": cookie.domain,
                "path": cookie.path,
            }
            for cookie in self._session.cookies.jar
        ]

    def _load_session(self) -> None:
        if self.session_file is None or not self.session_file.exists():
            return

        try:
            cookies = _validate_cookies(json.loads(self.session_file.read_text(encoding="utf-8")))
        except ValueError as e:
            logger.warning(f"Ignoring corrupt session file {self.session_file}: {e}")
            return

        for cookie in cookies:
            self._session.cookies.set(
                cookie["name"],
                cookie["value"],
                domain=cookie.get("domain") or "",
                path=cookie.get("path") or "/",
            )
        logger.debug(f"Loaded {len(cookies)} cookie(s) from {self.session_file}")

    @staticmethod
    def _check(url: str, response) -> str:
        if not 200 <= response.status_code < 300:
            logger.debug(f"HTTP {response.status_code} for {url}")
            raise HTTPStatusError(url, response.status_code)
        return response.text


def _validate_cookies(data) -> list[dict]:
    """Check that a decoded session file is a list of cookie objects."""
    if not isinstance(data, list):
        raise ValueError(f"expected a list of cookies, got {type(data).__name__}")
    for index, cookie in enumerate(data):
        if not isinstance(cookie, dict):
            raise ValueError(f"cookie {index} is not an object")
        for key in ("name", "value"):
            if not isinstance(cookie.get(key), str):
                raise ValueError(f"cookie {index} has no string {key!r}")
        for key in ("domain", "path"):
            if cookie.get(key) is not None and not isinstance(cookie[key], str):
                raise ValueError(f"cookie {index} has a non-string {key!r}")
    return data
