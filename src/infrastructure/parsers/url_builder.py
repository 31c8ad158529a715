"""Builds absolute AtCoder URLs."""

from urllib.parse import quote, urljoin

from loguru import logger

from .selectors import (
    ATCODER_ENDPOINT,
    CONTEST_PATH,
    CONTEST_SUBMIT_PATH,
    CONTEST_TASKS_PATH,
    HOME_PATH,
    LOGIN_PATH,
)


class URLBuilder:
    """URLs of the pages the client reads, all on the fixed endpoint."""

    @classmethod
    def resolve(cls, path: str) -> str:
        """
        Join a site-relative path onto the endpoint.

        Absolute URLs pointing elsewhere are rejected.
        """
        url = urljoin(ATCODER_ENDPOINT + "/", path)
        if not url.startswith(ATCODER_ENDPOINT + "/"):
            raise ValueError(f"URL is not on {ATCODER_ENDPOINT}: {path}")
        logger.debug(f"Built URL: {url}")
        return url

    @classmethod
    def home(cls) -> str:
        return cls.resolve(HOME_PATH)

    @classmethod
    def login(cls) -> str:
        return cls.resolve(LOGIN_PATH)

    @classmethod
    def contest(cls, contest_id: str) -> str:
        return cls.resolve(CONTEST_PATH.format(contest_id=quote(contest_id, safe="")))

    @classmethod
    def contest_tasks(cls, contest_id: str) -> str:
        return cls.resolve(CONTEST_TASKS_PATH.format(contest_id=quote(contest_id, safe="")))

    @classmethod
    def contest_submit(cls, contest_id: str) -> str:
        return cls.resolve(CONTEST_SUBMIT_PATH.format(contest_id=quote(contest_id, safe="")))
