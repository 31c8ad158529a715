"""Parsers for extracting data from AtCoder pages."""

from .contest_page_parser import ContestPageParser
from .interfaces import HTTPClientProtocol, SessionCheckProtocol
from .problem_page_parser import ProblemPageParser
from .session_page_parser import LoginOutcome, SessionPageParser
from .submit_page_parser import SubmitPageParser
from .url_builder import URLBuilder

__all__ = [
    "ContestPageParser",
    "HTTPClientProtocol",
    "LoginOutcome",
    "ProblemPageParser",
    "SessionPageParser",
    "SessionCheckProtocol",
    "SubmitPageParser",
    "URLBuilder",
]
