"""Helpers for querying parsed HTML documents."""

from bs4 import BeautifulSoup, Comment, Tag
from loguru import logger

from infrastructure.errors import ParsingError

from .selectors import CSRF_TOKEN_FIELD, CSRF_TOKEN_INPUT


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def require_one(root: Tag, selector: str, field: str) -> Tag:
    """Return the first element matching ``selector`` or fail naming ``field``."""
    element = root.select_one(selector)
    if element is None:
        logger.error(f"No element matches {selector!r} for {field}")
        raise ParsingError(f"cannot find {field}", field=field)
    return element


def require_attr(element: Tag, attr: str, field: str) -> str:
    """Return a string attribute of ``element`` or fail naming ``field``."""
    value = element.get(attr)
    if isinstance(value, list):
        value = " ".join(value)
    if value is None:
        logger.error(f"<{element.name}> has no {attr!r} attribute for {field}")
        raise ParsingError(f"cannot find {field}", field=field)
    return value


def extract_csrf_token(soup: BeautifulSoup) -> str:
    """Read the hidden anti-forgery token from a form page."""
    field = require_one(soup, CSRF_TOKEN_INPUT, CSRF_TOKEN_FIELD)
    return require_attr(field, "value", CSRF_TOKEN_FIELD)


def first_token(text: str) -> str:
    """First whitespace-delimited word of ``text``, or an empty string."""
    parts = text.split()
    return parts[0] if parts else ""


def trailing_text(element: Tag) -> str:
    """Text of the element's last direct text node, trimmed."""
    strings = [
        s
        for s in element.find_all(string=True, recursive=False)
        if s.strip() and not isinstance(s, Comment)
    ]
    if strings:
        return strings[-1].strip()
    return element.get_text(strip=True)
