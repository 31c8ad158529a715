import pytest

from infrastructure.parsers import URLBuilder


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/", "https://atcoder.jp/"),
        ("/contests/abc300/tasks/abc300_a", "https://atcoder.jp/contests/abc300/tasks/abc300_a"),
        ("https://atcoder.jp/contests/arc150", "https://atcoder.jp/contests/arc150"),
    ],
)
def test_resolve(path, expected) -> None:
    assert URLBuilder.resolve(path) == expected


def test_resolve_rejects_other_hosts() -> None:
    with pytest.raises(ValueError):
        URLBuilder.resolve("https://atcoder.jp.example.com/contests/abc300")


def test_contest_urls() -> None:
    assert URLBuilder.login() == "https://atcoder.jp/login"
    assert URLBuilder.contest("abc300") == "https://atcoder.jp/contests/abc300"
    assert URLBuilder.contest_tasks("abc300") == "https://atcoder.jp/contests/abc300/tasks"
    assert URLBuilder.contest_submit("abc300") == "https://atcoder.jp/contests/abc300/submit"
