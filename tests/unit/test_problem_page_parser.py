"""Unit tests for sample test case extraction."""

import pytest

from domain.models import SampleLabel, TestCase
from infrastructure.errors import SampleExtractionError
from infrastructure.parsers import ProblemPageParser
from pages import problem_page, sample_block
from services.problem import ProblemService


@pytest.fixture
def parser():
    return ProblemPageParser()


@pytest.mark.parametrize(
    "heading, expected",
    [
        ("入力例 1", SampleLabel.JA_INPUT),
        ("出力例 2", SampleLabel.JA_OUTPUT),
        ("Sample Input 1", SampleLabel.EN_INPUT),
        ("Sample Output 3", SampleLabel.EN_OUTPUT),
        ("  Sample Input 1 Copy", SampleLabel.EN_INPUT),
        ("入力", SampleLabel.UNRECOGNIZED),
        ("Input", SampleLabel.UNRECOGNIZED),
        ("", SampleLabel.UNRECOGNIZED),
    ],
)
def test_classify_heading(heading, expected):
    assert SampleLabel.classify(heading) is expected


def test_japanese_samples_are_paired_in_order(parser):
    html = problem_page(
        sample_block("入力例 1", "3\n1 2 3\n"),
        sample_block("出力例 1", "6\n"),
        sample_block("入力例 2", "1\n5"),
        sample_block("出力例 2", "5"),
        sample_block("入力例 3", "2\n0 0"),
        sample_block("出力例 3", "0"),
    )

    assert parser.parse_test_cases(html) == [
        TestCase(input="3\n1 2 3", output="6"),
        TestCase(input="1\n5", output="5"),
        TestCase(input="2\n0 0", output="0"),
    ]


def test_japanese_preferred_when_both_languages_present(parser):
    html = problem_page(
        sample_block("入力例 1", "ja-in"),
        sample_block("出力例 1", "ja-out"),
        sample_block("Sample Input 1", "en-in"),
        sample_block("Sample Output 1", "en-out"),
    )

    assert parser.parse_test_cases(html) == [TestCase(input="ja-in", output="ja-out")]


def test_unbalanced_japanese_falls_back_to_english(parser):
    html = problem_page(
        sample_block("入力例 1", "ja-in-1"),
        sample_block("出力例 1", "ja-out-1"),
        sample_block("入力例 2", "ja-in-2"),
        sample_block("Sample Input 1", "en-in-1"),
        sample_block("Sample Output 1", "en-out-1"),
        sample_block("Sample Input 2", "en-in-2"),
        sample_block("Sample Output 2", "en-out-2"),
    )

    assert parser.parse_test_cases(html) == [
        TestCase(input="en-in-1", output="en-out-1"),
        TestCase(input="en-in-2", output="en-out-2"),
    ]


def test_no_samples_reports_all_counts(parser):
    with pytest.raises(SampleExtractionError) as exc_info:
        parser.parse_test_cases(problem_page())

    assert exc_info.value.counts == (0, 0, 0, 0)
    assert "JA inputs: 0, JA outputs: 0, EN inputs: 0, EN outputs: 0" in str(exc_info.value)


def test_unbalanced_in_both_languages_fails(parser, error_logs):
    html = problem_page(
        sample_block("入力例 1", "a"),
        sample_block("Sample Input 1", "a"),
        sample_block("Sample Input 2", "b"),
        sample_block("Sample Output 1", "c"),
    )

    with pytest.raises(SampleExtractionError) as exc_info:
        parser.parse_test_cases(html)

    assert exc_info.value.counts == (1, 0, 2, 1)
    assert len(error_logs) == 1
    assert error_logs[0].startswith("Failed to extract samples")


def test_block_without_pre_yields_empty_text(parser):
    html = problem_page(
        '<div class="part"><section><h3>入力例 1</h3><p>nothing here</p></section></div>',
        sample_block("出力例 1", "42"),
    )

    assert parser.parse_test_cases(html) == [TestCase(input="", output="42")]


def test_block_with_two_pre_yields_empty_text(parser):
    html = problem_page(
        sample_block("入力例 1", "1"),
        '<div class="part"><section><h3>出力例 1</h3><pre>a</pre><pre>b</pre></section></div>',
    )

    assert parser.parse_test_cases(html) == [TestCase(input="1", output="")]


@pytest.mark.asyncio
async def test_service_resolves_relative_problem_url(make_http_client):
    url = "https://atcoder.jp/contests/abc300/tasks/abc300_a"
    html = problem_page(sample_block("入力例 1", "1"), sample_block("出力例 1", "2"))
    http_client = make_http_client({url: html})

    test_cases = await ProblemService(http_client=http_client).test_cases(
        "/contests/abc300/tasks/abc300_a"
    )

    assert test_cases == [TestCase(input="1", output="2")]
    http_client.get_text.assert_awaited_once_with(url)


@pytest.mark.asyncio
async def test_service_rejects_foreign_urls(make_http_client):
    with pytest.raises(ValueError):
        await ProblemService(http_client=make_http_client({})).test_cases(
            "https://example.com/tasks/a"
        )
