"""Pydantic schemas for contest API endpoints."""

from pydantic import BaseModel


class ProblemResponse(BaseModel):
    """A problem of a contest."""

    id: str
    name: str
    url: str  # Relative to https://atcoder.jp
    time_limit: str  # As displayed, e.g. "2 sec"
    memory_limit: str  # As displayed, e.g. "1024 MB"

    class Config:
        from_attributes = True


class ContestResponse(BaseModel):
    """Response containing contest problems in page order."""

    contest_id: str
    problems: list[ProblemResponse]

    class Config:
        from_attributes = True


class ScoreTableResponse(BaseModel):
    """Problem ids from the score table; null when no usable table exists."""

    contest_id: str
    problem_ids: list[str] | None = None


class TestCaseResponse(BaseModel):
    """One sample input and expected output."""

    input: str
    output: str

    class Config:
        from_attributes = True


class TestCasesResponse(BaseModel):
    """Sample test cases of a problem."""

    contest_id: str
    problem_id: str
    test_cases: list[TestCaseResponse]
