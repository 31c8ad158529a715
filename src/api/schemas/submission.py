"""Pydantic schemas for submission API endpoints."""

from pydantic import BaseModel


class SubmissionRequest(BaseModel):
    """Source code to submit to a problem."""

    problem_id: str
    source_code: str


class SubmissionResponse(BaseModel):
    """The task and language the submission was sent with."""

    contest_id: str
    task_screen_name: str
    language_name: str

    class Config:
        from_attributes = True
