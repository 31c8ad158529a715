"""Domain models package."""

from .contest import Contest, Problem
from .submission import SubmissionResult, SubmissionTarget
from .test_case import SampleLabel, TestCase

__all__ = [
    "Contest",
    "Problem",
    "SampleLabel",
    "SubmissionResult",
    "SubmissionTarget",
    "TestCase",
]
