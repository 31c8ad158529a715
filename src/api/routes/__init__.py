from api.routes.contest import ContestController
from api.routes.session import SessionController
from api.routes.submission import SubmissionController

__all__ = ["ContestController", "SessionController", "SubmissionController"]
