from shopauth.services.auth_operations import AuthOperations, SubmissionFailure
from shopauth.services.submission import (
    AlertPresenter,
    Navigator,
    SubmissionController,
    SubmissionStatus,
)

__all__ = [
    "AlertPresenter",
    "AuthOperations",
    "Navigator",
    "SubmissionController",
    "SubmissionFailure",
    "SubmissionStatus",
]
