from .answer_submission import AnswerSubmission
from .session_view import SessionView
from .interview_results import InterviewResults
from .history_response import HistoryResponse
from .interview_options import InterviewOptions

__all__ = [
    "AnswerSubmission",
    "SessionView",
    "InterviewResults",
    "HistoryResponse",
    "InterviewOptions"
]
