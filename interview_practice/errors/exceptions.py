from fastapi import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND, HTTP_409_CONFLICT, HTTP_500_INTERNAL_SERVER_ERROR

class BadRequest(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=HTTP_400_BAD_REQUEST, detail=detail)

class NotFound(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=HTTP_404_NOT_FOUND, detail=detail)

class Conflict(HTTPException):
    def __init__(self, detail: str = "Request conflicts with the current state"):
        super().__init__(status_code=HTTP_409_CONFLICT, detail=detail)

class InternalServerError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

class SessionNotFound(NotFound):
    def __init__(self, identifier: str = None):
        detail = f"Interview session '{identifier}' not found." if identifier else "Interview session not found."
        super().__init__(detail=detail)

class InvalidSessionTransition(Conflict):
    def __init__(self, action: str, status: str):
        self.action = action
        self.status = status
        super().__init__(detail=f"Cannot {action} an interview session that is {status}.")

class InterviewServiceError(Exception):
    """Base class for failures of the interview AI provider."""

class GenerationFailure(InterviewServiceError):
    """The question source is unavailable."""

class AnalysisFailure(InterviewServiceError):
    """The scoring source is unavailable."""
