from .mock_interview_ai import MockInterviewAI

__all__ = ["MockInterviewAI"]
