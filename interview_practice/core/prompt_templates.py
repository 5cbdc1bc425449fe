"""
Prompt Templates Module

This module renders the prompts an AI backend receives when it is asked to
generate interview questions or to analyze a set of answers. User supplied data
is sanitized before it is injected into the templates.

The module contains:
- sanitize_text: Utility function for text sanitization
- PromptTemplate: A dataclass for prompt templates with placeholders
- build_question_prompt / build_analysis_prompt: Renderers for the two provider calls

Dependencies:
- dataclasses: For template data structures
- typing: For type hints
- re: For regex-based sanitization
- loguru: For logging
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
import re
from loguru import logger

NO_ANSWER_PLACEHOLDER = "No answer provided"


def sanitize_text(text: str, max_length: int = 1000) -> str:
    """
    Sanitize text before it is injected into a prompt.

    This function performs multiple sanitization steps:
    1. Strips leading/trailing whitespace
    2. Removes null bytes and other control characters
    3. Limits the length of the text

    Args:
        text (str): The text to sanitize
        max_length (int): Maximum allowed length (default: 1000)

    Returns:
        str: The sanitized text

    Raises:
        ValueError: If text is None
    """
    if text is None:
        raise ValueError("Text cannot be None")

    text = str(text).strip()

    # Remove null bytes and other control characters (except newlines and tabs)
    text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', text)

    if len(text) > max_length:
        text = text[:max_length]
        logger.warning(f"Text truncated to {max_length} characters")

    return text


@dataclass
class PromptTemplate:
    """Prompt template with placeholders for safe data injection."""
    template: str
    placeholders: Dict[str, str]
    max_lengths: Optional[Dict[str, int]] = None

    def render(self, **kwargs) -> str:
        """
        Render the template with provided data.

        Args:
            **kwargs: Data to inject into placeholders

        Returns:
            str: Rendered prompt with sanitized data

        Raises:
            ValueError: If required placeholders are missing
        """
        missing_placeholders = set(self.placeholders.keys()) - set(kwargs.keys())
        if missing_placeholders:
            raise ValueError(f"Missing required placeholders: {sorted(missing_placeholders)}")

        sanitized_data = {}
        for key, value in kwargs.items():
            if key not in self.placeholders:
                logger.warning(f"Unknown placeholder key: {key}")
                continue
            max_length = (self.max_lengths or {}).get(key, 1000)
            sanitized_data[key] = sanitize_text(str(value), max_length=max_length)

        return self.template.format(**sanitized_data)


QUESTION_PROMPT = PromptTemplate(
    template="""Generate {count} {interview_type} interview questions for a {position} position with {experience} experience level.
Questions should be:
- Relevant to the specific role and industry
- Appropriate for the experience level
- Realistic and commonly asked
- Varied in difficulty and scope

Format as a JSON array of strings.""",
    placeholders={
        "count": "Number of questions to generate",
        "interview_type": "Kind of interview",
        "position": "Target position",
        "experience": "Candidate experience level",
    },
)

ANALYSIS_PROMPT = PromptTemplate(
    template="""Analyze these {interview_type} interview answers for a {position} role:

{transcript}

Provide:
1. Overall score (0-100)
2. Specific feedback for each answer
3. Improvement suggestions
4. Strengths identified

Format as JSON with score, feedback array, and suggestions array.""",
    placeholders={
        "interview_type": "Kind of interview",
        "position": "Target position",
        "transcript": "Question and answer pairs",
    },
    max_lengths={"transcript": 20000},
)


def build_question_prompt(interview_type: str, position: str, experience: str, count: int) -> str:
    return QUESTION_PROMPT.render(
        count=count,
        interview_type=interview_type,
        position=position,
        experience=experience or "unspecified",
    )


def build_analysis_prompt(questions: List[str], answers: List[str], position: str, interview_type: str) -> str:
    pairs = []
    for index, question in enumerate(questions):
        answer = answers[index] if index < len(answers) else ""
        pairs.append(f"Q: {question}\nA: {answer.strip() or NO_ANSWER_PLACEHOLDER}")
    return ANALYSIS_PROMPT.render(
        interview_type=interview_type,
        position=position,
        transcript="\n\n".join(pairs),
    )
