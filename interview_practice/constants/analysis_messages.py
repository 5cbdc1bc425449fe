"""
Description:
Feedback templates, suggestion lists and score messages used by the rule-based answer analyzer.
"""

# Upper bounds (exclusive) on the trimmed answer length for each quality bucket.
QUALITY_BUCKETS = (
    (10, 0),
    (50, 40),
    (100, 60),
    (200, 75),
)
TOP_QUALITY = 85

SCORE_JITTER = 10
MAX_SUGGESTIONS = 5

FEEDBACK_NO_ANSWER = "Question {number}: No substantial answer provided. Consider preparing specific examples."
FEEDBACK_TOO_BRIEF = "Question {number}: Answer is too brief. Provide more detail and specific examples."
FEEDBACK_NEEDS_STRUCTURE = "Question {number}: Good start, but could benefit from more structure and concrete examples."
FEEDBACK_WELL_STRUCTURED = "Question {number}: Well-structured answer with good detail. Consider quantifying your impact."

BASE_SUGGESTIONS = [
    "Use the STAR method (Situation, Task, Action, Result) for behavioral questions",
    "Prepare specific examples that demonstrate your skills and achievements",
    "Practice speaking clearly and at an appropriate pace",
    "Research the company and role thoroughly before the interview",
]

# Added when the score is below 70.
PRACTICE_SUGGESTIONS = [
    "Consider doing more mock interviews to build confidence",
    "Work on providing more detailed and structured responses",
]

# Added when the score is below 50.
PREPARATION_SUGGESTIONS = [
    "Focus on preparing specific examples for common interview questions",
    "Practice your responses out loud to improve fluency",
]

TYPE_SUGGESTIONS = {
    "technical": [
        "Review fundamental concepts and algorithms in your field",
        "Practice coding problems and system design questions",
        "Be prepared to explain your technical decisions and trade-offs",
        "Stay updated with industry trends and best practices",
    ],
    "behavioral": [
        "Prepare stories that showcase different competencies",
        "Focus on your specific contributions and measurable outcomes",
        "Practice articulating challenges and how you overcame them",
        "Show self-awareness and ability to learn from experiences",
    ],
    "leadership": [
        "Prepare examples of successful team leadership and mentoring",
        "Demonstrate your ability to make difficult decisions",
        "Show how you build consensus and manage conflicts",
        "Highlight your strategic thinking and vision-setting abilities",
    ],
    "general": [
        "Research the company culture and values thoroughly",
        "Prepare thoughtful questions about the role and organization",
        "Practice your elevator pitch and career story",
        "Be authentic and show genuine enthusiasm for the opportunity",
    ],
}

FALLBACK_SCORE = 75
FALLBACK_FEEDBACK = ["Analysis temporarily unavailable. Your responses showed good structure and detail."]
FALLBACK_SUGGESTIONS = [
    "Continue practicing with specific examples",
    "Focus on quantifying your achievements",
]
