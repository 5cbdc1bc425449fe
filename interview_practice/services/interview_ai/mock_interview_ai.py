"""
Mock Interview AI Service

This service stands in for a real AI backend. It renders the prompts such a
backend would receive, waits for a simulated latency, and answers from the
static question bank and the rule-based answer scorer.

Dependencies:
- asyncio: For the simulated latency.
- loguru: For logging operations.
- interview_practice.core.prompt_templates: For rendering the backend prompts.
- interview_practice.services.question_generation.question_selector: For question selection.
- interview_practice.services.answer_analysis.answer_scorer: For answer analysis.
"""

import asyncio
import random
from typing import List, Optional
from loguru import logger
from interview_practice.core.prompt_templates import build_analysis_prompt, build_question_prompt
from interview_practice.schemas.analysis_result import AnalysisResult
from interview_practice.services.answer_analysis.answer_scorer import analyze_answers
from interview_practice.services.question_generation.question_selector import select_questions


class MockInterviewAI:
    """
    Rule-based implementation of the interview AI provider.

    Attributes:
        rng: Random source shared by question shuffling and score jitter.
        question_latency: Seconds to wait before returning questions.
        analysis_latency: Seconds to wait before returning an analysis.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        question_latency: float = 2.0,
        analysis_latency: float = 1.5
    ):
        self.rng = rng or random.Random()
        self.question_latency = question_latency
        self.analysis_latency = analysis_latency

    async def generate_questions(
        self,
        interview_type: str,
        position: str,
        experience: str,
        count: int
    ) -> List[str]:
        await asyncio.sleep(self.question_latency)

        prompt = build_question_prompt(interview_type, position, experience, count)
        logger.debug(f"Question prompt: {prompt[:100]}...")

        questions = select_questions(interview_type, position, experience, count, rng=self.rng)
        logger.info(f"Generated {len(questions)} {interview_type} questions for {position}")
        return questions

    async def analyze_answers(
        self,
        questions: List[str],
        answers: List[str],
        position: str,
        interview_type: str
    ) -> AnalysisResult:
        await asyncio.sleep(self.analysis_latency)

        prompt = build_analysis_prompt(questions, answers, position, interview_type)
        logger.debug(f"Analysis prompt: {prompt[:100]}...")

        result = analyze_answers(questions, answers, position, interview_type, rng=self.rng)
        logger.info(f"Analyzed {len(questions)} answers, score {result.score}")
        return result
