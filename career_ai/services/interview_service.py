import time
from typing import Any, List, Optional, Sequence, Union

from pydantic import ValidationError

from career_ai.core import prompts
from career_ai.core.exceptions import AppException, InvalidQuizFormat
from career_ai.models.assessment import Assessment
from career_ai.schemas.interview import QuestionResult, QuizQuestion
from career_ai.services.base import BaseService
from career_ai.services.completion_client import parse_json_response

ASSESSMENT_CATEGORY = "Technical"


class InterviewService(BaseService):

    def generate_quiz(self) -> List[QuizQuestion]:
        """
        Ask the model for a fresh multiple-choice quiz.

        The previous assessment's questions and a millisecond seed go into the
        prompt so consecutive quizzes differ; nothing enforces uniqueness.
        """
        user = self.current_user()

        last_assessment = (
            self.db.query(Assessment)
            .filter(Assessment.user_id == user.id)
            .order_by(Assessment.created_at.desc(), Assessment.id.desc())
            .first()
        )
        stored = last_assessment.questions if last_assessment else None
        previous = [q["question"] for q in stored or [] if isinstance(q, dict) and q.get("question")]

        text = self.complete_prompt(
            prompts.INTERVIEW_QUIZ,
            "Failed to generate quiz questions",
            count=prompts.QUIZ_QUESTION_COUNT,
            industry=user.industry,
            skills_clause=prompts.skills_clause(user.skills),
            seed=int(time.time() * 1000),
            previous_questions="\n- ".join(previous) or "None",
        )

        parsed = parse_json_response(text)
        raw_questions = parsed.get("questions") if isinstance(parsed, dict) else None
        if not isinstance(raw_questions, list):
            self._logger.error("Quiz response has no questions array")
            raise InvalidQuizFormat()

        try:
            return [QuizQuestion.model_validate(q) for q in raw_questions]
        except ValidationError as e:
            raise InvalidQuizFormat(details={"errors": e.error_count()}) from e

    def save_quiz_result(
        self,
        questions: Sequence[Union[QuizQuestion, dict]],
        answers: Sequence[Optional[str]],
        score: float,
    ) -> Assessment:
        user = self.current_user()

        results = []
        for index, raw in enumerate(questions):
            question = raw if isinstance(raw, QuizQuestion) else QuizQuestion.model_validate(raw)
            user_answer = answers[index] if index < len(answers) else None
            results.append(QuestionResult(
                question=question.question,
                answer=question.correct_answer,
                user_answer=user_answer,
                is_correct=question.correct_answer == user_answer,
                explanation=question.explanation,
            ))

        wrong_answers = [r for r in results if not r.is_correct]
        improvement_tip = self._improvement_tip(user.industry, wrong_answers) if wrong_answers else None

        assessment = Assessment(
            user_id=user.id,
            quiz_score=score,
            questions=[r.model_dump(by_alias=True) for r in results],
            category=ASSESSMENT_CATEGORY,
            improvement_tip=improvement_tip,
        )
        self.db.add(assessment)
        self.commit("Failed to save quiz result", assessment)

        self._logger.info(
            f"Saved assessment {assessment.id} for user {user.id}",
            extra={"score": score, "wrong": len(wrong_answers)},
        )
        return assessment

    def get_assessments(self) -> List[Assessment]:
        user = self.current_user()
        return (
            self.db.query(Assessment)
            .filter(Assessment.user_id == user.id)
            .order_by(Assessment.created_at.asc(), Assessment.id.asc())
            .all()
        )

    def _improvement_tip(self, industry: Any, wrong_answers: List[QuestionResult]) -> Optional[str]:
        """One coaching sentence or two; None when the call fails."""
        wrong_questions = "\n\n".join(
            f'Question: "{r.question}"\nCorrect Answer: "{r.answer}"'
            for r in wrong_answers
        )
        try:
            return self.complete_prompt(
                prompts.IMPROVEMENT_TIP,
                "Failed to generate improvement tip",
                industry=industry,
                wrong_questions=wrong_questions,
            )
        except AppException as e:
            self._logger.warning(f"Error generating improvement tip: {e.message}")
            return None
