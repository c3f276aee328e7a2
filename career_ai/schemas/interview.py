from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from career_ai.schemas.base import CamelModel


class QuizQuestion(CamelModel):
    question: str
    options: List[str]
    correct_answer: str
    explanation: Optional[str] = ""

    @field_validator("explanation", mode="before")
    @classmethod
    def null_explanation_is_blank(cls, v):
        return "" if v is None else v


class QuizResultCreate(CamelModel):
    questions: List[QuizQuestion]
    answers: List[Optional[str]]
    score: float = Field(..., ge=0)


class QuestionResult(CamelModel):
    """One graded question as stored on the Assessment row."""
    question: str
    answer: str  # the correct answer
    user_answer: Optional[str] = None
    is_correct: bool
    explanation: Optional[str] = ""

    @field_validator("explanation", mode="before")
    @classmethod
    def null_explanation_is_blank(cls, v):
        return "" if v is None else v


class AssessmentResponse(CamelModel):
    id: int
    user_id: int
    quiz_score: float
    questions: List[QuestionResult]
    category: str
    improvement_tip: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
