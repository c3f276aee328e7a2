from typing import List

from fastapi import APIRouter, Depends, Request

from career_ai.core.config import settings
from career_ai.core.limiter import limiter
from career_ai.routers.deps import get_interview_service
from career_ai.schemas.interview import AssessmentResponse, QuizQuestion, QuizResultCreate
from career_ai.services.interview_service import InterviewService

router = APIRouter(prefix="/interview")


@router.post("/quiz", response_model=List[QuizQuestion])
@limiter.limit(settings.ai_rate_limit)
def generate_quiz(
    request: Request,
    service: InterviewService = Depends(get_interview_service),
):
    return service.generate_quiz()


@router.post("/results", response_model=AssessmentResponse, status_code=201)
@limiter.limit(settings.ai_rate_limit)
def save_quiz_result(
    request: Request,
    result: QuizResultCreate,
    service: InterviewService = Depends(get_interview_service),
):
    return service.save_quiz_result(result.questions, result.answers, result.score)


@router.get("/assessments", response_model=List[AssessmentResponse])
def get_assessments(service: InterviewService = Depends(get_interview_service)):
    return service.get_assessments()
