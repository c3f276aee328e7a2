from typing import Optional

from fastapi import APIRouter, Depends, Request

from career_ai.core.config import settings
from career_ai.core.limiter import limiter
from career_ai.routers.deps import get_resume_service
from career_ai.schemas.resume import ImproveRequest, ImproveResponse, ResumeResponse, ResumeSave
from career_ai.services.resume_service import ResumeService

router = APIRouter(prefix="/resume")


@router.put("", response_model=ResumeResponse)
def save_resume(
    data: ResumeSave,
    service: ResumeService = Depends(get_resume_service),
):
    return service.save_resume(data.content)


@router.get("", response_model=Optional[ResumeResponse])
def get_resume(service: ResumeService = Depends(get_resume_service)):
    return service.get_resume()


@router.post("/improve", response_model=ImproveResponse)
@limiter.limit(settings.ai_rate_limit)
def improve_with_ai(
    request: Request,
    data: ImproveRequest,
    service: ResumeService = Depends(get_resume_service),
):
    return ImproveResponse(content=service.improve_with_ai(data.current, data.type))
