from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from career_ai.core.config import settings
from career_ai.core.limiter import limiter
from career_ai.routers.deps import get_cover_letter_service
from career_ai.schemas.cover_letter import CoverLetterCreate, CoverLetterResponse
from career_ai.services.cover_letter_service import CoverLetterService

router = APIRouter(prefix="/cover-letters")


@router.post("", response_model=CoverLetterResponse, status_code=201)
@limiter.limit(settings.ai_rate_limit)
def generate_cover_letter(
    request: Request,
    data: CoverLetterCreate,
    service: CoverLetterService = Depends(get_cover_letter_service),
):
    return service.generate(data.job_title, data.company_name, data.job_description)


@router.get("", response_model=List[CoverLetterResponse])
def get_cover_letters(service: CoverLetterService = Depends(get_cover_letter_service)):
    return service.list()


@router.get("/{cover_letter_id}", response_model=CoverLetterResponse)
def get_cover_letter(
    cover_letter_id: int,
    service: CoverLetterService = Depends(get_cover_letter_service),
):
    cover_letter = service.get(cover_letter_id)
    if cover_letter is None:
        raise HTTPException(status_code=404, detail="Cover letter not found")
    return cover_letter


@router.delete("/{cover_letter_id}", response_model=CoverLetterResponse)
def delete_cover_letter(
    cover_letter_id: int,
    service: CoverLetterService = Depends(get_cover_letter_service),
):
    return service.delete(cover_letter_id)
