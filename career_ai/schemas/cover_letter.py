from datetime import datetime
from typing import Optional

from pydantic import Field

from career_ai.schemas.base import CamelModel


class CoverLetterCreate(CamelModel):
    job_title: str = Field(..., min_length=1)
    company_name: str = Field(..., min_length=1)
    job_description: str = ""


class CoverLetterResponse(CamelModel):
    id: int
    user_id: int
    content: str
    job_description: Optional[str]
    company_name: str
    job_title: str
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None
