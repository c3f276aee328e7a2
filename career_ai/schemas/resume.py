from datetime import datetime
from typing import Optional

from pydantic import Field

from career_ai.schemas.base import CamelModel


class ResumeSave(CamelModel):
    content: str


class ResumeResponse(CamelModel):
    id: int
    user_id: int
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ImproveRequest(CamelModel):
    current: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)  # resume section, e.g. "experience", "summary"


class ImproveResponse(CamelModel):
    content: str
