"""
Industry insight schemas.

`IndustryInsightPayload` is the boundary check for the model's JSON: every
field is required, array fields must be arrays and the two labels must come
from their fixed vocabularies.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from career_ai.schemas.base import CamelModel


class DemandLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class MarketOutlook(str, Enum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class SalaryRange(CamelModel):
    role: str
    min: float
    max: float
    median: float
    location: str = "Global"


class IndustryInsightPayload(CamelModel):
    salary_ranges: List[SalaryRange]
    growth_rate: float
    demand_level: DemandLevel
    top_skills: List[str]
    market_outlook: MarketOutlook
    key_trends: List[str]
    recommended_skills: List[str]

    def to_columns(self) -> dict:
        """Plain values for the IndustryInsight row."""
        return {
            "salary_ranges": [r.model_dump() for r in self.salary_ranges],
            "growth_rate": self.growth_rate,
            "demand_level": self.demand_level.value,
            "top_skills": list(self.top_skills),
            "market_outlook": self.market_outlook.value,
            "key_trends": list(self.key_trends),
            "recommended_skills": list(self.recommended_skills),
        }


class IndustryInsightResponse(CamelModel):
    id: int
    industry: str
    salary_ranges: List[SalaryRange]
    growth_rate: float
    demand_level: str
    top_skills: List[str]
    market_outlook: str
    key_trends: List[str]
    recommended_skills: List[str]
    last_updated: Optional[datetime] = None
    next_update: datetime
