from fastapi import APIRouter, Depends, Request

from career_ai.core.config import settings
from career_ai.core.limiter import limiter
from career_ai.routers.deps import get_insight_service
from career_ai.schemas.insight import IndustryInsightResponse
from career_ai.services.insight_service import InsightService

router = APIRouter(prefix="/industry-insights")


@router.get("", response_model=IndustryInsightResponse)
@limiter.limit(settings.ai_rate_limit)
def get_industry_insights(
    request: Request,
    service: InsightService = Depends(get_insight_service),
):
    return service.get_insights()
