from datetime import datetime, timedelta, timezone

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from career_ai.core import prompts
from career_ai.core.config import settings
from career_ai.core.exceptions import InvalidAIResponse, OperationFailed, ProfileIncomplete
from career_ai.models.industry_insight import IndustryInsight
from career_ai.schemas.insight import IndustryInsightPayload
from career_ai.services.base import BaseService
from career_ai.services.completion_client import parse_json_response


class InsightService(BaseService):
    """
    Industry dashboard data.

    One row per industry, created the first time any user of that industry
    asks for it. `next_update` is stored but not consulted: an existing row is
    returned as-is even after that date.
    """

    def get_insights(self) -> IndustryInsight:
        user = self.current_user()
        if not user.industry:
            raise ProfileIncomplete("industry")

        insight = self._find(user.industry)
        if insight is not None:
            return insight

        payload = self.generate_ai_insights(user.industry)
        insight = IndustryInsight(
            industry=user.industry,
            next_update=datetime.now(timezone.utc) + timedelta(days=settings.insight_refresh_days),
            **payload.to_columns(),
        )
        self.db.add(insight)
        try:
            self.commit("Failed to save industry insights", insight)
        except OperationFailed as e:
            # Another request created the row for this industry first
            existing = self._find(user.industry) if isinstance(e.__cause__, IntegrityError) else None
            if existing is None:
                raise
            return existing

        self._logger.info(f"Created industry insights for {user.industry}")
        return insight

    def generate_ai_insights(self, industry: str) -> IndustryInsightPayload:
        text = self.complete_prompt(
            prompts.INDUSTRY_INSIGHTS,
            "Failed to generate industry insights",
            industry=industry,
        )
        data = parse_json_response(text)
        try:
            return IndustryInsightPayload.model_validate(data)
        except ValidationError as e:
            self._logger.error(f"AI insight payload failed validation: {e.error_count()} errors")
            raise InvalidAIResponse(
                "AI returned insights in an unexpected shape",
                details={"errors": [
                    {"field": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                    for err in e.errors()
                ]},
            ) from e

    def _find(self, industry: str):
        return self.db.query(IndustryInsight).filter(IndustryInsight.industry == industry).first()
