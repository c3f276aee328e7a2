from sqlalchemy import Column, Integer, String, Float, JSON, DateTime
from career_ai.database import Base
from career_ai.models.base import utcnow


class IndustryInsight(Base):
    __tablename__ = "industry_insights"

    id = Column(Integer, primary_key=True, index=True)
    industry = Column(String, unique=True, index=True, nullable=False)

    salary_ranges = Column(JSON, default=list)  # [{role, min, max, median, location}]
    growth_rate = Column(Float, nullable=False)  # percentage
    demand_level = Column(String(10), nullable=False)  # High, Medium, Low
    top_skills = Column(JSON, default=list)
    market_outlook = Column(String(10), nullable=False)  # Positive, Neutral, Negative
    key_trends = Column(JSON, default=list)
    recommended_skills = Column(JSON, default=list)

    last_updated = Column(DateTime(timezone=True), default=utcnow)
    next_update = Column(DateTime(timezone=True), nullable=False)
