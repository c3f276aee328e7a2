from sqlalchemy import Column, Integer, String, Float, Text, JSON, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from career_ai.database import Base
from career_ai.models.base import utcnow


class Assessment(Base):
    __tablename__ = "assessments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    quiz_score = Column(Float, nullable=False)
    # [{question, answer, userAnswer, isCorrect, explanation}]
    questions = Column(JSON, nullable=False)
    category = Column(String(50), nullable=False)
    improvement_tip = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)

    user = relationship("User", back_populates="assessments")
