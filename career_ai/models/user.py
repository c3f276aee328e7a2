"""
Application user record.
Rows are created by the onboarding flow; this service only reads them.
"""
from sqlalchemy import Column, Integer, String, Text, JSON, DateTime
from sqlalchemy.orm import relationship
from career_ai.database import Base
from career_ai.models.base import utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Subject claim issued by the identity provider
    principal_id = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=True)
    name = Column(String, nullable=True)

    # Career profile
    industry = Column(String, index=True, nullable=True)  # matches IndustryInsight.industry
    experience = Column(Integer, nullable=True)  # years
    skills = Column(JSON, default=list)
    bio = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)

    # Relationships
    cover_letters = relationship("CoverLetter", back_populates="user", cascade="all, delete-orphan")
    assessments = relationship("Assessment", back_populates="user", cascade="all, delete-orphan")
    resume = relationship("Resume", back_populates="user", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.principal_id} ({self.industry})>"
