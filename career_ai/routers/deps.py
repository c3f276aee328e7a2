"""
Request-scoped collaborators for the handler services.
Tests swap any of these through app.dependency_overrides.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from career_ai.database import get_db
from career_ai.services.completion_client import CompletionClient, GroqCompletionClient
from career_ai.services.cover_letter_service import CoverLetterService
from career_ai.services.identity import BearerTokenIdentityResolver, IdentityResolver
from career_ai.services.insight_service import InsightService
from career_ai.services.interview_service import InterviewService
from career_ai.services.resume_service import ResumeService
from career_ai.services.revalidation import LoggingPageInvalidator, PageInvalidator

# Missing credentials reach the services, which raise Unauthenticated
bearer_scheme = HTTPBearer(auto_error=False)


def get_identity_resolver(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> IdentityResolver:
    return BearerTokenIdentityResolver(credentials.credentials if credentials else None)


def get_completion_client() -> CompletionClient:
    return GroqCompletionClient()


def get_page_invalidator() -> PageInvalidator:
    return LoggingPageInvalidator()


def get_cover_letter_service(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
    client: CompletionClient = Depends(get_completion_client),
) -> CoverLetterService:
    return CoverLetterService(db, identity, client)


def get_insight_service(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
    client: CompletionClient = Depends(get_completion_client),
) -> InsightService:
    return InsightService(db, identity, client)


def get_interview_service(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
    client: CompletionClient = Depends(get_completion_client),
) -> InterviewService:
    return InterviewService(db, identity, client)


def get_resume_service(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
    client: CompletionClient = Depends(get_completion_client),
    invalidator: PageInvalidator = Depends(get_page_invalidator),
) -> ResumeService:
    return ResumeService(db, identity, client, invalidator)
