from typing import Optional

from sqlalchemy.orm import Session

from career_ai.core import prompts
from career_ai.models.resume import Resume
from career_ai.services.base import BaseService
from career_ai.services.completion_client import CompletionClient
from career_ai.services.identity import IdentityResolver
from career_ai.services.revalidation import LoggingPageInvalidator, PageInvalidator

RESUME_PAGE = "/resume"


class ResumeService(BaseService):

    def __init__(
        self,
        db: Session,
        identity: IdentityResolver,
        completion_client: Optional[CompletionClient] = None,
        invalidator: Optional[PageInvalidator] = None,
    ):
        super().__init__(db, identity, completion_client)
        self.invalidator = invalidator or LoggingPageInvalidator()

    def save_resume(self, content: str) -> Resume:
        """Create or overwrite the caller's single resume."""
        user = self.current_user()

        resume = self.db.query(Resume).filter(Resume.user_id == user.id).first()
        if resume is None:
            resume = Resume(user_id=user.id, content=content)
            self.db.add(resume)
        else:
            resume.content = content
        self.commit("Failed to save resume", resume)

        self.invalidator.revalidate(RESUME_PAGE)
        return resume

    def get_resume(self) -> Optional[Resume]:
        user = self.current_user()
        return self.db.query(Resume).filter(Resume.user_id == user.id).first()

    def improve_with_ai(self, current: str, type: str) -> str:
        """Rewrite one resume section. Nothing is stored."""
        user = self.current_user()
        return self.complete_prompt(
            prompts.RESUME_IMPROVEMENT,
            "Failed to improve content",
            section=type,
            industry=user.industry,
            current=current,
        )
