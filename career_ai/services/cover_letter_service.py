from typing import List, Optional

from career_ai.core import prompts
from career_ai.core.exceptions import ResourceNotFound
from career_ai.models.cover_letter import CoverLetter
from career_ai.schemas.cover_letter import CoverLetterResponse
from career_ai.services.base import BaseService


class CoverLetterService(BaseService):

    def generate(self, job_title: str, company_name: str, job_description: str) -> CoverLetter:
        """Write a cover letter for the caller and store it as completed."""
        user = self.current_user()

        content = self.complete_prompt(
            prompts.COVER_LETTER,
            "Failed to generate cover letter",
            job_title=job_title,
            company_name=company_name,
            job_description=job_description,
            **prompts.user_profile_context(user),
        )

        cover_letter = CoverLetter(
            content=content,
            job_description=job_description,
            company_name=company_name,
            job_title=job_title,
            status="completed",
            user_id=user.id,
        )
        self.db.add(cover_letter)
        self.commit("Failed to save cover letter", cover_letter)

        self._logger.info(f"Cover letter {cover_letter.id} generated for user {user.id}")
        return cover_letter

    def list(self) -> List[CoverLetter]:
        user = self.current_user()
        return (
            self.db.query(CoverLetter)
            .filter(CoverLetter.user_id == user.id)
            .order_by(CoverLetter.created_at.desc(), CoverLetter.id.desc())
            .all()
        )

    def get(self, cover_letter_id: int) -> Optional[CoverLetter]:
        user = self.current_user()
        return self._owned(cover_letter_id, user.id)

    def delete(self, cover_letter_id: int) -> CoverLetterResponse:
        user = self.current_user()
        cover_letter = self._owned(cover_letter_id, user.id)
        if cover_letter is None:
            raise ResourceNotFound("Cover letter", cover_letter_id)

        # Snapshot before the row is gone
        deleted = CoverLetterResponse.model_validate(cover_letter)
        self.db.delete(cover_letter)
        self.commit("Failed to delete cover letter")
        return deleted

    def _owned(self, cover_letter_id: int, user_id: int) -> Optional[CoverLetter]:
        return self.db.query(CoverLetter).filter(
            CoverLetter.id == cover_letter_id,
            CoverLetter.user_id == user_id
        ).first()
