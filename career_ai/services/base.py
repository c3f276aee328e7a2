import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from career_ai.core import prompts
from career_ai.core.exceptions import (
    AppException,
    EmptyCompletion,
    GenerationFailed,
    OperationFailed,
    Unauthenticated,
    UserNotFound,
)
from career_ai.models.user import User
from career_ai.services.completion_client import CompletionClient
from career_ai.services.identity import IdentityResolver


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_principal(self, principal: str) -> Optional[User]:
        return self.db.query(User).filter(User.principal_id == principal).first()


class BaseService:
    """
    Shared plumbing for the handler groups: resolve the caller, run a prompt
    through the completion client and commit with rollback on failure.
    """

    def __init__(
        self,
        db: Session,
        identity: IdentityResolver,
        completion_client: Optional[CompletionClient] = None,
    ):
        self.db = db
        self.identity = identity
        self.completion_client = completion_client
        self.users = UserRepository(db)
        self._logger = logging.getLogger(self.__class__.__module__)

    def current_user(self) -> User:
        principal = self.identity.resolve()
        if not principal:
            raise Unauthenticated()

        user = self.users.find_by_principal(principal)
        if user is None:
            self._logger.warning(f"No user row for principal {principal}")
            raise UserNotFound()
        return user

    def complete_prompt(self, template: prompts.PromptTemplate, failure_message: str, **context: Any) -> str:
        """Render `template`, call the completion client and return non-blank text."""
        system_prompt, user_prompt = prompts.get_prompt(template, **context)
        self._logger.info(f"Requesting completion: {template.name}")
        try:
            text = self.completion_client.complete(system_prompt, user_prompt, template.temperature)
        except AppException:
            raise
        except Exception as e:
            self._logger.error(f"{failure_message}: {e}")
            raise GenerationFailed(failure_message) from e

        text = (text or "").strip()
        if not text:
            self._logger.warning(f"Empty completion for {template.name}")
            raise EmptyCompletion()
        return text

    def commit(self, failure_message: str, *instances: Any) -> None:
        try:
            self.db.commit()
            for instance in instances:
                self.db.refresh(instance)
        except SQLAlchemyError as e:
            self.db.rollback()
            self._logger.error(f"{failure_message}: {e}", exc_info=True)
            raise OperationFailed(failure_message) from e
