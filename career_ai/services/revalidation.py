import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class PageInvalidator(Protocol):
    def revalidate(self, path: str) -> None:
        ...


class LoggingPageInvalidator:
    """Records the invalidation; rendering lives in the frontend."""

    def revalidate(self, path: str) -> None:
        logger.info(f"Revalidating page {path}", extra={"path": path})
