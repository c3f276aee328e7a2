from typing import Any, Dict, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class Unauthenticated(AppException):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="UNAUTHENTICATED"
        )

class UserNotFound(AppException):
    def __init__(self, message: str = "User not found"):
        super().__init__(
            message=message,
            status_code=404,
            error_code="USER_NOT_FOUND"
        )

class ResourceNotFound(AppException):
    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details={"id": resource_id} if resource_id is not None else None
        )

class ProfileIncomplete(AppException):
    def __init__(self, field: str):
        super().__init__(
            message=f"Complete your profile first: {field} is not set",
            status_code=409,
            error_code="PROFILE_INCOMPLETE",
            details={"field": field}
        )

class EmptyCompletion(AppException):
    def __init__(self, message: str = "Empty response from AI"):
        super().__init__(
            message=message,
            status_code=502,
            error_code="EMPTY_COMPLETION"
        )

class InvalidAIResponse(AppException):
    def __init__(
        self,
        message: str = "AI returned invalid JSON",
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "INVALID_AI_RESPONSE"
    ):
        super().__init__(
            message=message,
            status_code=502,
            error_code=error_code,
            details=details
        )

class InvalidQuizFormat(InvalidAIResponse):
    def __init__(self, message: str = "Invalid quiz format", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, details=details, error_code="INVALID_QUIZ_FORMAT")

class OperationFailed(AppException):
    """Generic wrapper for downstream failures (completion transport, database writes)."""
    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
        error_code: str = "OPERATION_FAILED"
    ):
        super().__init__(
            message=message,
            status_code=status_code,
            error_code=error_code,
            details=details
        )

class GenerationFailed(OperationFailed):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            details=details,
            status_code=503,
            error_code="GENERATION_FAILED"
        )

class AIKillSwitchError(AppException):
    def __init__(self):
        super().__init__(
            message="AI services are currently offline for maintenance.",
            status_code=503,
            error_code="AI_KILL_SWITCH_ACTIVE"
        )
