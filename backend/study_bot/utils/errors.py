# study_bot/utils/errors.py
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import HTTPException


class ErrorCode:
    # Chat related errors
    CHAT_001 = "CHAT_001"  # Subject not found
    CHAT_002 = "CHAT_002"  # AI response failed

    # Configuration errors
    CONFIG_001 = "CONFIG_001"  # Service not configured

    # Auth related errors
    AUTH_001 = "AUTH_001"  # Login required
    AUTH_002 = "AUTH_002"  # Forbidden

    # Notification errors
    NOTIFY_001 = "NOTIFY_001"  # Invalid notification payload

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


UNAUTHED_ERR_MSG = "Please login (10001)"
NOT_ADMIN_ERR_MSG = "You do not have required permission (10002)"


def error_body(code: str, message: str, details: Any = None) -> Dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details
        },
        "success": False,
        "timestamp": datetime.utcnow().isoformat()
    }


class APIError(HTTPException):
    def __init__(
            self,
            code: str,
            message: str,
            status_code: int = 400,
            details: Optional[Dict[str, Any]] = None
    ):
        self.error_code = code
        self.error_message = message
        self.error_details = details
        super().__init__(status_code=status_code, detail=message)

    def to_dict(self) -> Dict[str, Any]:
        return error_body(self.error_code, self.error_message, self.error_details)


class SubjectNotFoundError(APIError):
    def __init__(self, subject_id: str):
        super().__init__(ErrorCode.CHAT_001, "Subject not found", 404, {"subjectId": subject_id})


class AIResponseError(APIError):
    def __init__(self, message: str = "Failed to get AI response", details: Optional[Dict[str, Any]] = None):
        super().__init__(ErrorCode.CHAT_002, message, 502, details)


class ConfigurationError(APIError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(ErrorCode.CONFIG_001, message, 500, details)


class NotificationInputError(APIError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(ErrorCode.NOTIFY_001, message, 400, details)


class UnauthorizedError(APIError):
    def __init__(self, message: str = UNAUTHED_ERR_MSG):
        super().__init__(ErrorCode.AUTH_001, message, 401)


class ForbiddenError(APIError):
    def __init__(self, message: str = NOT_ADMIN_ERR_MSG):
        super().__init__(ErrorCode.AUTH_002, message, 403)
