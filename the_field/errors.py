# the_field/errors.py
from __future__ import annotations

from typing import Any, Dict, Optional


class UserServiceError(Exception):
    """
    Base for every failure a handler can report.

    Serialized at the HTTP boundary as:
        {"error": <low-level detail>, "message": <human readable>, **extra}
    """

    status_code = 500

    def __init__(
        self,
        error: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.error = error
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra or {}

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.error, "message": self.message}
        payload.update(self.extra)
        return payload


class InvalidId(UserServiceError):
    status_code = 400

    def __init__(self, error: str):
        super().__init__(error, "Invalid Id")


class ParseFailed(UserServiceError):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__("Failed to parse request body", detail)


class ValidationFailed(UserServiceError):
    status_code = 400

    def __init__(self, field: str, reason: str, message: Optional[str] = None):
        super().__init__(reason, message or f"{field} is required")
        self.field = field
        self.reason = reason


class AlreadyFinished(UserServiceError):
    status_code = 400

    def __init__(self):
        super().__init__("User already finished profile", "User already finished profile")


class AlreadyAttached(UserServiceError):
    status_code = 500

    def __init__(self, kind: str):
        super().__init__(f"User already has an {kind}", f"User already has an {kind}")
        self.kind = kind


class Unauthorized(UserServiceError):
    status_code = 401

    def __init__(self):
        super().__init__("Invalid header", "Invalid header")

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.error}


class Unauthenticated(UserServiceError):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__("Failed to get session", detail, extra={"status": "unauthenticated"})


class NotFound(UserServiceError):
    # legacy mapping: a missing user surfaces as a lookup failure
    status_code = 500

    def __init__(self, what: str, message: str):
        super().__init__(f"{what} not found", message)


class Empty(UserServiceError):
    status_code = 404

    def __init__(self):
        super().__init__("No users found", "No users found")

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.error}


class PersistenceFailure(UserServiceError):
    status_code = 500

    def __init__(self, error: str, message: str):
        super().__init__(error, message)


class SessionUpdateFailed(UserServiceError):
    status_code = 400

    def __init__(self, error: str):
        super().__init__(error, "Failed to update session")


class LinkFailed(UserServiceError):
    """Link step failed; the detail record was deleted again."""

    status_code = 500

    def __init__(self, kind: str, error: str):
        super().__init__(
            error,
            f"Failed to link {kind} to user",
            extra={"rollback": f"{kind} deleted"},
        )
        self.kind = kind


class CompensationFailure(UserServiceError):
    """Link step failed and deleting the detail record failed too."""

    status_code = 500

    def __init__(self, kind: str, error: str, rollback_error: str):
        super().__init__(
            error,
            f"Failed to link {kind} to user",
            extra={"rollback_error": rollback_error},
        )
        self.kind = kind
        self.rollback_error = rollback_error
