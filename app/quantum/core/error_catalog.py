from dataclasses import dataclass
from fastapi import status


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str
    status_code: int


class ErrorCatalog:
    INVALID_TOKEN = ErrorDefinition("INVALID_TOKEN", "Invalid token", status.HTTP_401_UNAUTHORIZED)
    INVALID_CREDENTIALS = ErrorDefinition(
        "INVALID_CREDENTIALS",
        "Invalid credentials",
        status.HTTP_401_UNAUTHORIZED,
    )
    PERMISSION_DENIED = ErrorDefinition(
        "PERMISSION_DENIED",
        "Permission denied",
        status.HTTP_403_FORBIDDEN,
    )
    REVIEWER_ROLE_REQUIRED = ErrorDefinition(
        "REVIEWER_ROLE_REQUIRED",
        "Only DMJ accounts can write reviews",
        status.HTTP_403_FORBIDDEN,
    )
    RESOURCE_NOT_FOUND = ErrorDefinition(
        "RESOURCE_NOT_FOUND",
        "Resource not found",
        status.HTTP_404_NOT_FOUND,
    )
    CATEGORY_IN_USE = ErrorDefinition(
        "CATEGORY_IN_USE",
        "Category is in use by products",
        status.HTTP_409_CONFLICT,
    )
    CATEGORY_ALREADY_EXISTS = ErrorDefinition(
        "CATEGORY_ALREADY_EXISTS",
        "Category name already exists",
        status.HTTP_409_CONFLICT,
    )
    EMAIL_ALREADY_EXISTS = ErrorDefinition(
        "EMAIL_ALREADY_EXISTS",
        "Email already registered",
        status.HTTP_409_CONFLICT,
    )
    DB_UNAVAILABLE = ErrorDefinition(
        "DB_UNAVAILABLE",
        "Database unavailable",
        status.HTTP_503_SERVICE_UNAVAILABLE,
    )
    CONSTRAINT_VIOLATION = ErrorDefinition(
        "CONSTRAINT_VIOLATION",
        "Resource is referenced by other records",
        status.HTTP_409_CONFLICT,
    )
    CHATBOT_UNAVAILABLE = ErrorDefinition(
        "CHATBOT_UNAVAILABLE",
        "Chatbot service unavailable",
        status.HTTP_502_BAD_GATEWAY,
    )
    VALIDATION_ERROR = ErrorDefinition(
        "VALIDATION_ERROR",
        "Validation error",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
    )
    INTERNAL_ERROR = ErrorDefinition(
        "INTERNAL_ERROR",
        "Internal server error",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class AppError(Exception):
    def __init__(self, error: ErrorDefinition, details: object | None = None):
        self.error = error
        self.details = details
        super().__init__(error.message)
