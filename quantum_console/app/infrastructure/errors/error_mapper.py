from quantum_console.clients.quantum_sdk.http_client import APIError


class ErrorMapper:
    _KNOWN_CODES = {
        "INVALID_TOKEN": ("Your session has expired.", "Log in again to continue."),
        "INVALID_CREDENTIALS": ("Email or password is incorrect.", "Check your credentials and try again."),
        "PERMISSION_DENIED": ("You are not allowed to perform this action.", "Ask an administrator for access."),
        "REVIEWER_ROLE_REQUIRED": ("Only DMJ accounts can write reviews.", "Use a DMJ account to manage reviews."),
        "RESOURCE_NOT_FOUND": ("The requested item no longer exists.", "Refresh the list and try again."),
        "CATEGORY_IN_USE": ("This category still has products.", "Move or delete its products first."),
        "CATEGORY_ALREADY_EXISTS": ("A category with this name already exists.", "Pick a different name."),
        "EMAIL_ALREADY_EXISTS": ("This email is already registered.", "Use a different email address."),
        "CONSTRAINT_VIOLATION": ("The item is referenced by other records.", "Remove the dependent records first."),
        "CHATBOT_UNAVAILABLE": ("The assistant is not reachable right now.", "Try your question again later."),
        "VALIDATION_ERROR": ("The request contains invalid fields.", "Check the required fields and their format."),
        "TIMEOUT_ERROR": ("The server took too long to respond.", "Retry in a few seconds."),
        "NETWORK_ERROR": ("The API is not reachable.", "Check your network connection and retry."),
        "INTERNAL_ERROR": ("Internal error while processing the request.", "Retry and share the trace_id if it persists."),
    }

    _STATUS_HINTS = {
        401: ("INVALID_TOKEN", "Your session has expired.", "Log in again to continue."),
        403: ("PERMISSION_DENIED", "You are not allowed to perform this action.", "Ask an administrator for access."),
        422: ("VALIDATION_ERROR", "The request contains invalid fields.", "Check the required fields and their format."),
        500: ("INTERNAL_ERROR", "Internal error in the service.", "Retry and share the trace_id if it persists."),
    }

    @classmethod
    def to_payload(cls, error: Exception) -> dict:
        if isinstance(error, APIError):
            known = cls._KNOWN_CODES.get(error.code)
            status_code = error.status_code or -1
            mapped = None if known else cls._STATUS_HINTS.get(status_code)
            if mapped is None and known is None and status_code >= 500:
                mapped = cls._STATUS_HINTS[500]
            if mapped is not None:
                code, message, suggestion = mapped
            else:
                message, suggestion = known or (error.message, "Contact support with the trace_id.")
                code = error.code
            return {
                "code": code,
                "message": message,
                "details": error.details,
                "trace_id": error.trace_id,
                "suggestion": suggestion,
            }
        return {
            "code": "INTERNAL_ERROR",
            "message": str(error),
            "details": None,
            "trace_id": None,
            "suggestion": "Retry and report the incident if it persists.",
        }

    @classmethod
    def to_display_message(cls, error: Exception) -> str:
        payload = cls.to_payload(error)
        return f"[{payload['code']}] {payload['message']} (trace_id={payload['trace_id']})"

    @staticmethod
    def requires_login(error: Exception) -> bool:
        return isinstance(error, APIError) and error.status_code == 401
