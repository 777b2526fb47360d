"""Custom exceptions for the application."""


class ApiException(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnauthorizedError(ApiException):
    """Unauthorized access exception."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(401, message)


class ExternalServiceError(ApiException):
    """External service (GitHub, raw content host, LLM) error."""

    def __init__(self, service: str, message: str) -> None:
        self.service = service
        super().__init__(502, f"{service} error: {message}")


class ChatCompletionError(ExternalServiceError):
    """Chat completion request failed."""

    def __init__(self, message: str) -> None:
        super().__init__("OpenAI", message)


class SignatureVerificationError(UnauthorizedError):
    """Webhook signature verification failed."""

    def __init__(self, source: str = "webhook") -> None:
        super().__init__(f"Invalid {source} signature")
