"""Error taxonomy shared by services, routers and exception handlers."""

from enum import Enum


class ErrorKind(str, Enum):
    """Error kinds exposed to API clients. The value is the ``error`` code string."""

    VALIDATION = "VALIDATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    NOT_FOUND = "NOT_FOUND"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    INTERNAL = "INTERNAL_ERROR"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INVALID_TOKEN: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.AUTHENTICATION_ERROR: 500,
    ErrorKind.INTERNAL: 500,
}


class ApiError(Exception):
    """Error rendered as ``{success: false, message, error, errors?}``."""

    def __init__(self, kind: ErrorKind, message: str, errors: dict[str, list[str]] | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.errors = errors

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    def to_dict(self) -> dict:
        body: dict = {"success": False, "message": self.message, "error": self.kind.value}
        if self.errors is not None:
            body["errors"] = self.errors
        return body

    @classmethod
    def validation(
        cls, errors: dict[str, list[str]], message: str = "Los datos proporcionados no son válidos"
    ) -> "ApiError":
        return cls(ErrorKind.VALIDATION, message, errors)

    @classmethod
    def not_found(cls, message: str) -> "ApiError":
        return cls(ErrorKind.NOT_FOUND, message)
