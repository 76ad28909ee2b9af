from fastapi import HTTPException


class AppError(HTTPException):
    """HTTPException carrying a stable, machine-checkable error kind."""

    status_code = 500
    kind = "internal"
    default_detail = "Internal error"

    def __init__(self, detail: str | None = None, headers: dict[str, str] | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )


class Unauthenticated(AppError):
    status_code = 401
    kind = "unauthenticated"
    default_detail = "Unauthorized access"

    def __init__(self, detail: str | None = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(AppError):
    status_code = 403
    kind = "forbidden"
    default_detail = "Forbidden"


class NotFound(AppError):
    status_code = 404
    kind = "not_found"
    default_detail = "Not found"


class InvalidInput(AppError):
    status_code = 400
    kind = "invalid_input"
    default_detail = "Invalid input"


class Conflict(AppError):
    status_code = 409
    kind = "conflict"
    default_detail = "Conflict"


class Internal(AppError):
    pass
