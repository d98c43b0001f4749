"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns.
These simplify error raising across services and repositories by
eliminating the need to specify status codes at each call site.

Usage:
    from portfolio.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("User with username: jdoe")
    raise DuplicateError("An LSI for github already exists.")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    The given subject is suffixed with " not found." so call sites only
    name what was looked up (e.g. "Project detail for project: blog").

    Args:
        subject: 찾지 못한 대상 설명 (Description of the missing resource)
    """

    def __init__(self, subject: str = "Resource") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"{subject} not found.")


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when attempting to create a resource that already exists
    (e.g. a second LSI for the same platform, a duplicate project name).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when authentication is missing, invalid, or expired, and when an
    action is attempted on behalf of a user that is not registered.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. taken email or username, incorrect login credentials).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnexpectedError(HTTPException):
    """500 Internal Server Error 예외 — 예상치 못한 실패를 감쌀 때 사용.

    500 Internal Server Error exception.
    Wraps an unexpected failure from a third-party call (SMTP, database)
    together with where it happened, so the log line carries the origin
    while the client only sees a generic message.

    Args:
        detail: 내부 오류 메시지 (Internal error message, logged not returned)
        origin: 오류 발생 위치 (Where the error was raised, e.g. "LsiService.notify_on_lsi_milestone")
    """

    def __init__(self, detail: str, origin: str) -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
        self.origin: str = origin

    def __str__(self) -> str:
        cause = f": {self.__cause__}" if self.__cause__ else ""
        return f"{self.detail} (origin: {self.origin}){cause}"
