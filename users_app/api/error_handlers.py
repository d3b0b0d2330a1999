"""
Глобальные обработчики ошибок.

- UserRepositoryError -> статус и сообщение из фиксированной таблицы, тело {"error": ...}
- RequestValidationError (ошибки декодирования path/body) -> 400/422, до репозитория не доходят
- Exception -> 500 без внутренних деталей
"""
import logging
from typing import Any, Dict, List, Tuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_app.domain.errors import UserRepoErrorKind, UserRepositoryError

logger = logging.getLogger(__name__)

USER_REPO_ERRORS: Dict[UserRepoErrorKind, Tuple[int, str]] = {
    UserRepoErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "user not found"),
    UserRepoErrorKind.INVALID_USERNAME: (status.HTTP_400_BAD_REQUEST, "invalid username"),
}

_missing = set(UserRepoErrorKind) - set(USER_REPO_ERRORS)
if _missing:
    raise RuntimeError(f"No HTTP mapping for user repository errors: {sorted(k.name for k in _missing)}")


def _request_id(request: Request) -> str:
    # middleware мог не успеть выставить state, тогда берем заголовок как есть
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id", "-")


def user_repo_error_response(exc: UserRepositoryError) -> Tuple[int, Dict[str, str]]:
    status_code, message = USER_REPO_ERRORS[exc.kind]
    return status_code, {"error": message}


def classify_validation_error(errors: List[Dict[str, Any]]) -> Tuple[int, str]:
    """Определяет статус и сообщение для ошибки декодирования запроса."""
    for err in errors:
        loc = err.get("loc") or ()
        if loc and loc[0] == "path":
            return status.HTTP_400_BAD_REQUEST, "invalid user id"
    for err in errors:
        if err.get("type") == "json_invalid":
            return status.HTTP_400_BAD_REQUEST, "malformed JSON body"
    return 422, "invalid request body"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(UserRepositoryError)
    async def user_repo_error_handler(request: Request, exc: UserRepositoryError):
        logger.debug(
            "AppError into response %r on %s",
            exc,
            request.url.path,
            extra={"request_id": _request_id(request)},
        )
        status_code, body = user_repo_error_response(exc)
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = list(exc.errors())
        logger.warning(
            "Request decoding failed on %s: %s",
            request.url.path,
            errors,
            extra={"request_id": _request_id(request)},
        )
        status_code, message = classify_validation_error(errors)
        details = [
            {
                "field": ".".join(str(part) for part in e.get("loc", ())),
                "message": e.get("msg", ""),
                "type": e.get("type", ""),
            }
            for e in errors
        ]
        return JSONResponse(status_code=status_code, content={"error": message, "details": details})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s: %s",
            request.url.path,
            exc,
            exc_info=True,
            extra={"request_id": _request_id(request)},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal server error"},
            headers={"x-request-id": _request_id(request)},
        )
