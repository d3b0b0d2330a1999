from enum import Enum


class AppError(Exception):
    """Базовая категория ошибок приложения, которые мапятся в HTTP-ответ."""


class UserRepoErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_USERNAME = "invalid_username"


class UserRepositoryError(AppError):
    """
    Ошибка репозитория пользователей. Закрытый набор видов (UserRepoErrorKind),
    без дополнительной нагрузки кроме самого вида.
    """

    def __init__(self, kind: UserRepoErrorKind):
        super().__init__(kind.value)
        self.kind = kind

    def __repr__(self) -> str:
        return f"UserRepositoryError({self.kind.name})"
