import logging
from users_app.domain.interfaces import UserRepository
from users_app.domain.models import User
from users_app.domain.commands import CreateUserCommand, FindUserCommand


class UserService:
    """
    Сервис уровня приложения. Не знает о веб/HTTP, orchestrator дергает его хендлеры.
    Зависит от абстракции репозитория, конкретика подставляется DI-контейнером.
    Ошибки репозитория пробрасываются без изменений.
    """

    def __init__(self, user_repo: UserRepository, logger: logging.Logger):
        self._user_repo = user_repo
        self._log = logger.getChild("UserService")

    def handle_find_user(self, cmd: FindUserCommand) -> User:
        self._log.info("Handling FindUserCommand", extra={"request_id": getattr(cmd, "request_id", "-")})
        return self._user_repo.find(cmd.user_id)

    def handle_create_user(self, cmd: CreateUserCommand) -> User:
        self._log.info("Handling CreateUserCommand", extra={"request_id": getattr(cmd, "request_id", "-")})
        return self._user_repo.create(cmd)
