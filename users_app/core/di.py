from __future__ import annotations
from typing import Optional
import logging

from users_app.core.config import AppSettings
from users_app.domain.interfaces import UserRepository
from users_app.infrastructure.repositories.user_repository_example import ExampleUserRepository
from users_app.application.services import UserService
from users_app.application.orchestrator import CommandBus
from users_app.domain.commands import CreateUserCommand, FindUserCommand


class AppContainer:
    """
    Собирает граф зависимостей один раз на приложение.
    Репозиторий можно подменить через конструктор (например, в тестах).
    """

    def __init__(self, settings: AppSettings, user_repository: Optional[UserRepository] = None):
        self._settings = settings
        self._logger = logging.getLogger("users_app")

        self._user_repo = user_repository
        self._user_service: Optional[UserService] = None
        self._bus: Optional[CommandBus] = None

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def user_repository(self) -> UserRepository:
        if self._user_repo is None:
            self._user_repo = ExampleUserRepository(logger=self._logger)
        return self._user_repo

    @property
    def user_service(self) -> UserService:
        if self._user_service is None:
            self._user_service = UserService(user_repo=self.user_repository, logger=self._logger)
        return self._user_service

    @property
    def command_bus(self) -> CommandBus:
        if self._bus is None:
            self._bus = CommandBus(logger=self._logger)
            self._bus.register(FindUserCommand, self.user_service.handle_find_user)
            self._bus.register(CreateUserCommand, self.user_service.handle_create_user)
        return self._bus
