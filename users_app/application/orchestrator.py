from typing import Any, Callable, Dict, Type, TypeVar
import logging
from users_app.domain.commands import Command
from users_app.domain.errors import AppError

C = TypeVar("C", bound=Command)


class CommandBus:
    """
    Регистрирует по одному хендлеру на тип команды и исполняет команды по точному типу.
    Роуты знают только о командах, конкретный сервис подставляется при регистрации.
    Ошибки хендлера не перехватываются: они логируются и уходят наверх как есть.
    """

    def __init__(self, logger: logging.Logger):
        self._handlers: Dict[Type[Command], Callable[[Any], Any]] = {}
        self._log = logger.getChild("CommandBus")

    def register(self, command_type: Type[C], handler: Callable[[C], Any]) -> None:
        if command_type in self._handlers:
            raise ValueError(f"Handler for {command_type.__name__} already registered")
        self._handlers[command_type] = handler

    def execute(self, command: C, *, request_id: str | None = None) -> Any:
        name = type(command).__name__
        handler = self._handlers.get(type(command))
        if handler is None:
            raise ValueError(f"No handler registered for command {name}")
        extra = {"request_id": request_id or "-"}
        setattr(command, "request_id", request_id or "-")
        self._log.debug("Executing %s", name, extra=extra)
        try:
            result = handler(command)
        except AppError as e:
            self._log.debug("%s failed: %r", name, e, extra=extra)
            raise
        self._log.debug("%s succeeded", name, extra=extra)
        return result
