from fastapi import Request
from users_app.core.di import AppContainer
from users_app.application.orchestrator import CommandBus


def get_container(request: Request) -> AppContainer:
    return request.app.state.container  # type: ignore[attr-defined]


def get_command_bus(request: Request) -> CommandBus:
    return get_container(request).command_bus


def get_request_id(request: Request) -> str:
    # Выставляется middleware в main.create_app
    return getattr(request.state, "request_id", "-")
