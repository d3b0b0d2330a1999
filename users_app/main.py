from typing import Optional
import logging
import uuid

import uvicorn
from fastapi import FastAPI, Request

from users_app.core.config import AppSettings
from users_app.core.logging import setup_logging
from users_app.core.di import AppContainer
from users_app.api.routes import router as api_router
from users_app.api.error_handlers import register_error_handlers
from users_app.domain.interfaces import UserRepository


def create_app(settings: Optional[AppSettings] = None, user_repository: Optional[UserRepository] = None) -> FastAPI:
    settings = settings or AppSettings()
    setup_logging(level=settings.log_level, json_format=settings.log_json)

    app = FastAPI(title=settings.app_name)

    container = AppContainer(settings=settings, user_repository=user_repository)
    # Собираем граф сразу, чтобы параллельные запросы не строили его наперегонки
    container.command_bus
    app.state.container = container  # type: ignore[attr-defined]

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
        logger = logging.getLogger("users_app.access")
        request.state.request_id = request_id  # type: ignore[attr-defined]
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            logger.debug(
                "%s %s -> %d",
                request.method,
                request.url.path,
                status_code,
                extra={"request_id": request_id},
            )
        response.headers["x-request-id"] = request_id
        return response

    register_error_handlers(app)
    app.include_router(api_router)

    return app


def run() -> None:
    settings = AppSettings()
    app = create_app(settings)
    logging.getLogger("users_app").debug("listening on %s:%d", settings.app_host, settings.app_port)
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_config=None)


app = create_app()


if __name__ == "__main__":
    run()
