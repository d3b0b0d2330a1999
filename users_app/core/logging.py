import logging
import logging.config

TEXT_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s (request_id=%(request_id)s)"
JSON_FORMAT = (
    '{"timestamp":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s",'
    '"message":"%(message)s","module":"%(module)s","func":"%(funcName)s","line":"%(lineno)d","request_id":"%(request_id)s"}'
)


class RequestIdFilter(logging.Filter):
    """Гарантирует наличие request_id у каждой записи, чтобы формат не падал."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    is_json = str(json_format).lower() == "true"
    fmt = JSON_FORMAT if is_json else TEXT_FORMAT

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {"request_id": {"()": RequestIdFilter}},
            "formatters": {"default": {"format": fmt}},
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["request_id"],
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level.upper(),
            },
            # uvicorn пишет через свои логгеры, пускаем их в общий хендлер
            "loggers": {
                "uvicorn": {"handlers": [], "propagate": True},
                "uvicorn.access": {"handlers": [], "propagate": True},
            },
        }
    )
