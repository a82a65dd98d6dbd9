import sys
import inspect
import logging
from typing import Any, Optional

from loguru import logger

from floorball_cal.config.settings import settings


def quiet_transport_filter(record: dict[str, Any]) -> bool:
    """Drop per-request debug chatter from httpx/httpcore unless we run at DEBUG."""
    if settings.log_level == "DEBUG":
        return True
    name = record.get("name") or ""
    if name.startswith(("httpx", "httpcore")):
        return record["level"].no >= logger.level("WARNING").no
    return True


class InterceptHandler(logging.Handler):
    """Routes standard logging records (httpx, httpcore) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        # Keep the stdlib logger name so filters can match on "httpx"
        logger.patch(
            lambda loguru_record: loguru_record.update(name=record.name)
        ).opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: Optional[str] = None) -> None:
    """Configures Loguru logger based on application settings."""
    logger.remove()  # Remove default handler

    log_level = (level or settings.log_level).upper()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=True,
        filter=quiet_transport_filter,
    )

    logger.debug(f"Logging initialized with level: {log_level}")

    # Intercept standard logging messages (httpx logs through the stdlib)
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.debug("Standard logging intercepted.")
