"""
Logging setup for econobook.

The interactive menus own the terminal, so application logs go to a file
(APP_LOG_FILE) and every provider call is also recorded as one JSON object per
line in API_LOG_FILE through the "econobook.api" logger.
"""

import json
import logging
import traceback
from datetime import datetime, timezone

from econobook.libs.constants import API_LOG_FILE, APP_LOG_FILE, LOG_LEVEL

API_LOGGER_NAME = "econobook.api"

api_logger = logging.getLogger(API_LOGGER_NAME)

# Track if logging has been set up to avoid duplicate handlers
_logging_configured = False


def configure_logging(level: str = LOG_LEVEL, app_log_file: str = APP_LOG_FILE,
                      api_log_file: str = API_LOG_FILE) -> None:
    """Route application logs to a file and attach the JSON-lines handler for API calls.

    Idempotent - safe to call multiple times.
    """
    global _logging_configured
    if _logging_configured:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        filename=app_log_file,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    api_handler = logging.FileHandler(api_log_file, encoding="utf-8")
    api_handler.setFormatter(logging.Formatter("%(message)s"))
    api_logger.addHandler(api_handler)
    api_logger.setLevel(logging.INFO)
    api_logger.propagate = False

    _logging_configured = True


def _timestamp():
    return datetime.now(timezone.utc).isoformat()


def _emit(level, record):
    api_logger.log(level, json.dumps(record, ensure_ascii=False, default=str))


def log_request(service: str, details: dict) -> None:
    _emit(logging.INFO, {
        "type": "request",
        "service": service,
        "details": {"timestamp": _timestamp(), **details},
    })


def log_response(service: str, details: dict) -> None:
    _emit(logging.INFO, {
        "type": "response",
        "service": service,
        "details": {"timestamp": _timestamp(), **details},
    })


def log_error(service: str, error: BaseException, request_details: dict = None) -> None:
    _emit(logging.ERROR, {
        "type": "error",
        "service": service,
        "details": {
            "timestamp": _timestamp(),
            "error": {
                "message": str(error),
                "name": type(error).__name__,
                "stack": "".join(traceback.format_exception(type(error), error, error.__traceback__)),
            },
            "request": request_details,
        },
    })
