"""Core infrastructure: settings, logging, exceptions, numeric helpers."""

from .config import Settings, get_settings, settings
from .exceptions import (
    AppException,
    BadRequestError,
    NotFoundError,
    register_exception_handlers,
)
from .logging import get_logger, setup_logging
from .random_source import create_rng


__all__ = [
    "AppException",
    "BadRequestError",
    "NotFoundError",
    "Settings",
    "create_rng",
    "get_logger",
    "get_settings",
    "register_exception_handlers",
    "settings",
    "setup_logging",
]
