"""
Structured logging configuration for Chirper.

``build_logging`` produces the ``dictConfig`` dictionary used by every
settings module: console output, rotating log files (including a dedicated
``notifications.log`` for mail delivery), and per-app loggers. Every handler
runs records through ``SensitiveDataFilter``.
"""

import logging
import re
from pathlib import Path

# Project root, not services/
BASE_DIR = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = BASE_DIR / "logs"

APP_LOGGERS = ("accounts", "chirps", "services")
FRAMEWORK_LOGGERS = ("django", "celery", "channels", "daphne")

MB = 1024 * 1024


class SensitiveDataFilter(logging.Filter):
    """
    Logging filter that redacts sensitive information from log messages.

    Passwords, tokens and secrets are replaced with redacted placeholders.
    Email addresses are left intact: delivery logs are keyed on them.
    """

    def __init__(self):
        super().__init__()
        self.patterns = [
            (re.compile(r"(bearer\s+)[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE), r"\1[REDACTED_TOKEN]"),
            (
                re.compile(
                    r"((?:access|csrf|session)[_-]?token[\"']?\s*[:=]\s*[\"']?)([^\"'\s,}]+)",
                    re.IGNORECASE,
                ),
                r"\1[REDACTED_TOKEN]",
            ),
            (
                re.compile(r"(password[0-9]?[\"']?\s*[:=]\s*[\"']?)([^\"'\s,}]+)", re.IGNORECASE),
                r"\1[REDACTED_PASSWORD]",
            ),
            (
                re.compile(r"(secret[_-]?key[\"']?\s*[:=]\s*[\"']?)([^\"'\s,}]+)", re.IGNORECASE),
                r"\1[REDACTED_SECRET]",
            ),
            (
                re.compile(r"(api[_-]?key[\"']?\s*[:=]\s*[\"']?)([^\"'\s,}]+)", re.IGNORECASE),
                r"\1[REDACTED_API_KEY]",
            ),
        ]

    def _redact(self, value: str) -> str:
        for pattern, replacement in self.patterns:
            value = pattern.sub(replacement, value)
        return value

    def filter(self, record):
        """
        Redact sensitive information in the record's message and string args.

        Returns:
            bool: Always True; records are rewritten, never suppressed
        """
        if hasattr(record, "msg"):
            record.msg = self._redact(str(record.msg))

        if getattr(record, "args", None):
            if isinstance(record.args, dict):
                record.args = {
                    key: self._redact(value) if isinstance(value, str) else value
                    for key, value in record.args.items()
                }
            elif isinstance(record.args, (list, tuple)):
                filtered_args = [
                    self._redact(arg) if isinstance(arg, str) else arg for arg in record.args
                ]
                record.args = (
                    tuple(filtered_args) if isinstance(record.args, tuple) else filtered_args
                )

        return True


def _rotating_file(path: Path, level: str, max_mb: int, backups: int) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": "structured",
        "filename": path,
        "maxBytes": max_mb * MB,
        "backupCount": backups,
        "delay": True,
        "filters": ["sensitive_data"],
    }


def build_logging(
    log_dir: Path | None = LOGS_DIR,
    level: str = "INFO",
    console_format: str = "console_dev",
    max_mb: int = 10,
    backups: int = 5,
    mail_admins: bool = False,
) -> dict:
    """
    Build a ``dictConfig`` dictionary.

    Args:
        log_dir: Directory for rotating log files; None logs to the console only
        level: Level for the application loggers
        console_format: "console_dev" (timestamps) or "console_plain" (for journald/containers)
        max_mb: Size of each log file before it rotates
        backups: Rotated files kept per log
        mail_admins: Also email ERROR records to settings.ADMINS
    """
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": console_format,
            "filters": ["sensitive_data"],
        },
    }
    app_handlers = ["console"]
    error_handlers = ["console"]

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers["file_structured"] = _rotating_file(
            log_dir / "application.log", "DEBUG", max_mb, backups
        )
        handlers["error_file"] = _rotating_file(log_dir / "errors.log", "ERROR", max_mb, backups)
        handlers["notifications_file"] = _rotating_file(
            log_dir / "notifications.log", "INFO", max_mb * 2, backups
        )
        app_handlers += ["file_structured", "error_file"]
        error_handlers += ["error_file"]

    if mail_admins:
        handlers["mail_admins"] = {
            "class": "django.utils.log.AdminEmailHandler",
            "level": "ERROR",
            "include_html": True,
            "filters": ["sensitive_data"],
        }
        app_handlers += ["mail_admins"]
        error_handlers += ["mail_admins"]

    loggers = {}
    for name in FRAMEWORK_LOGGERS:
        loggers[name] = {"handlers": list(app_handlers), "level": "INFO", "propagate": False}
    for name in APP_LOGGERS:
        loggers[name] = {"handlers": list(app_handlers), "level": level, "propagate": False}
    # Delivery outcomes also go to notifications.log
    if "notifications_file" in handlers:
        for name in ("chirps", "services.notifications"):
            loggers[name] = {
                "handlers": [*app_handlers, "notifications_file"],
                "level": level,
                "propagate": False,
            }
    loggers["django.request"] = {"handlers": error_handlers, "level": "ERROR", "propagate": False}
    loggers["django.security"] = {
        "handlers": error_handlers,
        "level": "WARNING",
        "propagate": False,
    }
    # DEBUG here prints every query, including the recipient cursor
    loggers["django.db.backends"] = {
        "handlers": ["console"],
        "level": "WARNING",
        "propagate": False,
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "sensitive_data": {"()": "services.core.logging.SensitiveDataFilter"},
        },
        "formatters": {
            "console_dev": {
                "format": "{asctime} {levelname:8} {name:20} {message}",
                "style": "{",
                "datefmt": "%H:%M:%S",
            },
            "console_plain": {"format": "[{levelname:8}] {name:30} {message}", "style": "{"},
            "structured": {
                "format": (
                    "{asctime} [{levelname:8}] {name:30} PID:{process:5} TID:{thread:8} {message}"
                ),
                "style": "{",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "root": {"handlers": list(app_handlers), "level": "WARNING"},
        "loggers": loggers,
    }


def get_development_logging():
    """Console plus ./logs, with the application loggers at DEBUG."""
    return build_logging(LOGS_DIR, level="DEBUG")


def get_logger(name: str):
    """
    Factory function for consistent logger creation.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
