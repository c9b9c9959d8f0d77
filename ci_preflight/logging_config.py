"""Logging configuration for the CI pre-flight validator."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional
import json
from datetime import datetime

from ci_preflight.config import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, get_env
from ci_preflight.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_RESERVED_ATTRS = frozenset(
    (
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "getMessage",
        "exc_info",
        "exc_text",
        "stack_info",
        "taskName",
    )
)


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging in CI."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Add extra fields from record
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_entry[key] = value

        return json.dumps(log_entry, separators=(",", ":"), default=str)


def setup_logging(
    level: Optional[str] = None,
    log_dir: Optional[str] = None,
    enable_console: bool = True,
    json_format: Optional[bool] = None,
    max_file_size_mb: int = 10,
    backup_count: int = 3,
) -> None:
    """
    Setup logging for the pre-flight validator.

    The report itself goes to stdout, so console logs are written to stderr.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for a rotating log file (disabled when None and
            PREFLIGHT_LOG_DIR is unset)
        enable_console: Enable console logging
        json_format: Use JSON format for logs (defaults to PREFLIGHT_LOG_JSON)
        max_file_size_mb: Maximum size per log file in MB
        backup_count: Number of backup files to keep
    """
    if level is None:
        level = get_env(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    level = _validate_level(level, ENV_LOG_LEVEL)

    if json_format is None:
        json_format = get_env("PREFLIGHT_LOG_JSON", "").lower() in ("1", "true")

    if log_dir is None:
        log_dir = get_env("PREFLIGHT_LOG_DIR")

    root_logger = logging.getLogger("ci_preflight")
    root_logger.setLevel(getattr(logging, level))
    root_logger.handlers.clear()
    root_logger.propagate = False

    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s "
            "[%(filename)s:%(lineno)d]"
        )

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level))
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path / "ci_preflight.log",
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, level))
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _setup_module_loggers()


def _validate_level(level: str, source: str) -> str:
    """Normalise a level name, raising ConfigurationError for unknown names."""
    name = level.strip().upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level {level!r} from {source} (expected one of {', '.join(LOG_LEVELS)})"
        )
    return name


def _setup_module_loggers() -> None:
    """Apply per-module level overrides, e.g. PREFLIGHT_LOG_LEVEL_PROCESS=DEBUG."""
    for logger_name in ["checks", "process", "runner"]:
        env_var = f"{ENV_LOG_LEVEL}_{logger_name.upper()}"
        level = get_env(env_var)
        if level:
            logger = logging.getLogger(f"ci_preflight.{logger_name}")
            logger.setLevel(getattr(logging, _validate_level(level, env_var)))


def get_logger(name: str) -> logging.Logger:
    """Get logger for specific module."""
    if not name.startswith("ci_preflight."):
        name = f"ci_preflight.{name}"
    return logging.getLogger(name)
