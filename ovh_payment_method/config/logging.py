"""
Structured Logging Configuration for the payment method adapter

Key Features:
- Structured JSON output outside development
- Automatic log level management by environment
- Error categorization helpers that keep log records searchable
"""

import json
import logging
import logging.config
import traceback
from datetime import datetime, timezone
from typing import Any

from ovh_payment_method.config.env import EnvConfig


class StructuredFormatter(logging.Formatter):
  """
  JSON formatter producing one searchable object per log record.

  - Timestamp in ISO format
  - Consistent field names for filtering
  - Hierarchical component/action structure
  """

  def format(self, record: logging.LogRecord) -> str:
    log_entry = {
      "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
      .isoformat()
      .replace("+00:00", "Z"),
      "level": record.levelname,
      "component": getattr(record, "component", record.name),
      "message": record.getMessage(),
    }

    if hasattr(record, "action"):
      log_entry["action"] = record.action

    # Routing context
    if hasattr(record, "target"):
      log_entry["target"] = record.target
    if hasattr(record, "payment_type"):
      log_entry["payment_type"] = record.payment_type

    if hasattr(record, "duration_ms"):
      log_entry["duration_ms"] = record.duration_ms
    if hasattr(record, "status_code"):
      log_entry["status_code"] = record.status_code

    if record.levelno >= logging.ERROR:
      if record.exc_info:
        log_entry["error"] = {
          "type": record.exc_info[0].__name__ if record.exc_info[0] else "Unknown",
          "message": str(record.exc_info[1]) if record.exc_info[1] else "",
          "traceback": traceback.format_exception(*record.exc_info),
        }

      if hasattr(record, "error_category"):
        log_entry["error_category"] = record.error_category

    if hasattr(record, "metadata"):
      log_entry["metadata"] = record.metadata

    return json.dumps(log_entry, default=str, separators=(",", ":"))


def get_logging_config(environment: str | None = None) -> dict[str, Any]:
  """
  Generate logging configuration based on environment.

  - prod: INFO level, structured output
  - staging: INFO level, structured output
  - test: WARNING level, minimal output for clean test runs
  - dev: DEBUG level, plain text (unless LOG_LEVEL overrides)
  """
  env = environment or EnvConfig.ENVIRONMENT

  log_level_override = getattr(EnvConfig, "LOG_LEVEL", None)

  if env in ("prod", "staging"):
    default_level = "INFO"
  elif env == "test":
    default_level = "WARNING"
  else:  # dev
    default_level = log_level_override or "DEBUG"

  return {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
      "structured": {
        "()": StructuredFormatter,
      },
      "simple": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "handlers": {
      "console": {
        "class": "logging.StreamHandler",
        "level": default_level,
        "formatter": "simple" if env == "dev" else "structured",
        "stream": "ext://sys.stdout",
      },
    },
    "loggers": {
      "ovh_payment_method": {
        "level": default_level,
        "handlers": ["console"],
        "propagate": False,
      },
      "ovh_payment_method.api": {
        "level": default_level,
        "handlers": ["console"],
        "propagate": False,
      },
    },
  }


def setup_logging(environment: str | None = None) -> None:
  """
  Initialize structured logging configuration.

  Opt-in: importing the package never calls it.
  """
  config = get_logging_config(environment)
  logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
  """Get a logger with structured logging capabilities."""
  return logging.getLogger(name)


def log_api_request(
  logger: logging.Logger,
  method: str,
  path: str,
  status_code: int,
  duration_ms: float,
) -> None:
  """Log an OVH API call with structured data."""
  logger.debug(
    f"{method} {path} - {status_code} ({duration_ms:.2f}ms)",
    extra={
      "component": "ovh_api",
      "action": "request_completed",
      "status_code": status_code,
      "duration_ms": duration_ms,
    },
  )


def log_error(
  logger: logging.Logger,
  error: Exception,
  component: str,
  action: str,
  error_category: str = "application",
  metadata: dict[str, Any] | None = None,
) -> None:
  """Log error with structured data for easy searching."""
  logger.error(
    f"Error in {component}.{action}: {error!s}",
    exc_info=True,
    extra={
      "component": component,
      "action": action,
      "error_category": error_category,
      "metadata": metadata or {},
    },
  )
