"""
Payment method adapter logging.

Exposes the package loggers:
- logger: main adapter logger (routing, strategies, normalizer)
- api_logger: OVH API client calls

Importing the package leaves the host logging configuration untouched: the
package logger only gets a NullHandler. Applications wanting the structured
output call ``setup_logging()`` themselves.
"""

import logging

from .config.logging import (
  setup_logging,
  get_logger,
  log_api_request,
  log_error,
)

logger = get_logger("ovh_payment_method")
logger.addHandler(logging.NullHandler())

api_logger = get_logger("ovh_payment_method.api")


__all__ = [
  "logger",
  "api_logger",
  "log_api_request",
  "log_error",
  "get_logger",
  "setup_logging",
]
