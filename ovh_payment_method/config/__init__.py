"""
Centralized configuration package for the payment method adapter.

This package provides a single source of truth for all configuration settings,
including environment variables, market payment mean tables and IBAN rules.
"""

from .constants import (
  DEFAULT_HTTP_TIMEOUT,
  PaymentTypeConstants,
  RouteConstants,
  TranslationConstants,
)
from .env import EnvConfig, env
from .iban import IBAN_BIC_RULES
from .markets import AVAILABLE_PAYMENT_MEANS, MarketConfig, MarketTarget

__all__ = [
  "AVAILABLE_PAYMENT_MEANS",
  "DEFAULT_HTTP_TIMEOUT",
  # Environment exports
  "EnvConfig",
  "IBAN_BIC_RULES",
  # Market exports
  "MarketConfig",
  "MarketTarget",
  "PaymentTypeConstants",
  "RouteConstants",
  "TranslationConstants",
  "env",
]
