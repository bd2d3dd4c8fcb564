"""
Centralized environment variable configuration.

This module provides a single source of truth for all environment variables,
with type conversions, validation, and default values.

Organization:
- Helper functions for type-safe env var access
- Core application settings
- Payment method routing
- OVH API client settings
"""

import os
from typing import List

from .constants import DEFAULT_HTTP_TIMEOUT
from .markets import AVAILABLE_PAYMENT_MEANS


# ==========================================================================
# HELPER FUNCTIONS FOR TYPE-SAFE ENVIRONMENT VARIABLE ACCESS
# ==========================================================================


def get_int_env(key: str, default: int) -> int:
  """
  Get an integer environment variable with safe type conversion.

  Args:
      key: Environment variable name
      default: Default value if not set or invalid

  Returns:
      Integer value from environment or default
  """
  try:
    return int(os.getenv(key, str(default)))
  except (ValueError, TypeError):
    # Use print instead of logger to avoid circular import
    print(f"Warning: Invalid {key} value, using default: {default}")
    return default


def get_float_env(key: str, default: float) -> float:
  """
  Get a float environment variable with safe type conversion.

  Args:
      key: Environment variable name
      default: Default value if not set or invalid

  Returns:
      Float value from environment or default
  """
  try:
    return float(os.getenv(key, str(default)))
  except (ValueError, TypeError):
    print(f"Warning: Invalid {key} value, using default: {default}")
    return default


def get_bool_env(key: str, default: bool = False) -> bool:
  """
  Get a boolean environment variable.

  Args:
      key: Environment variable name
      default: Default value if not set

  Returns:
      Boolean value from environment or default
  """
  value = os.getenv(key, str(default)).lower()
  return value in ("true", "1", "yes", "on")


def get_str_env(key: str, default: str = "") -> str:
  """
  Get a string environment variable.

  Args:
      key: Environment variable name
      default: Default value if not set

  Returns:
      String value from environment or default
  """
  return os.getenv(key, default)


# ==========================================================================
# MAIN CONFIGURATION CLASS
# ==========================================================================


class EnvConfig:
  """
  Centralized environment variable configuration.

  Values are read once at import time. The market target read here is only a
  default: services receive their target as a constructor argument.
  """

  # ==========================================================================
  # CORE APPLICATION SETTINGS
  # ==========================================================================

  ENVIRONMENT = get_str_env("ENVIRONMENT", "dev")
  LOG_LEVEL = get_str_env("LOG_LEVEL", "INFO")

  # ==========================================================================
  # PAYMENT METHOD ROUTING
  # ==========================================================================

  # World part the adapter is built for (EU, CA or US)
  PAYMENT_METHOD_TARGET = get_str_env("PAYMENT_METHOD_TARGET", "EU").upper()

  # ==========================================================================
  # OVH API CLIENT
  # ==========================================================================

  OVH_API_BASE_URL = get_str_env("OVH_API_BASE_URL", "https://eu.api.ovh.com/1.0")
  OVH_API_TIMEOUT = get_float_env("OVH_API_TIMEOUT", float(DEFAULT_HTTP_TIMEOUT))
  OVH_APPLICATION_KEY = get_str_env("OVH_APPLICATION_KEY", "")
  OVH_APPLICATION_SECRET = get_str_env("OVH_APPLICATION_SECRET", "")
  OVH_CONSUMER_KEY = get_str_env("OVH_CONSUMER_KEY", "")
  OVH_API_MAX_CONNECTIONS = get_int_env("OVH_API_MAX_CONNECTIONS", 20)
  OVH_API_VERIFY_SSL = get_bool_env("OVH_API_VERIFY_SSL", True)

  @classmethod
  def is_production(cls) -> bool:
    """Check if running in production environment."""
    return cls.ENVIRONMENT.lower() in ["prod", "production"]

  @classmethod
  def is_development(cls) -> bool:
    """Check if running in development environment."""
    return cls.ENVIRONMENT.lower() in ["dev", "development", "local"]

  @classmethod
  def is_staging(cls) -> bool:
    """Check if running in staging environment."""
    return cls.ENVIRONMENT.lower() in ["staging", "stage"]

  @classmethod
  def is_test(cls) -> bool:
    """Check if running in test environment."""
    return cls.ENVIRONMENT.lower() in ["test", "testing"]

  @classmethod
  def validate(cls) -> List[str]:
    """
    Validate required environment variables.

    Returns:
        List of validation errors (empty if all valid)
    """
    errors = []

    if cls.PAYMENT_METHOD_TARGET not in AVAILABLE_PAYMENT_MEANS:
      errors.append(
        f"PAYMENT_METHOD_TARGET must be one of {', '.join(AVAILABLE_PAYMENT_MEANS)}"
      )

    if cls.is_production():
      required_vars = [
        ("OVH_APPLICATION_KEY", cls.OVH_APPLICATION_KEY),
        ("OVH_APPLICATION_SECRET", cls.OVH_APPLICATION_SECRET),
        ("OVH_CONSUMER_KEY", cls.OVH_CONSUMER_KEY),
      ]

      for var_name, var_value in required_vars:
        if not var_value:
          errors.append(f"{var_name} must be set in production")

    if cls.OVH_API_TIMEOUT <= 0:
      errors.append("OVH_API_TIMEOUT must be positive")

    return errors


env = EnvConfig()
