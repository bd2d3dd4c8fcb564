"""
OVH API Client Configuration.

Centralized configuration for the OVH API client.
"""

import os
from typing import Dict, Any
from dataclasses import dataclass, field

from ovh_payment_method.config import DEFAULT_HTTP_TIMEOUT, env


@dataclass
class OvhClientConfig:
  """Configuration for the OVH API client."""

  # Connection settings
  base_url: str = ""
  timeout: float = DEFAULT_HTTP_TIMEOUT

  # Credentials (requests are signed only when all three are set)
  application_key: str = ""
  application_secret: str = ""
  consumer_key: str = ""

  # Connection pool settings
  max_connections: int = 20
  max_keepalive_connections: int = 10
  keepalive_expiry: float = 5.0

  # Request settings
  headers: Dict[str, str] = field(default_factory=dict)
  verify_ssl: bool = True

  @property
  def has_credentials(self) -> bool:
    return bool(self.application_key and self.application_secret and self.consumer_key)

  @classmethod
  def from_env(cls, prefix: str = "OVH_CLIENT_") -> "OvhClientConfig":
    """
    Create configuration from environment variables.

    Application-wide OVH settings are used as defaults, prefixed variables
    override them.

    Args:
        prefix: Environment variable prefix

    Returns:
        OvhClientConfig instance
    """
    config = cls(
      base_url=env.OVH_API_BASE_URL,
      timeout=env.OVH_API_TIMEOUT,
      application_key=env.OVH_APPLICATION_KEY,
      application_secret=env.OVH_APPLICATION_SECRET,
      consumer_key=env.OVH_CONSUMER_KEY,
      max_connections=env.OVH_API_MAX_CONNECTIONS,
      verify_ssl=env.OVH_API_VERIFY_SSL,
    )

    # Map of config attribute to env var suffix
    env_mappings = {
      "base_url": "BASE_URL",
      "timeout": "TIMEOUT",
      "application_key": "APPLICATION_KEY",
      "application_secret": "APPLICATION_SECRET",
      "consumer_key": "CONSUMER_KEY",
      "max_connections": "MAX_CONNECTIONS",
      "max_keepalive_connections": "MAX_KEEPALIVE_CONNECTIONS",
      "keepalive_expiry": "KEEPALIVE_EXPIRY",
      "verify_ssl": "VERIFY_SSL",
    }

    for attr, env_suffix in env_mappings.items():
      env_var = prefix + env_suffix
      value = os.environ.get(env_var)

      if value is not None:
        attr_type = type(getattr(config, attr))
        if attr_type is bool:
          setattr(config, attr, value.lower() in ("true", "1", "yes"))
        elif attr_type in (int, float):
          setattr(config, attr, attr_type(value))
        else:
          setattr(config, attr, value)

    return config

  def with_overrides(self, **kwargs: Any) -> "OvhClientConfig":
    """
    Create a new config with overridden values.

    Args:
        **kwargs: Values to override

    Returns:
        New OvhClientConfig instance
    """
    config_dict: Dict[str, Any] = {
      "base_url": self.base_url,
      "timeout": self.timeout,
      "application_key": self.application_key,
      "application_secret": self.application_secret,
      "consumer_key": self.consumer_key,
      "max_connections": self.max_connections,
      "max_keepalive_connections": self.max_keepalive_connections,
      "keepalive_expiry": self.keepalive_expiry,
      "headers": self.headers.copy(),
      "verify_ssl": self.verify_ssl,
    }
    config_dict.update(kwargs)
    return OvhClientConfig(**config_dict)
