"""Tests for OVH API client configuration."""

import os
from unittest.mock import Mock, patch

from ovh_payment_method.adapters.ovh.client import OvhClientConfig


def _env(**overrides):
  values = {
    "OVH_API_BASE_URL": "https://eu.api.ovh.com/1.0",
    "OVH_API_TIMEOUT": 30.0,
    "OVH_APPLICATION_KEY": "",
    "OVH_APPLICATION_SECRET": "",
    "OVH_CONSUMER_KEY": "",
    "OVH_API_MAX_CONNECTIONS": 20,
    "OVH_API_VERIFY_SSL": True,
  }
  values.update(overrides)
  return Mock(**values)


class TestOvhClientConfig:
  """Test cases for OvhClientConfig."""

  def test_default_configuration(self):
    config = OvhClientConfig()

    assert config.base_url == ""
    assert config.timeout == 30.0
    assert config.max_connections == 20
    assert config.max_keepalive_connections == 10
    assert config.keepalive_expiry == 5.0
    assert config.headers == {}
    assert config.verify_ssl is True
    assert config.has_credentials is False

  def test_has_credentials_requires_all_three(self):
    assert OvhClientConfig(application_key="ak", application_secret="as").has_credentials is False
    assert OvhClientConfig(
      application_key="ak", application_secret="as", consumer_key="ck"
    ).has_credentials is True

  def test_from_env_uses_application_settings(self):
    with patch(
      "ovh_payment_method.adapters.ovh.client.config.env",
      _env(OVH_API_BASE_URL="https://ca.api.ovh.com/1.0", OVH_APPLICATION_KEY="ak"),
    ):
      with patch.dict(os.environ, {}, clear=True):
        config = OvhClientConfig.from_env()

    assert config.base_url == "https://ca.api.ovh.com/1.0"
    assert config.application_key == "ak"
    assert config.timeout == 30.0
    assert config.verify_ssl is True

  def test_from_env_verify_ssl_setting(self):
    with patch(
      "ovh_payment_method.adapters.ovh.client.config.env",
      _env(OVH_API_VERIFY_SSL=False),
    ):
      with patch.dict(os.environ, {}, clear=True):
        config = OvhClientConfig.from_env()

    assert config.verify_ssl is False

  def test_from_env_prefixed_overrides(self):
    env_vars = {
      "OVH_CLIENT_BASE_URL": "https://api.us.ovhcloud.com/1.0",
      "OVH_CLIENT_TIMEOUT": "5.5",
      "OVH_CLIENT_MAX_CONNECTIONS": "4",
      "OVH_CLIENT_VERIFY_SSL": "false",
      "OVH_CLIENT_CONSUMER_KEY": "ck",
    }
    with patch("ovh_payment_method.adapters.ovh.client.config.env", _env()):
      with patch.dict(os.environ, env_vars, clear=True):
        config = OvhClientConfig.from_env()

    assert config.base_url == "https://api.us.ovhcloud.com/1.0"
    assert config.timeout == 5.5
    assert config.max_connections == 4
    assert config.verify_ssl is False
    assert config.consumer_key == "ck"

  def test_with_overrides_returns_new_config(self):
    config = OvhClientConfig(base_url="https://eu.api.ovh.com/1.0", headers={"X-A": "1"})

    new_config = config.with_overrides(timeout=10.0)

    assert new_config is not config
    assert new_config.timeout == 10.0
    assert new_config.base_url == "https://eu.api.ovh.com/1.0"
    assert new_config.headers == {"X-A": "1"}
    assert new_config.headers is not config.headers
    assert config.timeout == 30.0
