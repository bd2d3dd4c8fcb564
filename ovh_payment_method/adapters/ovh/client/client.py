"""
Asynchronous OVH API Client.

Thin httpx wrapper that signs requests with the application credentials and
converts error answers into the client exception hierarchy. Every call is a
single round trip: there is no retry and no caching.
"""

import hashlib
import json
import time
from typing import Any, Dict, Optional, Protocol

import httpx

from ovh_payment_method.logger import api_logger, log_api_request
from .config import OvhClientConfig
from .exceptions import (
  OvhApiError,
  OvhClientError,
  OvhServerError,
  OvhTransportError,
)


class ApiClient(Protocol):
  """Anything able to perform an OVH API call."""

  async def request(
    self,
    method: str,
    path: str,
    params: Optional[Dict[str, Any]] = None,
    json_data: Optional[Any] = None,
  ) -> Any: ...


class OvhApiClient:
  """Asynchronous client for the OVH API."""

  def __init__(
    self,
    base_url: Optional[str] = None,
    config: Optional[OvhClientConfig] = None,
    **kwargs,
  ):
    """
    Initialize asynchronous OVH client.

    Args:
        base_url: Base URL for the API (e.g. https://eu.api.ovh.com/1.0)
        config: Client configuration
        **kwargs: Additional config overrides
    """
    self.config = config or OvhClientConfig.from_env()

    if base_url:
      kwargs["base_url"] = base_url
    if kwargs:
      self.config = self.config.with_overrides(**kwargs)

    self.config.base_url = self.config.base_url.rstrip("/")
    if not self.config.base_url:
      raise ValueError("base_url must be provided or set in environment")

    if not self.config.has_credentials:
      api_logger.debug("OvhApiClient initialized without credentials")

    limits = httpx.Limits(
      max_connections=self.config.max_connections,
      max_keepalive_connections=self.config.max_keepalive_connections,
      keepalive_expiry=self.config.keepalive_expiry,
    )

    self.client = httpx.AsyncClient(
      base_url=self.config.base_url,
      timeout=httpx.Timeout(self.config.timeout),
      limits=limits,
      headers={"Accept": "application/json", **self.config.headers},
      verify=self.config.verify_ssl,
    )

  async def __aenter__(self):
    return self

  async def __aexit__(self, exc_type, exc_val, exc_tb):
    await self.close()

  async def close(self):
    """Close the client and cleanup resources."""
    await self.client.aclose()

  def _sign(self, request: httpx.Request) -> None:
    """Add the OVH application signature headers to a built request."""
    if not self.config.has_credentials:
      return

    timestamp = str(int(time.time()))
    body = request.content.decode("utf-8") if request.content else ""
    to_sign = "+".join(
      [
        self.config.application_secret,
        self.config.consumer_key,
        request.method,
        str(request.url),
        body,
        timestamp,
      ]
    )

    request.headers["X-Ovh-Application"] = self.config.application_key
    request.headers["X-Ovh-Consumer"] = self.config.consumer_key
    request.headers["X-Ovh-Timestamp"] = timestamp
    request.headers["X-Ovh-Signature"] = (
      "$1$" + hashlib.sha1(to_sign.encode("utf-8")).hexdigest()
    )

  def _handle_response_error(
    self, status_code: int, response_data: Optional[Dict[str, Any]] = None
  ) -> OvhApiError:
    """
    Convert HTTP status code to appropriate exception.

    Args:
        status_code: HTTP status code
        response_data: Response body data

    Returns:
        Appropriate OvhApiError subclass
    """
    error_message = "API request failed"
    if response_data and isinstance(response_data, dict):
      error_message = response_data.get("message", error_message)

    if status_code >= 500:
      return OvhServerError(error_message, status_code, response_data)
    return OvhClientError(error_message, status_code, response_data)

  @staticmethod
  def _decode(response: httpx.Response) -> Any:
    if not response.content:
      return None
    try:
      return response.json()
    except json.JSONDecodeError:
      return {"message": response.text}

  async def request(
    self,
    method: str,
    path: str,
    params: Optional[Dict[str, Any]] = None,
    json_data: Optional[Any] = None,
  ) -> Any:
    """
    Perform one API call.

    Args:
        method: HTTP method
        path: API path relative to the base URL
        params: Query parameters
        json_data: JSON body

    Returns:
        Decoded JSON body, or None for an empty answer

    Raises:
        OvhClientError: API answered with a 4xx status
        OvhServerError: API answered with a 5xx status
        OvhTransportError: No answer was received
    """
    request_kwargs: Dict[str, Any] = {}
    if params:
      request_kwargs["params"] = params
    if json_data is not None:
      request_kwargs["json"] = json_data

    request = self.client.build_request(method, path, **request_kwargs)
    self._sign(request)

    started = time.perf_counter()
    try:
      response = await self.client.send(request)
    except httpx.TimeoutException as e:
      raise OvhTransportError(f"Request timeout: {e}") from e
    except httpx.RequestError as e:
      raise OvhTransportError(f"Request error: {e}") from e

    log_api_request(
      api_logger,
      method,
      path,
      response.status_code,
      (time.perf_counter() - started) * 1000,
    )

    data = self._decode(response)
    if response.status_code >= 400:
      if not isinstance(data, dict):
        data = {"message": response.text}
      raise self._handle_response_error(response.status_code, data)

    return data
