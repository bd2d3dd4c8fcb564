"""
OVH API Client - Async client for the legacy billing routes.
"""

from .client import ApiClient, OvhApiClient
from .config import OvhClientConfig
from .exceptions import (
  OvhApiError,
  OvhClientError,
  OvhServerError,
  OvhTransportError,
)
from .resources import AvailableAutomaticPaymentMeansResource, PaymentMeanResource

__all__ = [
  "ApiClient",
  "AvailableAutomaticPaymentMeansResource",
  "OvhApiClient",
  "OvhApiError",
  "OvhClientConfig",
  "OvhClientError",
  "OvhServerError",
  "OvhTransportError",
  "PaymentMeanResource",
]
