"""OVH adapter for the legacy payment mean and payment method APIs.

This adapter provides:
- OvhApiClient: signed async client for the OVH API
- PaymentMeanResource: per-type /me/paymentMean routes
- AvailableAutomaticPaymentMeansResource: payable type availability
"""

from ovh_payment_method.adapters.ovh.client import (
  ApiClient,
  AvailableAutomaticPaymentMeansResource,
  OvhApiClient,
  OvhApiError,
  OvhClientConfig,
  PaymentMeanResource,
)

__all__ = [
  "ApiClient",
  "AvailableAutomaticPaymentMeansResource",
  "OvhApiClient",
  "OvhApiError",
  "OvhClientConfig",
  "PaymentMeanResource",
]
