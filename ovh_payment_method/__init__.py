"""
Unified access to the legacy OVH payment mean and payment method APIs.

Usage:
    from ovh_payment_method import get_payment_method_service

    service = get_payment_method_service(target="EU")
    methods = await service.get_payment_methods({"transform": True})
"""

from .exceptions import (
  EndpointRemovedError,
  PaymentMethodError,
  UnsupportedMarketOperationError,
  UnsupportedPaymentTypeError,
)
from .models import (
  NavigationMode,
  PaymentMeanOptions,
  PaymentMethod,
  PaymentMethodType,
)
from .operations.payment_methods import (
  PaymentMethodService,
  get_payment_method_service,
)

__all__ = [
  "EndpointRemovedError",
  "NavigationMode",
  "PaymentMeanOptions",
  "PaymentMethod",
  "PaymentMethodError",
  "PaymentMethodService",
  "PaymentMethodType",
  "UnsupportedMarketOperationError",
  "UnsupportedPaymentTypeError",
  "get_payment_method_service",
]
