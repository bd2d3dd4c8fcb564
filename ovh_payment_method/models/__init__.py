"""Unified payment method models."""

from .payment_method import (
  NavigationMode,
  PaymentIcon,
  PaymentMeanOptions,
  PaymentMethod,
  PaymentMethodType,
  PaymentValue,
)

__all__ = [
  "NavigationMode",
  "PaymentIcon",
  "PaymentMeanOptions",
  "PaymentMethod",
  "PaymentMethodType",
  "PaymentValue",
]
