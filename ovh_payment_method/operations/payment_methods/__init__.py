"""Legacy payment method routing and normalization."""

from .base import PaymentMethodStrategy, raw_record
from .payment_mean import PaymentMeanStrategy
from .service import STRATEGIES, PaymentMethodService, get_payment_method_service
from .transform import (
  identity_translate,
  mean_to_method,
  to_payment_status,
  to_payment_type,
  type_to_payment_method_type,
  us_method_to_method,
)
from .us_payment_method import USPaymentMethodStrategy

__all__ = [
  "STRATEGIES",
  "PaymentMeanStrategy",
  "PaymentMethodService",
  "PaymentMethodStrategy",
  "USPaymentMethodStrategy",
  "get_payment_method_service",
  "identity_translate",
  "mean_to_method",
  "raw_record",
  "to_payment_status",
  "to_payment_type",
  "type_to_payment_method_type",
  "us_method_to_method",
]
