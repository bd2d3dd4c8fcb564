"""
Custom Exception Types for the payment method adapter.

Every error raised by the adapter itself carries an HTTP-like ``status`` so
callers can treat adapter rejections and backend rejections the same way.
Backend failures are not wrapped: they surface as the API client's own
exceptions (see ``ovh_payment_method.adapters.ovh.client.exceptions``).
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class PaymentMethodError(Exception):
  """
  Base exception for all payment method adapter errors.

  Attributes:
      message: Human-readable error message
      status: HTTP-like status code describing the rejection
      error_code: Application-specific error code for categorization
      details: Additional error context and metadata
      timestamp: When the error occurred
  """

  status: int = 500

  def __init__(
    self,
    message: str,
    status: Optional[int] = None,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
  ):
    super().__init__(message)
    self.message = message
    if status is not None:
      self.status = status
    self.error_code = error_code or self.__class__.__name__
    self.details = details or {}
    self.timestamp = datetime.now(timezone.utc).isoformat()

  def to_dict(self) -> Dict[str, Any]:
    """Convert exception to the ``{status, message}`` rejection shape."""
    return {
      "status": self.status,
      "message": self.message,
    }


# ============================================================================
# Market Routing Exceptions
# ============================================================================


class UnsupportedMarketOperationError(PaymentMethodError):
  """Raised when an operation cannot exist for the configured market."""

  status = 403

  def __init__(self, operation: str, target: str):
    super().__init__(
      f"{operation} is not available for {target} world part",
      error_code="UNSUPPORTED_MARKET_OPERATION",
      details={"operation": operation, "target": target},
    )


class EndpointRemovedError(PaymentMethodError):
  """
  Raised for every call to a legacy route that was decommissioned server-side.

  The rejection is terminal: callers get a stable, documented error naming
  the removed route instead of a network failure.
  """

  status = 404

  def __init__(self, http_method: str, route: str):
    super().__init__(
      f"{http_method} {route} is no longer available.",
      error_code="ENDPOINT_REMOVED",
      details={"method": http_method, "route": route},
    )

  def to_dict(self) -> Dict[str, Any]:
    """Removed endpoints answer with the ``{status, data: {message}}`` shape."""
    return {
      "status": self.status,
      "data": {"message": self.message},
    }


class UnsupportedPaymentTypeError(PaymentMethodError):
  """Raised when a payment type has no resource for the configured market."""

  status = 400

  def __init__(self, payment_type: Optional[str], target: str):
    super().__init__(
      f"Payment type '{payment_type}' is not supported for {target} world part",
      error_code="UNSUPPORTED_PAYMENT_TYPE",
      details={"payment_type": payment_type, "target": target},
    )


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(PaymentMethodError):
  """Raised when there are configuration issues."""

  def __init__(self, config_key: str, reason: str):
    super().__init__(
      f"Configuration error for '{config_key}': {reason}",
      error_code="CONFIGURATION_ERROR",
      details={"config_key": config_key, "reason": reason},
    )


class InvalidMarketTargetError(ConfigurationError):
  """Raised when the adapter is built for a market it does not know."""

  def __init__(self, target: Any):
    super().__init__("PAYMENT_METHOD_TARGET", f"unknown target market {target!r}")
    self.details["target"] = target


# ============================================================================
# Validation Exceptions
# ============================================================================


class IbanValidationError(PaymentMethodError):
  """Raised when an IBAN fails structural validation."""

  status = 400

  def __init__(self, iban: str, reason: str):
    super().__init__(
      f"Invalid IBAN: {reason}",
      error_code="IBAN_VALIDATION_ERROR",
      # Only keep the country/check prefix, never the full account number
      details={"iban_prefix": iban[:4], "reason": reason},
    )
