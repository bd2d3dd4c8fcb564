"""
Static constants configuration.

Route templates and translation keys shared by the payment method strategies
and the normalizer. None of these change with the environment.
"""

# =============================================================================
# OPERATIONAL CONSTANTS
# =============================================================================

# Default Timeouts (seconds)
DEFAULT_HTTP_TIMEOUT = 30


class RouteConstants:
  """OVH API routes used by the legacy payment method protocols."""

  # Payment means (EU/CA), one sub-resource per payment type
  PAYMENT_MEAN_ROUTE = "/me/paymentMean/{payment_type}"
  PAYMENT_MEAN_ITEM_ROUTE = "/me/paymentMean/{payment_type}/{id}"
  PAYMENT_MEAN_DEFAULT_ROUTE = (
    "/me/paymentMean/{payment_type}/{id}/chooseAsDefaultPaymentMean"
  )
  PAYMENT_MEAN_CHALLENGE_ROUTE = "/me/paymentMean/{payment_type}/{id}/challenge"

  AVAILABLE_AUTOMATIC_PAYMENT_MEANS_ROUTE = "/me/availableAutomaticPaymentMeans"

  # Payment methods (US), removed server-side
  US_PAYMENT_METHOD_ROUTE = "/me/paymentMethod"
  US_PAYMENT_METHOD_ITEM_ROUTE = "/me/paymentMethod/{paymentMethodId}"


class TranslationConstants:
  """Translation key conventions for payment types and statuses."""

  PAYMENT_TYPE_PREFIX = "ovh_payment_type_"
  PAYMENT_STATUS_PREFIX = "ovh_payment_status_"
  STATUS_WAITING_FOR_DOCUMENTS = "ovh_payment_status_waiting_for_documents"


class PaymentTypeConstants:
  """Backend payment type identifiers with specific behaviour."""

  BANK_ACCOUNT = "bankAccount"
  CREDIT_CARD = "creditCard"
  PAYPAL = "paypal"
  DEFERRED_PAYMENT_ACCOUNT = "deferredPaymentAccount"

  # Backend state that needs documents for bank accounts
  PENDING_VALIDATION = "pendingValidation"
  VALID_STATE = "valid"
