"""
Transform legacy payment records into unified payment methods.

The goal is a coherent object structure whatever the route a record comes
from (``/me/paymentMean/*`` for EU/CA, ``/me/paymentMethod`` for the US).
These functions do no I/O and never mutate the records they receive.
"""

from typing import Any, Callable, Dict, Optional

from ...config import PaymentTypeConstants, TranslationConstants
from ...models import PaymentMethod, PaymentMethodType, PaymentValue
from ...utils.naming import snake_case, upper_snake_case

Translate = Callable[[str], str]


def identity_translate(key: str) -> str:
  """Fallback translation: the key itself."""
  return key


def _get(record: Optional[Dict[str, Any]], key: str, default: Any = None) -> Any:
  # Missing or null fields both resolve to the default
  if not isinstance(record, dict):
    return default
  value = record.get(key)
  return default if value is None else value


def to_payment_type(
  payment_type: Optional[str], translate: Translate = identity_translate
) -> PaymentValue:
  """creditCard -> {value: CREDIT_CARD, text: translate(ovh_payment_type_credit_card)}"""
  return PaymentValue(
    value=upper_snake_case(payment_type),
    text=translate(f"{TranslationConstants.PAYMENT_TYPE_PREFIX}{snake_case(payment_type)}"),
  )


def to_payment_status(
  payment_status: Optional[str],
  payment_type: Optional[str],
  translate: Translate = identity_translate,
) -> PaymentValue:
  """
  Build the unified status of a payment record.

  Bank accounts pending validation are waiting for documents from the
  customer, so they get a dedicated label.
  """
  if (
    payment_type == PaymentTypeConstants.BANK_ACCOUNT
    and payment_status == PaymentTypeConstants.PENDING_VALIDATION
  ):
    key = TranslationConstants.STATUS_WAITING_FOR_DOCUMENTS
  else:
    key = f"{TranslationConstants.PAYMENT_STATUS_PREFIX}{snake_case(payment_status)}"

  return PaymentValue(value=upper_snake_case(payment_status), text=translate(key))


def _mean_label(payment_mean: Dict[str, Any], payment_type: Optional[str]) -> Any:
  if payment_type == PaymentTypeConstants.PAYPAL:
    return _get(payment_mean, "email")
  if payment_type == PaymentTypeConstants.CREDIT_CARD:
    return _get(payment_mean, "number")
  if payment_type == PaymentTypeConstants.BANK_ACCOUNT:
    return _get(payment_mean, "iban")
  return _get(payment_mean, "label") or None


def mean_to_method(
  payment_mean: Dict[str, Any], translate: Translate = identity_translate
) -> PaymentMethod:
  """Transform an EU/CA payment mean (tagged with its ``paymentType``)."""
  payment_type = _get(payment_mean, "paymentType")
  payment_status = _get(payment_mean, "state")

  return PaymentMethod(
    payment_sub_type=_get(payment_mean, "type"),
    status=to_payment_status(payment_status, payment_type, translate),
    payment_method_id=_get(payment_mean, "id"),
    default=bool(_get(payment_mean, "defaultPaymentMean", False)),
    description=_get(payment_mean, "description"),
    payment_type=to_payment_type(payment_type, translate),
    # Not modeled by the payment mean routes
    billing_contact_id=None,
    creation_date=_get(payment_mean, "creationDate"),
    last_update=None,
    label=_mean_label(payment_mean, payment_type),
    expiration_date=_get(payment_mean, "expirationDate"),
    original=payment_mean,
  )


def us_method_to_method(
  us_payment_method: Dict[str, Any], translate: Translate = identity_translate
) -> PaymentMethod:
  """Transform a US ``/me/paymentMethod`` record."""
  payment_type = _get(us_payment_method, "paymentType")
  payment_status = _get(us_payment_method, "status")

  return PaymentMethod(
    payment_sub_type=_get(us_payment_method, "paymentSubType"),
    status=to_payment_status(payment_status, payment_type, translate),
    payment_method_id=_get(us_payment_method, "id"),
    default=bool(_get(us_payment_method, "default", False)),
    description=_get(us_payment_method, "description"),
    payment_type=to_payment_type(payment_type, translate),
    billing_contact_id=_get(us_payment_method, "billingContactId"),
    creation_date=_get(us_payment_method, "creationDate"),
    last_update=None,
    label=_get(us_payment_method, "publicLabel"),
    original=us_payment_method,
  )


def type_to_payment_method_type(
  payment_mean_type: Dict[str, Any], translate: Translate = identity_translate
) -> PaymentMethodType:
  """Transform a market configuration entry ``{value, registerable}``."""
  return PaymentMethodType(
    oneshot=True,
    registerable=bool(_get(payment_mean_type, "registerable", False)),
    payment_type=to_payment_type(_get(payment_mean_type, "value"), translate),
    original=payment_mean_type,
  )
