"""Unified payment method models shared by every market."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class NavigationMode(str, Enum):
  """How a payment validation URL is opened."""

  NEW_CONTEXT = "_blank"
  REDIRECT = "redirect"


@dataclass
class PaymentMeanOptions:
  """Options for listing legacy payment means."""

  # Only list validated bank accounts
  only_valid: bool = False
  # Return unified PaymentMethod objects instead of raw records
  transform: bool = False

  @classmethod
  def coerce(
    cls, options: Union["PaymentMeanOptions", Dict[str, Any], None]
  ) -> "PaymentMeanOptions":
    """
    Build options from an instance, a dict or None.

    Dicts may use either ``only_valid`` or ``onlyValid``.
    """
    if options is None:
      return cls()
    if isinstance(options, cls):
      return options
    return cls(
      only_valid=bool(options.get("only_valid", options.get("onlyValid", False))),
      transform=bool(options.get("transform", False)),
    )


class _UnifiedModel(BaseModel):
  model_config = ConfigDict(frozen=True, populate_by_name=True)

  def to_dict(self) -> Dict[str, Any]:
    """Dump with the camelCase keys of the unified model."""
    return self.model_dump(by_alias=True)


class PaymentValue(_UnifiedModel):
  """A backend value in upper snake case with its translated text."""

  value: Optional[str] = Field(None, description="Upper snake case identifier")
  text: Optional[str] = Field(None, description="Translated label")


class PaymentIcon(_UnifiedModel):
  """Icon of a payment method. Legacy APIs never provide one."""

  name: Optional[str] = None
  data: Optional[str] = None


class PaymentMethodType(_UnifiedModel):
  """Capability descriptor of a payment type that can be registered."""

  oneshot: bool = Field(True, description="Legacy types are always oneshot")
  icon: PaymentIcon = Field(default_factory=PaymentIcon)
  registerable: bool = Field(
    ..., description="Whether new payment means of this type may be created"
  )
  payment_type: PaymentValue = Field(..., alias="paymentType")
  original: Dict[str, Any] = Field(
    ..., description="Market configuration entry this type was built from"
  )


class PaymentMethod(_UnifiedModel):
  """Payment instrument with the same shape whatever the backend protocol."""

  payment_sub_type: Optional[str] = Field(None, alias="paymentSubType")
  icon: PaymentIcon = Field(default_factory=PaymentIcon)
  status: PaymentValue
  payment_method_id: Optional[Any] = Field(None, alias="paymentMethodId")
  default: bool = False
  description: Optional[str] = None
  payment_type: PaymentValue = Field(..., alias="paymentType")
  billing_contact_id: Optional[Any] = Field(None, alias="billingContactId")
  creation_date: Optional[str] = Field(None, alias="creationDate")
  last_update: Optional[str] = Field(None, alias="lastUpdate")
  label: Optional[str] = None
  expiration_date: Optional[str] = Field(None, alias="expirationDate")
  original: Dict[str, Any] = Field(
    ..., description="Untransformed backend record"
  )
