"""
Market configuration for legacy payment means.

This module defines:
- MarketTarget: Enum of the supported world parts
- AVAILABLE_PAYMENT_MEANS: Ordered payment mean types per world part
- MarketConfig: Utility class for accessing the per-market configuration

The order of each list is the enumeration order used when every payment mean
of a market is listed.
"""

from typing import Dict, Any, Optional, List
from enum import Enum


class MarketTarget(str, Enum):
  """World parts served by the legacy billing APIs."""

  EU = "EU"
  CA = "CA"
  US = "US"


AVAILABLE_PAYMENT_MEANS: Dict[str, List[Dict[str, Any]]] = {
  MarketTarget.EU.value: [
    {"value": "bankAccount", "registerable": True},
    {"value": "paypal", "registerable": True},
    {"value": "creditCard", "registerable": True},
    # Informational only, accounts are opened by the billing team
    {"value": "deferredPaymentAccount", "registerable": False},
  ],
  MarketTarget.CA.value: [
    {"value": "paypal", "registerable": True},
    {"value": "creditCard", "registerable": True},
    {"value": "deferredPaymentAccount", "registerable": False},
  ],
  MarketTarget.US.value: [
    {"value": "creditCard", "registerable": True},
    {"value": "deferredPaymentAccount", "registerable": False},
  ],
}


class MarketConfig:
  """
  Single source of truth for per-market payment mean configuration.

  Lookups return copies so callers can never alter the shared table.
  """

  @classmethod
  def targets(cls) -> List[str]:
    """Get every configured market code."""
    return list(AVAILABLE_PAYMENT_MEANS)

  @classmethod
  def normalize_target(cls, target: Any) -> Optional[MarketTarget]:
    """
    Resolve a market code to a MarketTarget.

    Args:
        target: Market code (case-insensitive string) or MarketTarget

    Returns:
        MarketTarget or None if the code is unknown
    """
    if isinstance(target, MarketTarget):
      return target
    if not isinstance(target, str):
      return None
    try:
      return MarketTarget(target.strip().upper())
    except ValueError:
      return None

  @classmethod
  def get_payment_mean_types(cls, target: str) -> List[Dict[str, Any]]:
    """
    Get the ordered payment mean types configured for a market.

    Args:
        target: Market code (EU, CA, US)

    Returns:
        List of ``{value, registerable}`` dicts, empty for unknown markets
    """
    market = cls.normalize_target(target)
    if market is None:
      return []
    return [dict(entry) for entry in AVAILABLE_PAYMENT_MEANS[market.value]]

  @classmethod
  def get_payment_mean_type(
    cls, target: str, payment_type: str
  ) -> Optional[Dict[str, Any]]:
    """Get a single type entry of a market, or None if not configured."""
    for entry in cls.get_payment_mean_types(target):
      if entry["value"] == payment_type:
        return entry
    return None

  @classmethod
  def is_registerable(cls, target: str, payment_type: str) -> bool:
    """Check whether new payment means of a type may be registered."""
    entry = cls.get_payment_mean_type(target, payment_type)
    return bool(entry and entry.get("registerable"))

  @classmethod
  def validate(cls) -> List[str]:
    """
    Check the static configuration for duplicated types.

    Returns:
        List of validation errors (empty if all valid)
    """
    errors = []
    for market, entries in AVAILABLE_PAYMENT_MEANS.items():
      seen = set()
      for entry in entries:
        if entry["value"] in seen:
          errors.append(f"{market}: duplicated payment type {entry['value']}")
        seen.add(entry["value"])
    return errors
