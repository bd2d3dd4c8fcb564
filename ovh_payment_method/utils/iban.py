"""
IBAN and BIC helpers used before registering a bank account payment mean.

Structure checks only: a valid IBAN here is well formed and passes the
ISO 13616 modulo 97 check, it says nothing about the account existing.
"""

import re
from typing import List, Optional

from ovh_payment_method.config import IBAN_BIC_RULES
from ovh_payment_method.exceptions import IbanValidationError

# The rule table keys the United Kingdom as UK, IBANs use the ISO code GB
_COUNTRY_ALIASES = {"GB": "UK"}


def normalize_iban(value: Optional[str]) -> str:
  """Uppercase and strip every whitespace character."""
  if not value:
    return ""
  return re.sub(r"\s+", "", value).upper()


def _iban_error(iban: str) -> Optional[str]:
  """Return why an IBAN is invalid, or None if it is valid."""
  match = IBAN_BIC_RULES["IBAN_REGEXP"].match(iban)
  if not match:
    return "expected a country code followed by two check digits"

  country, _, bban = match.groups()
  rule = IBAN_BIC_RULES["COUNTRY_BASE_REGEXP"].get(_COUNTRY_ALIASES.get(country, country))
  if rule is not None and not rule.fullmatch(bban):
    return f"account number does not match the {country} format"
  if not re.fullmatch(r"[0-9A-Z]+", bban):
    return "account number contains invalid characters"

  rearranged = iban[4:] + iban[:4]
  digits = "".join(str(int(char, 36)) for char in rearranged)
  if int(digits) % IBAN_BIC_RULES["IBAN_VALIDATION_MODULO"] != 1:
    return "checksum mismatch"

  return None


def is_valid_iban(value: Optional[str]) -> bool:
  """Check the country format and the modulo 97 checksum."""
  iban = normalize_iban(value)
  return bool(iban) and _iban_error(iban) is None


def assert_valid_iban(value: Optional[str]) -> str:
  """
  Validate an IBAN and return its normalized form.

  Raises:
      IbanValidationError: If the IBAN is malformed
  """
  iban = normalize_iban(value)
  reason = _iban_error(iban) if iban else "IBAN is empty"
  if reason:
    raise IbanValidationError(iban, reason)
  return iban


def is_valid_bic(value: Optional[str]) -> bool:
  """Check a BIC/SWIFT code: bank, country, location and optional branch."""
  if not value:
    return False
  return IBAN_BIC_RULES["BIC_REGEXP"].match(value.strip().upper()) is not None


def format_iban(value: Optional[str]) -> str:
  """
  Group an IBAN for display.

  Countries listed in IBAN_FORMAT use their own group sizes, every other
  country is grouped by four.
  """
  iban = normalize_iban(value)
  sizes: List[int] = IBAN_BIC_RULES["IBAN_FORMAT"].get(iban[:2], [])

  groups = []
  position = 0
  for size in sizes:
    if position >= len(iban):
      break
    groups.append(iban[position : position + size])
    position += size
  while position < len(iban):
    groups.append(iban[position : position + 4])
    position += 4

  return " ".join(groups)
