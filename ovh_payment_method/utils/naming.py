"""
Naming Utilities

Case conversions between backend identifiers (camelCase), translation keys
(snake_case), unified values (UPPER_SNAKE_CASE) and resource names (PascalCase).
"""

import re
from typing import Any, List


def split_words(value: Any) -> List[str]:
  """
  Split an identifier into words.

  Examples:
    bankAccount -> ["bank", "Account"]
    pending-validation -> ["pending", "validation"]
    HTTPSConnection -> ["HTTPS", "Connection"]
    abc123 -> ["abc", "123"]
  """
  if value is None:
    return []
  s1 = re.sub(r"[^A-Za-z0-9]+", " ", str(value))
  # Digits always form their own word
  s1 = re.sub(r"([A-Za-z])([0-9])", r"\1 \2", s1)
  s1 = re.sub(r"([0-9])([A-Za-z])", r"\1 \2", s1)
  s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", s1)
  return re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1 \2", s2).split()


def snake_case(value: Any) -> str:
  """
  Convert an identifier to snake_case. None gives an empty string.

  Examples:
    creditCard -> credit_card
    pendingValidation -> pending_validation
  """
  return "_".join(word.lower() for word in split_words(value))


def upper_snake_case(value: Any) -> str:
  """creditCard -> CREDIT_CARD"""
  return snake_case(value).upper()


def pascal_case(value: Any) -> str:
  """
  Capitalize every word and drop the separators.

  Examples:
    bankAccount -> BankAccount
    paypal -> Paypal
  """
  return "".join(word[:1].upper() + word[1:] for word in split_words(value))
