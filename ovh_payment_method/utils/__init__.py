"""Shared helpers."""

from .iban import (
  assert_valid_iban,
  format_iban,
  is_valid_bic,
  is_valid_iban,
  normalize_iban,
)
from .naming import pascal_case, snake_case, split_words, upper_snake_case

__all__ = [
  "assert_valid_iban",
  "format_iban",
  "is_valid_bic",
  "is_valid_iban",
  "normalize_iban",
  "pascal_case",
  "snake_case",
  "split_words",
  "upper_snake_case",
]
