"""
IBAN and BIC structural rules.

Static data consumed by ``ovh_payment_method.utils.iban``:
- IBAN_FORMAT: display group sizes for countries with a specific layout
- COUNTRY_BASE_REGEXP: BBAN pattern (characters after country and check digits)
- BIC_REGEXP / IBAN_REGEXP: overall shapes
"""

import re
from typing import Dict, Any

IBAN_BIC_RULES: Dict[str, Any] = {
  "IBAN_FORMAT": {
    "FR": [4, 4, 4, 4, 4, 4, 3],
    "DE": [4, 4, 4, 4, 4, 2],
    "MC": [4, 4, 4, 4, 4, 4, 3],
  },
  "IBAN_VALIDATION_MODULO": 97,
  "COUNTRY_BASE_REGEXP": {
    "AT": re.compile(r"\d{16}"),
    "BE": re.compile(r"\d{12}"),
    "BG": re.compile(r"\w{4}\d{6}[0-9A-Z]{8}"),
    "CH": re.compile(r"\d{5}[0-9A-Z]{12}"),
    "CY": re.compile(r"\d{8}[0-9A-Z]{16}"),
    "CZ": re.compile(r"\d{20}"),
    "DE": re.compile(r"\d{18}"),
    "DK": re.compile(r"\d{14}"),
    "EE": re.compile(r"\d{16}"),
    "ES": re.compile(r"\d{20}"),
    "FI": re.compile(r"\d{14}"),
    "FR": re.compile(r"\d{10}\w{11}\d{2}"),
    "GR": re.compile(r"\d{7}[0-9A-Z]{16}"),
    "HU": re.compile(r"\d{24}"),
    "IE": re.compile(r"\w{4}\d{14}"),
    "IS": re.compile(r"\d{22}"),
    "IT": re.compile(r"\w{1}\d{10}[0-9A-Z]{12}"),
    "LI": re.compile(r"\d{5}[0-9A-Z]{12}"),
    "LT": re.compile(r"\d{16}"),
    "LU": re.compile(r"\d{3}[0-9A-Z]{13}"),
    "LV": re.compile(r"\w{4}[0-9A-Z]{13}"),
    "MC": re.compile(r"\d{10}[0-9A-Z]{11}\d{2}"),
    "MT": re.compile(r"\w{4}\d{5}[0-9A-Z]{18}"),
    "NL": re.compile(r"\w{4}\d{10}"),
    "NO": re.compile(r"\d{9}"),
    "PL": re.compile(r"\d{8}[0-9A-Z]{16}"),
    "PT": re.compile(r"\d{21}"),
    "RO": re.compile(r"\w{4}[0-9A-Z]{16}"),
    "SE": re.compile(r"\d{20}"),
    "SI": re.compile(r"\d{15}"),
    "SK": re.compile(r"\d{20}"),
    "UK": re.compile(r"\w{4}\d{14}"),
  },
  "BIC_REGEXP": re.compile(r"^([A-Z]{4})([A-Z]{2})(\w{2})(\w{3})?$"),
  "IBAN_REGEXP": re.compile(r"^([A-Z]{2})(\d{2})(.*)$"),
}
