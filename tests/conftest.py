import os

# Read by EnvConfig at import; must be set before the package loads
os.environ.setdefault("ENVIRONMENT", "test")

from typing import Any, Callable, Dict, Tuple  # noqa: E402
from unittest.mock import AsyncMock, Mock  # noqa: E402

import pytest  # noqa: E402

Routes = Dict[Tuple[str, str], Any]


def make_api_client(routes: Routes) -> Mock:
  """
  Build a mocked ApiClient answering from a route table.

  Each value is returned as is, raised if it is an exception, or called with
  ``params`` and ``json_data`` if it is callable. Unknown routes fail the test.
  """

  async def request(method, path, params=None, json_data=None):
    key = (method, path)
    if key not in routes:
      raise AssertionError(f"Unexpected API call: {method} {path}")
    response = routes[key]
    if isinstance(response, Exception):
      raise response
    if callable(response):
      return response(params=params, json_data=json_data)
    return response

  client = Mock()
  client.request = AsyncMock(side_effect=request)
  return client


@pytest.fixture
def api_client_factory() -> Callable[[Routes], Mock]:
  return make_api_client


@pytest.fixture
def eu_payment_means() -> Dict[str, Dict[Any, Dict[str, Any]]]:
  """Raw payment means of an EU account, by type then id."""
  return {
    "bankAccount": {
      11: {
        "id": 11,
        "iban": "FR7630006000011234567890189",
        "bic": "AGRIFRPP",
        "state": "valid",
        "defaultPaymentMean": True,
        "description": "Main account",
        "creationDate": "2019-03-01T10:00:00+01:00",
        "mandateSignatureDate": "2019-03-01T10:00:00+01:00",
      },
      12: {
        "id": 12,
        "iban": "DE89370400440532013000",
        "bic": "COBADEFFXXX",
        "state": "pendingValidation",
        "defaultPaymentMean": False,
        "description": None,
        "creationDate": "2020-06-12T09:30:00+02:00",
      },
    },
    "paypal": {
      21: {
        "id": 21,
        "email": "jane.doe@example.com",
        "state": "valid",
        "defaultPaymentMean": False,
        "description": "Paypal",
        "creationDate": "2018-01-15T08:00:00+01:00",
        "agreementId": "B-1AB23456CD789012E",
      },
    },
    "creditCard": {
      31: {
        "id": 31,
        "number": "XXXXXXXXXXXX1234",
        "type": "visa",
        "state": "valid",
        "defaultPaymentMean": False,
        "description": None,
        "expirationDate": "2027-09-30",
      },
    },
    "deferredPaymentAccount": {},
  }


@pytest.fixture
def eu_routes(eu_payment_means) -> Routes:
  """Route table serving every EU payment mean."""
  routes: Routes = {}
  for payment_type, means in eu_payment_means.items():
    base = f"/me/paymentMean/{payment_type}"
    routes[("GET", base)] = list(means)
    for mean_id, mean in means.items():
      routes[("GET", f"{base}/{mean_id}")] = dict(mean)
  return routes
