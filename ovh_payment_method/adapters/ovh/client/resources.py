"""
OVH API resource handles for the legacy payment routes.

Each handle binds one route family to an ApiClient. Handles hold no state
besides their route, so they can be built once and shared.
"""

from typing import Any, Dict, List, Optional

from ovh_payment_method.config import RouteConstants
from ovh_payment_method.utils.naming import pascal_case
from .client import ApiClient


class PaymentMeanResource:
  """``/me/paymentMean/{type}`` routes for one payment mean type."""

  def __init__(self, client: ApiClient, payment_type: str):
    self.client = client
    self.payment_type = payment_type
    # BankAccount, CreditCard, ... as named by the API schema
    self.name = pascal_case(payment_type)
    self.route = RouteConstants.PAYMENT_MEAN_ROUTE.format(payment_type=payment_type)

  def __repr__(self) -> str:
    return f"<PaymentMeanResource {self.name} {self.route}>"

  def _item_route(self, template: str, mean_id: Any) -> str:
    return template.format(payment_type=self.payment_type, id=mean_id)

  async def query(self, params: Optional[Dict[str, Any]] = None) -> List[Any]:
    """List payment mean ids, optionally filtered (e.g. ``{"state": "valid"}``)."""
    ids = await self.client.request("GET", self.route, params=params or None)
    return ids or []

  async def get(self, mean_id: Any) -> Dict[str, Any]:
    return await self.client.request(
      "GET", self._item_route(RouteConstants.PAYMENT_MEAN_ITEM_ROUTE, mean_id)
    )

  async def save(self, body: Dict[str, Any]) -> Dict[str, Any]:
    """Register a new payment mean."""
    return await self.client.request("POST", self.route, json_data=body)

  async def edit(self, mean_id: Any, body: Optional[Dict[str, Any]]) -> Any:
    return await self.client.request(
      "PUT",
      self._item_route(RouteConstants.PAYMENT_MEAN_ITEM_ROUTE, mean_id),
      json_data=body,
    )

  async def choose_as_default_payment_mean(self, mean_id: Any) -> Any:
    return await self.client.request(
      "POST", self._item_route(RouteConstants.PAYMENT_MEAN_DEFAULT_ROUTE, mean_id)
    )

  async def delete(self, mean_id: Any) -> Any:
    return await self.client.request(
      "DELETE", self._item_route(RouteConstants.PAYMENT_MEAN_ITEM_ROUTE, mean_id)
    )

  async def challenge(self, mean_id: Any, challenge: Any) -> Any:
    return await self.client.request(
      "POST",
      self._item_route(RouteConstants.PAYMENT_MEAN_CHALLENGE_ROUTE, mean_id),
      json_data={"challenge": challenge},
    )


class AvailableAutomaticPaymentMeansResource:
  """``/me/availableAutomaticPaymentMeans``: which types the caller may pay with."""

  def __init__(self, client: ApiClient):
    self.client = client
    self.route = RouteConstants.AVAILABLE_AUTOMATIC_PAYMENT_MEANS_ROUTE

  async def get(self) -> Dict[str, Any]:
    return await self.client.request("GET", self.route) or {}
