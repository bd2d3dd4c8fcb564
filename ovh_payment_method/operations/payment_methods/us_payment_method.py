"""US payment methods strategy.

The ``/me/paymentMethod`` legacy routes were removed server-side. Legacy US
payment methods are not listed anymore and every mutation is rejected with a
stable error naming the removed route, without any call to the API.
"""

from typing import Any, Dict, List, Optional, Union

from ...config import RouteConstants
from ...exceptions import EndpointRemovedError, UnsupportedMarketOperationError
from ...logger import logger
from ...models import PaymentMeanOptions, PaymentMethod
from .base import LegacyPaymentMethod, PaymentMethodStrategy


class USPaymentMethodStrategy(PaymentMethodStrategy):
  """Handle the decommissioned US payment method protocol."""

  def _removed(self, http_method: str, route: str) -> EndpointRemovedError:
    logger.warning(
      f"Call to removed legacy route {http_method} {route}",
      extra={"target": self.target, "action": "removed_endpoint"},
    )
    return EndpointRemovedError(http_method, route)

  async def get_payment_methods(
    self, options: PaymentMeanOptions
  ) -> List[Union[Dict[str, Any], PaymentMethod]]:
    # Legacy US payment methods are not returned anymore
    return []

  async def add_payment_method(self, payment_type: str, params: Dict[str, Any]) -> Any:
    return await self.add_us_payment_method({"paymentType": payment_type, **params})

  async def edit_payment_method(
    self, payment_method: LegacyPaymentMethod, params: Optional[Dict[str, Any]]
  ) -> Any:
    return await self.edit_us_payment_method(payment_method, params)

  async def set_payment_method_as_default(
    self, payment_method: LegacyPaymentMethod
  ) -> Any:
    return await self.edit_us_payment_method(payment_method, {"default": True})

  async def challenge_payment_method(
    self, payment_method: LegacyPaymentMethod, challenge: Any
  ) -> Any:
    raise UnsupportedMarketOperationError("challengePaymentMean", self.target)

  async def delete_payment_method(self, payment_method: LegacyPaymentMethod) -> Any:
    return await self.delete_us_payment_method(payment_method)

  # ==========================================
  # US Payment Methods (deprecated)
  # ==========================================

  async def add_us_payment_method(self, params: Dict[str, Any]) -> Any:
    """Always rejected: ``POST /me/paymentMethod`` is no longer available."""
    raise self._removed("POST", RouteConstants.US_PAYMENT_METHOD_ROUTE)

  async def edit_us_payment_method(
    self, payment_method: LegacyPaymentMethod, params: Optional[Dict[str, Any]]
  ) -> Any:
    """Always rejected: ``PUT /me/paymentMethod/{id}`` is no longer available."""
    raise self._removed("PUT", RouteConstants.US_PAYMENT_METHOD_ITEM_ROUTE)

  async def delete_us_payment_method(self, payment_method: LegacyPaymentMethod) -> Any:
    """Always rejected: ``DELETE /me/paymentMethod/{id}`` is no longer available."""
    raise self._removed("DELETE", RouteConstants.US_PAYMENT_METHOD_ITEM_ROUTE)
