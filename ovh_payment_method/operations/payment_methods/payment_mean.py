"""Payment means strategy (EU and CA world parts).

Uses the ``/me/paymentMean/*`` routes, where payment means are organized by
type-specific sub-resources (bank accounts, credit cards, ...).
"""

import asyncio
from typing import Any, Dict, List, Optional, Union

from ...adapters.ovh.client import ApiClient, PaymentMeanResource
from ...config import MarketConfig, MarketTarget, PaymentTypeConstants
from ...exceptions import UnsupportedMarketOperationError, UnsupportedPaymentTypeError
from ...logger import log_error, logger
from ...models import (
  NavigationMode,
  PaymentMeanOptions,
  PaymentMethod,
)
from .base import LegacyPaymentMethod, Navigate, PaymentMethodStrategy, raw_record
from .transform import Translate, mean_to_method


class PaymentMeanStrategy(PaymentMethodStrategy):
  """Handle payment means of the EU and CA world parts."""

  def __init__(
    self,
    client: ApiClient,
    target: str,
    translate: Optional[Translate] = None,
    navigate: Optional[Navigate] = None,
  ):
    super().__init__(client, target, translate, navigate)

    # One resource per configured type, in market order
    self.resources: Dict[str, PaymentMeanResource] = {
      entry["value"]: PaymentMeanResource(client, entry["value"])
      for entry in MarketConfig.get_payment_mean_types(target)
    }

  def _ensure_supported(self, operation: str) -> None:
    # The US world part has no /me/paymentMean routes
    if self.target == MarketTarget.US.value:
      raise UnsupportedMarketOperationError(operation, self.target)

  def get_payment_mean_resource(self, payment_type: Optional[str]) -> PaymentMeanResource:
    """
    Get the resource handling a payment mean type.

    Raises:
        UnsupportedPaymentTypeError: Type is not configured for the market
    """
    resource = self.resources.get(payment_type) if payment_type else None
    if resource is None:
      raise UnsupportedPaymentTypeError(payment_type, self.target)
    return resource

  # =====================================
  # Interface operations
  # =====================================

  async def get_payment_methods(
    self, options: PaymentMeanOptions
  ) -> List[Union[Dict[str, Any], PaymentMethod]]:
    return await self.get_payment_means(options)

  async def add_payment_method(self, payment_type: str, params: Dict[str, Any]) -> Any:
    return await self.add_payment_mean(payment_type, params)

  async def edit_payment_method(
    self, payment_method: LegacyPaymentMethod, params: Optional[Dict[str, Any]]
  ) -> Any:
    return await self.edit_payment_mean(payment_method, params)

  async def set_payment_method_as_default(
    self, payment_method: LegacyPaymentMethod
  ) -> Any:
    return await self.set_payment_mean_as_default(payment_method)

  async def challenge_payment_method(
    self, payment_method: LegacyPaymentMethod, challenge: Any
  ) -> Any:
    return await self.challenge_payment_mean(payment_method, challenge)

  async def delete_payment_method(self, payment_method: LegacyPaymentMethod) -> Any:
    return await self.delete_payment_mean(payment_method)

  # =====================================
  # Payment means
  # =====================================

  async def get_payment_means(
    self, options: Optional[PaymentMeanOptions] = None
  ) -> List[Union[Dict[str, Any], PaymentMethod]]:
    """
    Get all payment means of the logged user.

    Every configured type is fetched concurrently. The first failing type
    fails the whole listing.

    Args:
        options: Options for fetching payment means

    Returns:
        Payment means of every type, flattened in market configuration order
    """
    self._ensure_supported("getPaymentMeans")
    options = PaymentMeanOptions.coerce(options)

    try:
      payments_of_type = await asyncio.gather(
        *(
          self.get_payment_means_of_type(payment_type, options)
          for payment_type in self.resources
        )
      )
    except Exception as e:
      log_error(
        logger,
        e,
        "payment_mean",
        "get_payment_means",
        error_category="ovh_api",
        metadata={"target": self.target},
      )
      raise

    return [mean for means in payments_of_type for mean in means]

  async def get_payment_means_of_type(
    self, payment_type: str, options: Optional[PaymentMeanOptions] = None
  ) -> List[Union[Dict[str, Any], PaymentMethod]]:
    """
    Get the payment means of given type.

    Args:
        payment_type: The type of payment mean to get
        options: Options for fetching payment means

    Returns:
        Raw payment means tagged with their ``paymentType``, or unified
        payment methods when ``options.transform`` is set
    """
    self._ensure_supported("getPaymentMeansOfType")
    options = PaymentMeanOptions.coerce(options)
    resource = self.get_payment_mean_resource(payment_type)

    query = (
      {"state": PaymentTypeConstants.VALID_STATE}
      if payment_type == PaymentTypeConstants.BANK_ACCOUNT and options.only_valid
      else {}
    )
    payment_mean_ids = await resource.query(query)

    async def fetch(payment_mean_id: Any) -> Union[Dict[str, Any], PaymentMethod]:
      mean = dict(await resource.get(payment_mean_id))
      mean["paymentType"] = payment_type
      return mean_to_method(mean, self.translate) if options.transform else mean

    return list(await asyncio.gather(*(fetch(mean_id) for mean_id in payment_mean_ids)))

  async def add_payment_mean(
    self, payment_type: str, params: Optional[Dict[str, Any]] = None
  ) -> Any:
    """
    Register a new payment mean.

    Validation URLs answered by the API are opened for every type but bank
    accounts: in a new context, or in place when a ``returnUrl`` was given.

    Returns:
        The raw API result
    """
    self._ensure_supported("addPaymentMean")
    resource = self.get_payment_mean_resource(payment_type)

    add_params = dict(params or {})
    if "default" in add_params:
      add_params["setDefault"] = add_params.pop("default")

    result = await resource.save(add_params)
    logger.info(
      f"Registered {payment_type} payment mean",
      extra={"target": self.target, "payment_type": payment_type, "action": "add"},
    )

    url = result.get("url") if isinstance(result, dict) else None
    if url and payment_type != PaymentTypeConstants.BANK_ACCOUNT:
      if not add_params.get("returnUrl"):
        await self._navigate(url, NavigationMode.NEW_CONTEXT)
      else:
        await self._navigate(url, NavigationMode.REDIRECT)

    return result

  async def edit_payment_mean(
    self, payment_mean: LegacyPaymentMethod, params: Optional[Dict[str, Any]]
  ) -> Any:
    """Edit the given payment mean."""
    self._ensure_supported("editPaymentMean")
    mean = raw_record(payment_mean)
    resource = self.get_payment_mean_resource(mean.get("paymentType"))
    return await resource.edit(mean.get("id"), params)

  async def set_payment_mean_as_default(self, payment_mean: LegacyPaymentMethod) -> Any:
    """Set the given payment mean as default payment."""
    self._ensure_supported("setPaymentMeanAsDefault")
    mean = raw_record(payment_mean)
    resource = self.get_payment_mean_resource(mean.get("paymentType"))
    result = await resource.choose_as_default_payment_mean(mean.get("id"))
    logger.info(
      f"Payment mean {mean.get('id')} set as default",
      extra={"target": self.target, "payment_type": resource.payment_type},
    )
    return result

  async def delete_payment_mean(self, payment_mean: LegacyPaymentMethod) -> Any:
    """Delete the given payment mean."""
    self._ensure_supported("deletePaymentMean")
    mean = raw_record(payment_mean)
    resource = self.get_payment_mean_resource(mean.get("paymentType"))
    result = await resource.delete(mean.get("id"))
    logger.info(
      f"Deleted payment mean {mean.get('id')}",
      extra={"target": self.target, "payment_type": resource.payment_type},
    )
    return result

  async def challenge_payment_mean(
    self, payment_mean: LegacyPaymentMethod, challenge: Any
  ) -> Any:
    """Challenge the given payment mean with the value received by the user."""
    self._ensure_supported("challengePaymentMean")
    mean = raw_record(payment_mean)
    resource = self.get_payment_mean_resource(mean.get("paymentType"))
    return await resource.challenge(mean.get("id"), challenge)
