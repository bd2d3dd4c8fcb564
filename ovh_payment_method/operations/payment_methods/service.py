"""Payment method service.

Market-agnostic entry point for the legacy payment APIs:
- ``/me/paymentMean/*`` routes for EU and CA
- ``/me/paymentMethod`` route for US (decommissioned)

The target market is fixed at construction and selects the strategy that
answers every call.
"""

from typing import Any, Dict, List, Optional, Type, Union

from ...adapters.ovh.client import ApiClient, OvhApiClient
from ...config import MarketConfig, MarketTarget, env
from ...exceptions import InvalidMarketTargetError
from ...logger import logger
from ...models import PaymentMeanOptions, PaymentMethod, PaymentMethodType
from .base import LegacyPaymentMethod, Navigate, PaymentMethodStrategy
from .payment_mean import PaymentMeanStrategy
from .transform import Translate
from .us_payment_method import USPaymentMethodStrategy

# Market -> protocol
STRATEGIES: Dict[MarketTarget, Type[PaymentMethodStrategy]] = {
  MarketTarget.EU: PaymentMeanStrategy,
  MarketTarget.CA: PaymentMeanStrategy,
  MarketTarget.US: USPaymentMethodStrategy,
}


class PaymentMethodService:
  """Manage legacy payment methods of the logged user for one market."""

  def __init__(
    self,
    client: ApiClient,
    target: Optional[Union[str, MarketTarget]] = None,
    translate: Optional[Translate] = None,
    navigate: Optional[Navigate] = None,
    owns_client: bool = False,
  ):
    """
    Initialize the service.

    Args:
        client: Client performing the OVH API calls
        target: World part (EU, CA or US), defaults to PAYMENT_METHOD_TARGET
        translate: Translation lookup for type and status labels
        navigate: Effect opening validation URLs, called with (url, mode)
        owns_client: Close the client when the service is closed

    Raises:
        InvalidMarketTargetError: Unknown target
    """
    market = MarketConfig.normalize_target(
      target if target is not None else env.PAYMENT_METHOD_TARGET
    )
    if market is None:
      raise InvalidMarketTargetError(target)

    self.client = client
    self.owns_client = owns_client
    self.target = market.value
    self.strategy = STRATEGIES[market](
      client, self.target, translate=translate, navigate=navigate
    )
    logger.debug(
      f"Payment method service using {type(self.strategy).__name__}",
      extra={"target": self.target},
    )

  async def __aenter__(self):
    return self

  async def __aexit__(self, exc_type, exc_val, exc_tb):
    await self.close()

  async def close(self) -> None:
    """Close the API client if this service created it."""
    if not self.owns_client:
      return
    close = getattr(self.client, "close", None)
    if close is not None:
      await close()

  async def get_payment_methods(
    self, options: Optional[Union[PaymentMeanOptions, Dict[str, Any]]] = None
  ) -> List[Union[Dict[str, Any], PaymentMethod]]:
    """
    Get the legacy payment methods of the logged user.

    Args:
        options: Options for fetching payment methods (only_valid, transform)

    Returns:
        Payment means (EU/CA), always empty for US
    """
    return await self.strategy.get_payment_methods(PaymentMeanOptions.coerce(options))

  async def add_payment_method(
    self, payment_type: str, params: Optional[Dict[str, Any]] = None
  ) -> Any:
    """
    Register a new payment method.

    Args:
        payment_type: Backend payment type (bankAccount, creditCard, paypal, ...)
        params: Creation parameters (``default``, ``returnUrl``, ...)
    """
    return await self.strategy.add_payment_method(payment_type, dict(params or {}))

  async def edit_payment_method(
    self, payment_method: LegacyPaymentMethod, params: Optional[Dict[str, Any]] = None
  ) -> Any:
    """Edit a legacy payment method."""
    return await self.strategy.edit_payment_method(payment_method, params)

  async def set_payment_method_as_default(
    self, payment_method: LegacyPaymentMethod
  ) -> Any:
    """Set a legacy payment method as default."""
    return await self.strategy.set_payment_method_as_default(payment_method)

  async def challenge_payment_method(
    self, payment_method: LegacyPaymentMethod, challenge: Any
  ) -> Any:
    """Challenge a legacy payment method. Not available in the US."""
    return await self.strategy.challenge_payment_method(payment_method, challenge)

  async def delete_payment_method(self, payment_method: LegacyPaymentMethod) -> Any:
    """Delete a legacy payment method."""
    return await self.strategy.delete_payment_method(payment_method)

  async def get_available_payment_method_types(self) -> List[PaymentMethodType]:
    """
    Get the payment method types the user can register.

    Types not reported available by the API, or not registerable for the
    market, are left out.
    """
    return await self.strategy.get_available_payment_method_types()


def get_payment_method_service(
  target: Optional[str] = None,
  client: Optional[ApiClient] = None,
  translate: Optional[Translate] = None,
  navigate: Optional[Navigate] = None,
) -> PaymentMethodService:
  """
  Factory function building a service from the environment.

  Args:
      target: World part, defaults to PAYMENT_METHOD_TARGET
      client: API client, defaults to an OvhApiClient configured from env
          and closed with the service

  Returns:
      PaymentMethodService instance

  Raises:
      InvalidMarketTargetError: Unknown target, raised before any client is built
  """
  if target is not None and MarketConfig.normalize_target(target) is None:
    raise InvalidMarketTargetError(target)

  return PaymentMethodService(
    client or OvhApiClient(),
    target=target,
    translate=translate,
    navigate=navigate,
    owns_client=client is None,
  )
