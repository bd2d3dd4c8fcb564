"""Payment method strategy interface.

Each world part talks to one legacy protocol. A strategy implements the whole
operation set for one protocol so the service can route every call without
checking the market again.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Union

from ...adapters.ovh.client import ApiClient, AvailableAutomaticPaymentMeansResource
from ...config import MarketConfig
from ...logger import logger
from ...models import NavigationMode, PaymentMeanOptions, PaymentMethod, PaymentMethodType
from .transform import Translate, identity_translate, type_to_payment_method_type

Navigate = Callable[[str, NavigationMode], Any]
LegacyPaymentMethod = Union[PaymentMethod, Dict[str, Any]]


def raw_record(payment_method: LegacyPaymentMethod) -> Dict[str, Any]:
  """Get the backend record of a raw or unified payment method."""
  if isinstance(payment_method, PaymentMethod):
    return payment_method.original
  return payment_method


class PaymentMethodStrategy(ABC):
  """Operations every legacy payment protocol must answer."""

  def __init__(
    self,
    client: ApiClient,
    target: str,
    translate: Optional[Translate] = None,
    navigate: Optional[Navigate] = None,
  ):
    self.client = client
    self.target = target
    self.translate = translate or identity_translate
    self.navigate = navigate
    self.available_means_resource = AvailableAutomaticPaymentMeansResource(client)

  @abstractmethod
  async def get_payment_methods(
    self, options: PaymentMeanOptions
  ) -> List[Union[Dict[str, Any], PaymentMethod]]:
    """List the payment methods of the logged user."""
    pass

  @abstractmethod
  async def add_payment_method(self, payment_type: str, params: Dict[str, Any]) -> Any:
    """Register a new payment method of given type."""
    pass

  @abstractmethod
  async def edit_payment_method(
    self, payment_method: LegacyPaymentMethod, params: Optional[Dict[str, Any]]
  ) -> Any:
    pass

  @abstractmethod
  async def set_payment_method_as_default(
    self, payment_method: LegacyPaymentMethod
  ) -> Any:
    pass

  @abstractmethod
  async def challenge_payment_method(
    self, payment_method: LegacyPaymentMethod, challenge: Any
  ) -> Any:
    pass

  @abstractmethod
  async def delete_payment_method(self, payment_method: LegacyPaymentMethod) -> Any:
    pass

  async def get_available_payment_method_types(self) -> List[PaymentMethodType]:
    """
    Get the payment method types the user can register.

    Regroups the availability answered by the API with the market
    configuration: a type is kept only when the API reports it available AND
    the configuration flags it registerable.
    """
    infos = MarketConfig.get_payment_mean_types(self.target)
    available_means = await self.available_means_resource.get()

    registerable = []
    for payment_mean_infos in infos:
      if not available_means.get(payment_mean_infos["value"]):
        logger.debug(
          f"Payment type {payment_mean_infos['value']} not available for user",
          extra={"target": self.target, "payment_type": payment_mean_infos["value"]},
        )
        continue
      if not payment_mean_infos["registerable"]:
        continue
      registerable.append(payment_mean_infos)

    return [
      type_to_payment_method_type(payment_mean_infos, self.translate)
      for payment_mean_infos in registerable
    ]

  async def _navigate(self, url: str, mode: NavigationMode) -> None:
    if self.navigate is None:
      logger.warning(
        f"No navigation handler configured, cannot open {url}",
        extra={"target": self.target, "action": "navigate"},
      )
      return
    result = self.navigate(url, mode)
    if inspect.isawaitable(result):
      await result
