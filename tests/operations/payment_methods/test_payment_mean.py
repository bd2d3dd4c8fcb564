"""Tests for the EU/CA payment means strategy."""

from unittest.mock import AsyncMock, Mock

import pytest

from ovh_payment_method.exceptions import (
  UnsupportedMarketOperationError,
  UnsupportedPaymentTypeError,
)
from ovh_payment_method.models import NavigationMode, PaymentMeanOptions
from ovh_payment_method.operations.payment_methods import PaymentMeanStrategy


class TestResources:
  def test_one_resource_per_market_type(self, api_client_factory):
    strategy = PaymentMeanStrategy(api_client_factory({}), "EU")

    assert list(strategy.resources) == [
      "bankAccount",
      "paypal",
      "creditCard",
      "deferredPaymentAccount",
    ]
    assert strategy.resources["bankAccount"].name == "BankAccount"
    assert strategy.resources["deferredPaymentAccount"].route == (
      "/me/paymentMean/deferredPaymentAccount"
    )

  def test_unknown_type_rejected(self, api_client_factory):
    strategy = PaymentMeanStrategy(api_client_factory({}), "CA")

    with pytest.raises(UnsupportedPaymentTypeError) as exc_info:
      strategy.get_payment_mean_resource("bankAccount")

    assert exc_info.value.status == 400

  @pytest.mark.asyncio
  async def test_record_without_type_rejected(self, api_client_factory):
    client = api_client_factory({})
    strategy = PaymentMeanStrategy(client, "EU")

    with pytest.raises(UnsupportedPaymentTypeError):
      await strategy.delete_payment_mean({"id": 3})

    client.request.assert_not_called()


class TestGetPaymentMeans:
  @pytest.mark.asyncio
  async def test_only_valid_filters_bank_accounts(self, api_client_factory):
    seen_params = {}

    def ids_of(payment_type):
      def answer(params=None, json_data=None):
        seen_params[payment_type] = params
        return []

      return answer

    client = api_client_factory(
      {
        ("GET", f"/me/paymentMean/{payment_type}"): ids_of(payment_type)
        for payment_type in ("bankAccount", "paypal", "creditCard", "deferredPaymentAccount")
      }
    )
    strategy = PaymentMeanStrategy(client, "EU")

    await strategy.get_payment_means(PaymentMeanOptions(only_valid=True))

    assert seen_params == {
      "bankAccount": {"state": "valid"},
      "paypal": None,
      "creditCard": None,
      "deferredPaymentAccount": None,
    }

  @pytest.mark.asyncio
  async def test_without_only_valid_no_filter(self, api_client_factory, eu_routes):
    client = api_client_factory(eu_routes)
    strategy = PaymentMeanStrategy(client, "EU")

    await strategy.get_payment_means_of_type("bankAccount")

    client.request.assert_any_call("GET", "/me/paymentMean/bankAccount", params=None)

  @pytest.mark.asyncio
  async def test_records_tagged_without_mutation(
    self, api_client_factory, eu_routes
  ):
    served = eu_routes[("GET", "/me/paymentMean/paypal/21")]
    strategy = PaymentMeanStrategy(api_client_factory(eu_routes), "EU")

    result = await strategy.get_payment_means_of_type("paypal")

    assert result == [{**served, "paymentType": "paypal"}]
    assert "paymentType" not in served

  @pytest.mark.asyncio
  async def test_transform_keeps_original(self, api_client_factory, eu_routes):
    strategy = PaymentMeanStrategy(api_client_factory(eu_routes), "EU")

    result = await strategy.get_payment_means_of_type(
      "creditCard", PaymentMeanOptions(transform=True)
    )

    method = result[0]
    assert method.label == "XXXXXXXXXXXX1234"
    assert method.payment_sub_type == "visa"
    assert method.expiration_date == "2027-09-30"
    assert method.original["id"] == 31
    assert method.original["paymentType"] == "creditCard"

  @pytest.mark.asyncio
  async def test_empty_type_lists_nothing(self, api_client_factory):
    client = api_client_factory(
      {("GET", "/me/paymentMean/deferredPaymentAccount"): None}
    )
    strategy = PaymentMeanStrategy(client, "EU")

    assert await strategy.get_payment_means_of_type("deferredPaymentAccount") == []


class TestAddPaymentMean:
  @pytest.mark.asyncio
  async def test_bank_account_submits_set_default_and_never_navigates(
    self, api_client_factory
  ):
    answer = {"id": 99, "url": "https://mandate.example/sign", "validationType": "documentToSend"}
    client = api_client_factory({("POST", "/me/paymentMean/bankAccount"): answer})
    navigate = Mock()
    strategy = PaymentMeanStrategy(client, "EU", navigate=navigate)
    params = {"iban": "FR7630006000011234567890189", "bic": "AGRIFRPP", "default": True}

    result = await strategy.add_payment_mean("bankAccount", params)

    assert result == answer
    client.request.assert_called_once_with(
      "POST",
      "/me/paymentMean/bankAccount",
      json_data={
        "iban": "FR7630006000011234567890189",
        "bic": "AGRIFRPP",
        "setDefault": True,
      },
    )
    navigate.assert_not_called()
    # Caller params are left untouched
    assert params["default"] is True
    assert "setDefault" not in params

  @pytest.mark.asyncio
  async def test_url_opened_in_new_context_without_return_url(
    self, api_client_factory
  ):
    client = api_client_factory(
      {("POST", "/me/paymentMean/paypal"): {"id": 5, "url": "https://paypal.example/x"}}
    )
    navigate = Mock()
    strategy = PaymentMeanStrategy(client, "EU", navigate=navigate)

    await strategy.add_payment_mean("paypal", {"description": "Work"})

    navigate.assert_called_once_with("https://paypal.example/x", NavigationMode.NEW_CONTEXT)

  @pytest.mark.asyncio
  async def test_url_redirects_with_return_url(self, api_client_factory):
    client = api_client_factory(
      {("POST", "/me/paymentMean/creditCard"): {"id": 6, "url": "https://pay.example/cc"}}
    )
    navigate = AsyncMock()
    strategy = PaymentMeanStrategy(client, "CA", navigate=navigate)

    await strategy.add_payment_mean(
      "creditCard", {"returnUrl": "https://manager.example/back"}
    )

    navigate.assert_awaited_once_with("https://pay.example/cc", NavigationMode.REDIRECT)

  @pytest.mark.asyncio
  async def test_no_url_no_navigation(self, api_client_factory):
    client = api_client_factory({("POST", "/me/paymentMean/paypal"): {"id": 5}})
    navigate = Mock()
    strategy = PaymentMeanStrategy(client, "EU", navigate=navigate)

    await strategy.add_payment_mean("paypal", {})

    navigate.assert_not_called()

  @pytest.mark.asyncio
  async def test_missing_navigation_handler_is_tolerated(self, api_client_factory):
    answer = {"id": 5, "url": "https://paypal.example/x"}
    client = api_client_factory({("POST", "/me/paymentMean/paypal"): answer})
    strategy = PaymentMeanStrategy(client, "EU")

    assert await strategy.add_payment_mean("paypal", None) == answer


CARD = {"id": 1, "paymentType": "creditCard"}


class TestUSGuard:
  """Payment mean routes do not exist for the US world part."""

  @pytest.mark.asyncio
  @pytest.mark.parametrize(
    "operation,args,api_name",
    [
      ("get_payment_means", (), "getPaymentMeans"),
      ("get_payment_means_of_type", ("creditCard",), "getPaymentMeansOfType"),
      ("add_payment_mean", ("creditCard", {}), "addPaymentMean"),
      ("edit_payment_mean", (CARD, {}), "editPaymentMean"),
      ("set_payment_mean_as_default", (CARD,), "setPaymentMeanAsDefault"),
      ("delete_payment_mean", (CARD,), "deletePaymentMean"),
      ("challenge_payment_mean", (CARD, "1234"), "challengePaymentMean"),
    ],
  )
  async def test_every_operation_forbidden(
    self, api_client_factory, operation, args, api_name
  ):
    client = api_client_factory({})
    strategy = PaymentMeanStrategy(client, "US")

    with pytest.raises(UnsupportedMarketOperationError) as exc_info:
      await getattr(strategy, operation)(*args)

    assert exc_info.value.status == 403
    assert exc_info.value.message == f"{api_name} is not available for US world part"
    client.request.assert_not_called()
