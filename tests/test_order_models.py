"""
Tests for order record validation.

Numeric protocol fields are decimal strings (uint256), and the remaining
fillable amount can never exceed the taker asset amount. Malformed records
fail at construction so they can never break a query later.
"""

import pytest
from pydantic import ValidationError

from repositories.mock_orders import MOCK_ORDERS
from repositories.order_repository import InMemoryOrderRepository
from services.order_models import Order, OrderWithMetadata
from services.order_service import OrderService
from services.stats_service import StatsService


def _raw(**overrides):
    raw = MOCK_ORDERS[0].model_dump(by_alias=True)
    raw.update(overrides)
    return raw


def test_mock_order_round_trips_through_validation():
    order = OrderWithMetadata.model_validate(_raw())

    assert order == MOCK_ORDERS[0]


@pytest.mark.parametrize(
    "field",
    [
        "makerAssetAmount",
        "makerFee",
        "takerAssetAmount",
        "takerFee",
        "expirationTimeSeconds",
        "salt",
        "remainingFillableTakerAssetAmount",
    ],
)
@pytest.mark.parametrize("value", ["lots", "", "-1", "1.5", "1e18", "1" * 79])
def test_numeric_fields_must_be_uint256_decimal_strings(field, value):
    with pytest.raises(ValidationError):
        OrderWithMetadata.model_validate(_raw(**{field: value}))


def test_core_order_rejects_non_decimal_fee():
    raw = _raw(makerFee="lots")
    raw.pop("hash")
    raw.pop("remainingFillableTakerAssetAmount")

    with pytest.raises(ValidationError):
        Order.model_validate(raw)


def test_remaining_amount_cannot_exceed_taker_amount():
    with pytest.raises(ValidationError, match="remainingFillableTakerAssetAmount"):
        OrderWithMetadata.model_validate(_raw(
            takerAssetAmount="100",
            remainingFillableTakerAssetAmount="101",
        ))


def test_remaining_amount_bounds_are_inclusive():
    full = OrderWithMetadata.model_validate(_raw(
        takerAssetAmount="100", remainingFillableTakerAssetAmount="100",
    ))
    empty = OrderWithMetadata.model_validate(_raw(
        takerAssetAmount="100", remainingFillableTakerAssetAmount="0",
    ))

    assert full.remaining_fillable_taker_asset_amount == "100"
    assert empty.remaining_fillable_taker_asset_amount == "0"


def test_validated_store_answers_numeric_queries_and_stats(settings):
    records = [
        OrderWithMetadata.model_validate(_raw(hash="0x01", makerFee="0")),
        OrderWithMetadata.model_validate(_raw(hash="0x02", makerFee="7", expirationTimeSeconds="1700000000")),
    ]
    repo = InMemoryOrderRepository(records)

    result = OrderService(repo).list_orders(
        filters=[{"field": "makerFee", "kind": "EQUAL", "value": "0"}], limit=10,
    )
    stats = StatsService(repo, settings).get_stats()

    assert [o.hash for o in result] == ["0x01"]
    assert stats.max_expiration_time == "1700000000"
