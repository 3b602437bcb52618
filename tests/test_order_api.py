"""
End-to-end tests for the HTTP query surface using FastAPI's TestClient.
"""

import logging

from repositories.mock_order_events import MOCK_ORDER_EVENTS
from repositories.mock_orders import MOCK_ORDERS
from services.order_models import Order


def test_health(client):
    r = client.get("/health")

    assert r.status_code == 200
    assert r.json() == {"status": "api ok"}


def test_get_order_by_hash(client):
    target = MOCK_ORDERS[2]

    r = client.get(f"/order/{target.hash}")

    assert r.status_code == 200
    body = r.json()
    assert body["hash"] == target.hash
    assert body["makerAssetAmount"] == target.maker_asset_amount
    assert body["remainingFillableTakerAssetAmount"] == target.remaining_fillable_taker_asset_amount
    assert body["chainId"] == 1


def test_get_missing_order_returns_null(client):
    r = client.get("/order/0xdoesnotexist")

    assert r.status_code == 200
    assert r.json() is None


def test_orders_defaults(client):
    r = client.post("/orders", json={})

    assert r.status_code == 200
    hashes = [o["hash"] for o in r.json()]
    assert hashes == [o.hash for o in MOCK_ORDERS[:20]]


def test_orders_filter_sort_limit(client):
    r = client.post("/orders", json={
        "filters": [
            {"field": "makerAssetAmount", "kind": "GREATER_OR_EQUAL", "value": "50000000000000000"},
            {"field": "chainId", "kind": "EQUAL", "value": 1},
        ],
        "sort": [{"field": "makerAssetAmount", "direction": "DESC"}],
        "limit": 5,
    })

    assert r.status_code == 200
    amounts = [int(o["makerAssetAmount"]) for o in r.json()]
    assert len(amounts) == 5
    assert amounts == sorted(amounts, reverse=True)
    assert amounts[0] == max(int(o.maker_asset_amount) for o in MOCK_ORDERS)


def test_orders_explicit_empty_sort_keeps_store_order(client):
    r = client.post("/orders", json={"sort": [], "limit": 3})

    assert [o["hash"] for o in r.json()] == [o.hash for o in MOCK_ORDERS[:3]]


def test_orders_limit_is_clamped_to_max(client, settings):
    r = client.post("/orders", json={"limit": 500})

    assert r.status_code == 200
    assert len(r.json()) == settings.max_orders_limit


def test_orders_zero_and_negative_limit(client):
    assert client.post("/orders", json={"limit": 0}).json() == []
    assert client.post("/orders", json={"limit": -1}).json() == []


def test_orders_unknown_kind_is_rejected_at_boundary(client):
    r = client.post("/orders", json={
        "filters": [{"field": "hash", "kind": "LIKE", "value": "0x"}],
    })

    assert r.status_code == 422


def test_orders_unknown_field_is_rejected_at_boundary(client):
    r = client.post("/orders", json={
        "sort": [{"field": "signature", "direction": "ASC"}],
    })

    assert r.status_code == 422


def test_orders_bad_filter_value_maps_to_400(client):
    r = client.post("/orders", json={
        "filters": [{"field": "makerAssetAmount", "kind": "GREATER", "value": "lots"}],
    })

    assert r.status_code == 400
    assert "makerAssetAmount" in r.json()["detail"]


def test_add_orders(client):
    good = MOCK_ORDERS[3].model_dump(by_alias=True, include=set(Order.model_fields))
    good["salt"] = "9001"
    bad = dict(good, takerAssetAmount="0")

    r = client.post("/orders/add", json={"orders": [good, bad], "pinned": False})

    assert r.status_code == 200
    body = r.json()
    assert len(body["accepted"]) == 1
    assert body["accepted"][0]["isNew"] is True
    assert body["accepted"][0]["order"]["salt"] == "9001"
    assert body["accepted"][0]["order"]["remainingFillableTakerAssetAmount"] == good["takerAssetAmount"]
    assert len(body["rejected"]) == 1
    assert body["rejected"][0]["code"] == "INVALID_TAKER_ASSET_AMOUNT"
    assert body["rejected"][0]["hash"].startswith("0x")


def test_add_orders_requires_orders(client):
    r = client.post("/orders/add", json={})

    assert r.status_code == 422


def test_stats(client, settings):
    r = client.get("/stats")

    assert r.status_code == 200
    body = r.json()
    assert body["version"] == "test"
    assert body["ethereumChainID"] == 1
    assert body["peerID"] == settings.peer_id
    assert body["numOrders"] == len(MOCK_ORDERS)
    assert body["latestBlock"]["number"] == "8253150"
    assert body["startOfCurrentUTCDay"].endswith("T00:00:00.000Z")
    assert body["maxExpirationTime"] == str(max(int(o.expiration_time_seconds) for o in MOCK_ORDERS))


def test_order_events(client):
    r = client.get("/order-events")

    assert r.status_code == 200
    body = r.json()
    assert len(body) == len(MOCK_ORDER_EVENTS)
    assert body[0]["endState"] == "CANCELLED"
    assert body[0]["contractEvents"][0]["kind"] == "ExchangeCancelEvent"
    assert body[0]["order"]["hash"] == MOCK_ORDERS[0].hash


def test_orders_oversized_numeric_filter_maps_to_400(client):
    r = client.post("/orders", json={
        "filters": [{"field": "salt", "kind": "LESS", "value": "9" * 5000}],
    })

    assert r.status_code == 400
    assert "salt" in r.json()["detail"]


def test_hash_filter_is_exact_like_point_lookup(client):
    target = MOCK_ORDERS[4]
    upper = "0x" + target.hash[2:].upper()

    listed = client.post("/orders", json={
        "filters": [{"field": "hash", "kind": "EQUAL", "value": upper}],
    })
    single = client.get(f"/order/{upper}")

    assert listed.json() == []
    assert single.json() is None


def test_add_orders_with_non_decimal_fee_is_rejected_at_boundary(client):
    order = MOCK_ORDERS[3].model_dump(by_alias=True, include=set(Order.model_fields))
    order["makerFee"] = "abc"

    r = client.post("/orders/add", json={"orders": [order]})

    assert r.status_code == 422


def test_rejected_query_is_logged_by_router(client, caplog):
    with caplog.at_level(logging.WARNING, logger="api.order_api"):
        r = client.post("/orders", json={
            "filters": [{"field": "makerFee", "kind": "EQUAL", "value": "free"}],
        })

    assert r.status_code == 400
    assert any(
        rec.name == "api.order_api" and "rejected orders query" in rec.getMessage()
        for rec in caplog.records
    )
