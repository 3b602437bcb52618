# repositories/mock_order_events.py
from repositories.mock_orders import EXCHANGE_ADDRESS, MOCK_ORDERS, NULL_ADDRESS
from services.order_models import OrderEvent


def _cancel_event(order, block_hash, tx_hash, tx_index):
    return {
        "blockHash": block_hash,
        "txHash": tx_hash,
        "txIndex": tx_index,
        "logIndex": 0,
        "isRemoved": False,
        "address": EXCHANGE_ADDRESS,
        "kind": "ExchangeCancelEvent",
        "parameters": {
            "makerAddress": order.maker_address,
            "senderAddress": NULL_ADDRESS,
            "feeRecipientAddress": order.fee_recipient_address,
            "orderHash": order.hash,
            "makerAssetData": order.maker_asset_data,
            "takerAssetData": order.taker_asset_data,
        },
    }


def _fill_event(order, block_hash, tx_hash, tx_index, filled):
    return {
        "blockHash": block_hash,
        "txHash": tx_hash,
        "txIndex": tx_index,
        "logIndex": 2,
        "isRemoved": False,
        "address": EXCHANGE_ADDRESS,
        "kind": "ExchangeFillEvent",
        "parameters": {
            "makerAddress": order.maker_address,
            "takerAddress": "0x8ed95d1746bf1e4dab58d8ed4724f1ef95b20db0",
            "senderAddress": NULL_ADDRESS,
            "feeRecipientAddress": order.fee_recipient_address,
            "orderHash": order.hash,
            "takerAssetFilledAmount": filled,
        },
    }


_RAW_EVENTS = [
    {
        "timestamp": "2020-06-19T01:03:15.000Z",
        "order": MOCK_ORDERS[0],
        "endState": "CANCELLED",
        "contractEvents": [
            _cancel_event(
                MOCK_ORDERS[0],
                "0x1be2eb6174dbf0458686bdae44c9a330d9a9eb563962512a7be545c4ec11a4d2",
                "0xbcce172374dbf0458686bdae44c9a330d9a9eb563962512a7be545c4ec232e3a",
                23,
            ),
        ],
    },
    {
        "timestamp": "2020-06-19T01:07:42.000Z",
        "order": MOCK_ORDERS[1],
        "endState": "FILLED",
        "contractEvents": [
            _fill_event(
                MOCK_ORDERS[1],
                "0x5d0a2c81e3f94b76a1c8e2d05f7b3a9640e1d8c27b5f3a9e0c6d4b1f8a2e7c93",
                "0x7e3b1f9d0a6c42e85b9d1f7a3c0e6b24d8f5a1c97e3b0d6f2a8c4e1b9d7f5a30",
                41,
                "540000000000000000",
            ),
        ],
    },
    {
        "timestamp": "2020-06-19T01:12:03.000Z",
        "order": MOCK_ORDERS[4],
        "endState": "FULLY_FILLED",
        "contractEvents": [
            _fill_event(
                MOCK_ORDERS[4],
                "0xa94c2e7b1d06f83e5c9a2b7d0f4e1c68b3a5d9f2e07c4b1a8d6f3e9c2b5a7d04",
                "0x2c8f6a0d4e1b97c35a7e0d2f8b6c4a19e5d3b7f0c2a8e6d4b1f9c7a5e3d0b862",
                7,
                "1001500000000000000000",
            ),
        ],
    },
]

MOCK_ORDER_EVENTS = [OrderEvent.model_validate(raw) for raw in _RAW_EVENTS]
