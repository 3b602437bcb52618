# services/order_fields.py
import re
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable

from services.order_models import OrderField, OrderWithMetadata

# uint256 는 최대 78자리
_DECIMAL_RE = re.compile(r"^-?[0-9]{1,78}$")


@dataclass(frozen=True)
class FieldAccessor:
    """
    OrderField 하나에 대한 접근자
    - getter : 주문에서 원시 값을 꺼낸다
    - numeric: True 면 임의 정밀도 정수로 비교, False 면 hex 문자열 그대로 비교
    """

    field: OrderField
    getter: Callable[[OrderWithMetadata], Any]
    numeric: bool

    def read(self, order: OrderWithMetadata):
        raw = self.getter(order)
        if self.numeric:
            return int(raw)
        return raw

    def coerce(self, value):
        """필터 값을 필드 타입으로 변환. 변환 불가면 None."""
        if self.numeric:
            if isinstance(value, bool):
                return None
            if isinstance(value, int):
                return value
            if isinstance(value, str) and _DECIMAL_RE.match(value):
                return int(value)
            return None

        if isinstance(value, str):
            return value
        return None


def _numeric(field: OrderField, attr: str) -> FieldAccessor:
    return FieldAccessor(field, attrgetter(attr), True)


def _hex(field: OrderField, attr: str) -> FieldAccessor:
    return FieldAccessor(field, attrgetter(attr), False)


# ---------------------------------------------------------
# OrderField → 접근자 (닫힌 테이블)
# ---------------------------------------------------------
FIELD_ACCESSORS = {
    OrderField.HASH: _hex(OrderField.HASH, "hash"),
    OrderField.CHAIN_ID: _numeric(OrderField.CHAIN_ID, "chain_id"),
    OrderField.EXCHANGE_ADDRESS: _hex(OrderField.EXCHANGE_ADDRESS, "exchange_address"),
    OrderField.MAKER_ADDRESS: _hex(OrderField.MAKER_ADDRESS, "maker_address"),
    OrderField.MAKER_ASSET_DATA: _hex(OrderField.MAKER_ASSET_DATA, "maker_asset_data"),
    OrderField.MAKER_ASSET_AMOUNT: _numeric(OrderField.MAKER_ASSET_AMOUNT, "maker_asset_amount"),
    OrderField.MAKER_FEE_ASSET_DATA: _hex(OrderField.MAKER_FEE_ASSET_DATA, "maker_fee_asset_data"),
    OrderField.MAKER_FEE: _numeric(OrderField.MAKER_FEE, "maker_fee"),
    OrderField.TAKER_ADDRESS: _hex(OrderField.TAKER_ADDRESS, "taker_address"),
    OrderField.TAKER_ASSET_DATA: _hex(OrderField.TAKER_ASSET_DATA, "taker_asset_data"),
    OrderField.TAKER_ASSET_AMOUNT: _numeric(OrderField.TAKER_ASSET_AMOUNT, "taker_asset_amount"),
    OrderField.TAKER_FEE_ASSET_DATA: _hex(OrderField.TAKER_FEE_ASSET_DATA, "taker_fee_asset_data"),
    OrderField.TAKER_FEE: _numeric(OrderField.TAKER_FEE, "taker_fee"),
    OrderField.SENDER_ADDRESS: _hex(OrderField.SENDER_ADDRESS, "sender_address"),
    OrderField.FEE_RECIPIENT_ADDRESS: _hex(OrderField.FEE_RECIPIENT_ADDRESS, "fee_recipient_address"),
    OrderField.EXPIRATION_TIME_SECONDS: _numeric(
        OrderField.EXPIRATION_TIME_SECONDS, "expiration_time_seconds"
    ),
    OrderField.SALT: _numeric(OrderField.SALT, "salt"),
    OrderField.REMAINING_FILLABLE_TAKER_ASSET_AMOUNT: _numeric(
        OrderField.REMAINING_FILLABLE_TAKER_ASSET_AMOUNT,
        "remaining_fillable_taker_asset_amount",
    ),
}


def lookup_accessor(field, error_cls) -> FieldAccessor:
    """
    field(OrderField 또는 wire 이름 문자열)의 접근자를 반환
    OrderField 밖의 이름이면 error_cls(field) 를 던진다
    """
    try:
        key = OrderField(field)
    except ValueError:
        raise error_cls(field) from None
    return FIELD_ACCESSORS[key]
