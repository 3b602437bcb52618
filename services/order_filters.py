# services/order_filters.py
import operator
from collections.abc import Mapping
from typing import Callable, Iterable

from services.errors import FieldNotFilterable, InvalidFilterKind, InvalidFilterValue
from services.order_fields import lookup_accessor
from services.order_models import FilterKind, OrderWithMetadata

Predicate = Callable[[OrderWithMetadata], bool]

_COMPARATORS = {
    FilterKind.EQUAL: operator.eq,
    FilterKind.NOT_EQUAL: operator.ne,
    FilterKind.GREATER: operator.gt,
    FilterKind.GREATER_OR_EQUAL: operator.ge,
    FilterKind.LESS: operator.lt,
    FilterKind.LESS_OR_EQUAL: operator.le,
}


def spec_attr(spec, name):
    """OrderFilter/OrderSort 모델 또는 dict 에서 항목을 꺼낸다"""
    if isinstance(spec, Mapping):
        return spec.get(name)
    return getattr(spec, name, None)


def compile_filter(spec) -> Predicate:
    """
    단일 필터 (field, kind, value) → predicate(order)
    잘못된 kind / field / value 는 여기서 바로 예외
    """
    kind_raw = spec_attr(spec, "kind")
    try:
        kind = FilterKind(kind_raw)
    except ValueError:
        raise InvalidFilterKind(kind_raw) from None

    field = spec_attr(spec, "field")
    accessor = lookup_accessor(field, FieldNotFilterable)

    raw_value = spec_attr(spec, "value")
    value = accessor.coerce(raw_value)
    if value is None:
        raise InvalidFilterValue(accessor.field.value, raw_value)

    compare = _COMPARATORS[kind]

    def matches(order: OrderWithMetadata) -> bool:
        return compare(accessor.read(order), value)

    return matches


def compile_filters(filters: Iterable) -> Predicate:
    """
    필터 리스트 → 모든 필터를 AND 한 predicate
    빈 리스트면 모든 주문 통과
    """
    predicates = [compile_filter(spec) for spec in filters or []]

    def matches_all(order: OrderWithMetadata) -> bool:
        for predicate in predicates:
            if not predicate(order):
                return False
        return True

    return matches_all
