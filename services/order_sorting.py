# services/order_sorting.py
from typing import Callable, Iterable

from services.errors import FieldNotSortable, InvalidSortDirection
from services.order_fields import lookup_accessor
from services.order_filters import spec_attr
from services.order_models import OrderField, OrderSort, SortDirection, OrderWithMetadata

Comparator = Callable[[OrderWithMetadata, OrderWithMetadata], int]

# sort 인자를 생략했을 때 쿼리 인터페이스가 채우는 기본값
DEFAULT_SORT = (OrderSort(field=OrderField.HASH, direction=SortDirection.ASC),)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compile_sort_spec(spec) -> Comparator:
    direction_raw = spec_attr(spec, "direction")
    try:
        direction = SortDirection(direction_raw)
    except ValueError:
        raise InvalidSortDirection(direction_raw) from None

    accessor = lookup_accessor(spec_attr(spec, "field"), FieldNotSortable)
    sign = 1 if direction is SortDirection.ASC else -1

    def compare(a: OrderWithMetadata, b: OrderWithMetadata) -> int:
        return sign * _cmp(accessor.read(a), accessor.read(b))

    return compare


def compile_sort(sorts: Iterable) -> Comparator:
    """
    우선순위 순서의 정렬 스펙 → 3-way comparator (-1 / 0 / 1)
    첫 번째 스펙이 1차 키, 동률이면 다음 스펙으로 넘어간다
    스펙이 없으면 항상 0 (안정 정렬과 함께 쓰면 저장소 순서 유지)
    """
    comparators = [compile_sort_spec(spec) for spec in sorts or []]

    def compare_all(a: OrderWithMetadata, b: OrderWithMetadata) -> int:
        for compare in comparators:
            result = compare(a, b)
            if result != 0:
                return result
        return 0

    return compare_all
