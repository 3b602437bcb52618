# services/order_service.py
import logging
from functools import cmp_to_key

from services.order_filters import compile_filters
from services.order_sorting import compile_sort

logger = logging.getLogger(__name__)


class OrderService:
    """
    OrderService
    -----------------------
    - OrderRepository 위에서 동작하는 주문 쿼리 엔진
    - 단건 조회 (hash) / 목록 조회 (filter → sort → limit)
    - 저장소의 주문은 읽기만 한다
    """

    def __init__(self, order_repo):
        self.order_repo = order_repo

    # ---------------------------------------------------------
    # 단건 조회
    # ---------------------------------------------------------
    def get_by_hash(self, order_hash: str):
        """없으면 None (에러 아님)"""
        return self.order_repo.get_by_hash(order_hash)

    # ---------------------------------------------------------
    # 목록 조회
    # ---------------------------------------------------------
    def list_orders(self, filters=(), sort=(), limit: int = 20):
        """
        1) filter / sort 스펙 컴파일 (잘못된 스펙이면 여기서 실패)
        2) 저장소 순서대로 필터링
        3) 안정 정렬
        4) 앞에서 limit 개
        """
        filters = list(filters or [])
        sort = list(sort or [])
        matches = compile_filters(filters)
        compare = compile_sort(sort)

        if limit <= 0:
            return []

        matched = [order for order in self.order_repo.all_orders() if matches(order)]
        ordered = sorted(matched, key=cmp_to_key(compare))
        result = ordered[:limit]

        logger.debug(
            "[OrderService] list_orders filters=%d sort=%d limit=%d matched=%d returned=%d",
            len(filters), len(sort), limit, len(matched), len(result),
        )
        return result
