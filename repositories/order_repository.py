# repositories/order_repository.py
import logging
from typing import Iterable, Sequence

from services.order_models import OrderEvent, OrderWithMetadata

logger = logging.getLogger(__name__)


class OrderRepository:
    """
    주문 저장소 인터페이스
    - all_orders()  : 저장소가 정한 순서의 전체 주문
    - get_by_hash() : hash 로 단건 조회 (없으면 None)
    쿼리 코어는 이 두 메서드만 사용한다
    """

    def all_orders(self) -> Sequence[OrderWithMetadata]:
        raise NotImplementedError

    def get_by_hash(self, order_hash: str) -> OrderWithMetadata | None:
        raise NotImplementedError


class InMemoryOrderRepository(OrderRepository):
    def __init__(self, orders: Iterable[OrderWithMetadata] = ()):
        self._snapshot = self._build_snapshot(orders)

    # -------------------------------------------
    # 스냅샷 생성 (주문 tuple + hash 인덱스)
    # -------------------------------------------
    @staticmethod
    def _build_snapshot(orders):
        orders = tuple(orders)
        index = {}
        for order in orders:
            if order.hash in index:
                raise ValueError(f"duplicate order hash: {order.hash}")
            index[order.hash] = order
        return orders, index

    # -------------------------------------------
    # 조회
    # -------------------------------------------
    def all_orders(self) -> Sequence[OrderWithMetadata]:
        orders, _ = self._snapshot
        return orders

    def get_by_hash(self, order_hash: str) -> OrderWithMetadata | None:
        _, index = self._snapshot
        return index.get(order_hash)

    def __len__(self):
        orders, _ = self._snapshot
        return len(orders)

    # -------------------------------------------
    # 스냅샷 교체
    # -------------------------------------------
    def replace(self, orders: Iterable[OrderWithMetadata]) -> None:
        """
        새 스냅샷을 만든 뒤 참조 하나로 교체
        읽는 쪽은 이전 또는 새 스냅샷 전체만 본다
        """
        snapshot = self._build_snapshot(orders)
        self._snapshot = snapshot
        logger.info("order snapshot replaced: %d orders", len(snapshot[0]))


class InMemoryOrderEventRepository:
    def __init__(self, events: Iterable[OrderEvent] = ()):
        self._events = tuple(events)

    def all_events(self) -> Sequence[OrderEvent]:
        return self._events
