# api/order_api.py
import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from api.settings import Settings
from repositories.order_repository import InMemoryOrderEventRepository
from services.errors import OrderQueryError
from services.order_models import (
    AddOrdersResults,
    NewOrder,
    OrderEvent,
    OrderFilter,
    OrderSort,
    OrderWithMetadata,
    Stats,
)
from services.order_service import OrderService
from services.order_sorting import DEFAULT_SORT
from services.order_submission import OrderSubmissionService
from services.stats_service import StatsService

logger = logging.getLogger(__name__)


# -----------------------------
# Pydantic 요청 모델
# -----------------------------
class OrdersQuery(BaseModel):
    """orders(sort, filters, limit). sort 생략 시 hash ASC, limit 생략 시 설정 기본값"""

    sort: list[OrderSort] | None = None
    filters: list[OrderFilter] = []
    limit: int | None = None


class AddOrdersRequest(BaseModel):
    orders: list[NewOrder]
    pinned: bool = True


# -----------------------------
# 라우터 팩토리
# -----------------------------
def create_order_router(
        order_service: OrderService,
        submission_service: OrderSubmissionService,
        stats_service: StatsService,
        event_repo: InMemoryOrderEventRepository,
        settings: Settings,
):
    """
    GET  /order/{hash}   → 단건 조회 (없으면 null)
    POST /orders         → filter / sort / limit 목록 조회
    POST /orders/add     → addOrders (stub 분류기)
    GET  /stats          → Mesh stats
    GET  /order-events   → 주문 이벤트 목록
    """

    router = APIRouter()

    # -------------------------------------------------------
    # 1) 단건 조회
    # -------------------------------------------------------
    @router.get("/order/{order_hash}", response_model=OrderWithMetadata | None)
    def get_order(order_hash: str):
        return order_service.get_by_hash(order_hash)

    # -------------------------------------------------------
    # 2) 목록 조회
    # -------------------------------------------------------
    @router.post("/orders", response_model=list[OrderWithMetadata])
    def list_orders(query: OrdersQuery):
        sort = DEFAULT_SORT if query.sort is None else query.sort
        limit = settings.default_orders_limit if query.limit is None else query.limit

        if limit > settings.max_orders_limit:
            logger.info("[OrderAPI] limit %d clamped to %d", limit, settings.max_orders_limit)
            limit = settings.max_orders_limit

        try:
            return order_service.list_orders(query.filters, sort, limit)
        except OrderQueryError as e:
            logger.warning("[OrderAPI] rejected orders query: %s", e)
            raise HTTPException(status_code=400, detail=str(e))

    # -------------------------------------------------------
    # 3) 주문 제출
    # -------------------------------------------------------
    @router.post("/orders/add", response_model=AddOrdersResults)
    def add_orders(body: AddOrdersRequest):
        return submission_service.add_orders(body.orders, pinned=body.pinned)

    # -------------------------------------------------------
    # 4) stats
    # -------------------------------------------------------
    @router.get("/stats", response_model=Stats)
    def get_stats():
        return stats_service.get_stats()

    # -------------------------------------------------------
    # 5) 주문 이벤트
    # -------------------------------------------------------
    @router.get("/order-events", response_model=list[OrderEvent])
    def list_order_events():
        return list(event_repo.all_events())

    return router
