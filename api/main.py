# api/main.py
import logging

from fastapi import FastAPI

from api.order_api import create_order_router
from api.settings import Settings, load_settings

from repositories.mock_order_events import MOCK_ORDER_EVENTS
from repositories.mock_orders import MOCK_ORDERS
from repositories.order_repository import (
    InMemoryOrderEventRepository,
    InMemoryOrderRepository,
    OrderRepository,
)

from services.order_service import OrderService
from services.order_submission import OrderSubmissionService
from services.stats_service import StatsService

logger = logging.getLogger(__name__)


def create_app(
        settings: Settings | None = None,
        order_repo: OrderRepository | None = None,
        event_repo: InMemoryOrderEventRepository | None = None,
) -> FastAPI:
    settings = settings or load_settings()

    # ----------------------------------------------------------
    # 저장소 (기본: 정적 목업 데이터)
    # ----------------------------------------------------------
    if order_repo is None:
        order_repo = InMemoryOrderRepository(MOCK_ORDERS)
    if event_repo is None:
        event_repo = InMemoryOrderEventRepository(MOCK_ORDER_EVENTS)

    order_service = OrderService(order_repo)
    submission_service = OrderSubmissionService(order_repo)
    stats_service = StatsService(order_repo, settings)

    # ----------------------------------------------------------
    # FastAPI 기본 설정
    # ----------------------------------------------------------
    app = FastAPI(
        title="Mesh Mock Order Server",
        description="0x Mesh 주문 조회 / 제출 목업 API 서버",
        version="1.0.0",
    )

    app.include_router(create_order_router(
        order_service, submission_service, stats_service, event_repo, settings,
    ))

    @app.get("/health")
    def health():
        return {"status": "api ok"}

    logger.info(
        "Mesh mock server ready: %d orders, chain %d",
        len(order_repo.all_orders()), settings.chain_id,
    )
    return app


_settings = load_settings()
logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app(_settings)
