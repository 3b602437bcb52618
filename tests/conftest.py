"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import services...' works,
and provides order / store / client fixtures shared by the suite.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from fastapi.testclient import TestClient  # noqa: E402

from api.main import create_app  # noqa: E402
from api.settings import Settings  # noqa: E402
from repositories.mock_order_events import MOCK_ORDER_EVENTS  # noqa: E402
from repositories.mock_orders import MOCK_ORDERS  # noqa: E402
from repositories.order_repository import (  # noqa: E402
    InMemoryOrderEventRepository,
    InMemoryOrderRepository,
)
from services.order_service import OrderService  # noqa: E402


@pytest.fixture
def make_order():
    """Build an OrderWithMetadata from the first mock order with some fields overridden."""
    base = MOCK_ORDERS[0]

    def _make(**overrides):
        return base.model_copy(update=overrides)

    return _make


@pytest.fixture
def mock_repo():
    return InMemoryOrderRepository(MOCK_ORDERS)


@pytest.fixture
def order_service(mock_repo):
    return OrderService(mock_repo)


@pytest.fixture
def settings():
    return Settings(
        version="test",
        chain_id=1,
        peer_id="16Uiu2HAmTestPeer",
        pub_sub_topic="/0x-orders/network/1/version/1",
        rendezvous="/0x-mesh/network/1/version/1",
        default_orders_limit=20,
        max_orders_limit=22,
        log_level="DEBUG",
    )


@pytest.fixture
def client(settings, mock_repo):
    app = create_app(
        settings=settings,
        order_repo=mock_repo,
        event_repo=InMemoryOrderEventRepository(MOCK_ORDER_EVENTS),
    )
    return TestClient(app)
