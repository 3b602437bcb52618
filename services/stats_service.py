# services/stats_service.py
from datetime import datetime, timezone

from services.order_models import LatestBlock, Stats


class StatsService:
    """
    Mesh stats 스냅샷
    - 노드/네트워크 값은 설정과 고정값
    - numOrders 만 저장소에서 계산
    """

    def __init__(self, order_repo, settings):
        self.order_repo = order_repo
        self.settings = settings

    def get_stats(self) -> Stats:
        orders = self.order_repo.all_orders()
        num_orders = len(orders)
        max_expiration = max((int(o.expiration_time_seconds) for o in orders), default=0)

        return Stats(
            version=self.settings.version,
            pub_sub_topic=self.settings.pub_sub_topic,
            rendezvous=self.settings.rendezvous,
            peer_id=self.settings.peer_id,
            ethereum_chain_id=self.settings.chain_id,
            latest_block=LatestBlock(
                number="8253150",
                hash="0x84aaae84147fc42fc77b33e2d3e05d86272663792d9cacaa8dc89f207b4d0642",
            ),
            num_peers=18,
            num_orders=num_orders,
            num_orders_including_removed=num_orders,
            start_of_current_utc_day=self._start_of_utc_day(),
            eth_rpc_requests_sent_in_current_utc_day=0,
            eth_rpc_rate_limit_expired_requests=0,
            max_expiration_time=str(max_expiration),
        )

    # ----------------------------------------------------
    # 오늘 00:00 UTC (RFC3339)
    # ----------------------------------------------------
    @staticmethod
    def _start_of_utc_day() -> str:
        now = datetime.now(timezone.utc)
        start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        return start.strftime("%Y-%m-%dT%H:%M:%S.000Z")
