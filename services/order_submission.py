# services/order_submission.py
import hashlib
import json
import logging

from services.order_models import (
    AcceptedOrderResult,
    AddOrdersResults,
    NewOrder,
    Order,
    OrderWithMetadata,
    RejectedOrderCode,
    RejectedOrderResult,
)

logger = logging.getLogger(__name__)


def compute_order_hash(order: Order) -> str:
    """
    주문의 결정적 placeholder hash
    - wire 필드를 정렬된 JSON 으로 직렬화한 뒤 SHA256
    - 0x 프로토콜의 EIP-712 order hash 가 아니다
    """
    payload = order.model_dump(by_alias=True, include=set(Order.model_fields))
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return "0x" + hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def _is_positive_amount(value: str) -> bool:
    # BigNumber 검증을 통과한 10진 문자열
    return int(value) > 0


class OrderSubmissionService:
    """
    addOrders 분류기 (stub)
    -----------------------
    서명 검증 / 잔고·allowance 확인 / 중복 감지 같은 실제 검증은 하지 않는다.
    결과 형태(accepted / rejected)만 고정하고, 판정은 금액 형식 체크뿐.
    저장소에 주문을 추가하지 않는다.
    """

    def __init__(self, order_repo):
        self.order_repo = order_repo

    def add_orders(self, orders: list[NewOrder], pinned: bool = True) -> AddOrdersResults:
        accepted = []
        rejected = []

        for order in orders:
            order_hash = compute_order_hash(order)
            core = Order.model_validate(order.model_dump(include=set(Order.model_fields)))

            if not _is_positive_amount(order.maker_asset_amount):
                rejected.append(RejectedOrderResult(
                    hash=order_hash,
                    order=core,
                    code=RejectedOrderCode.INVALID_MAKER_ASSET_AMOUNT,
                    message="order makerAssetAmount must be greater than zero",
                ))
                continue

            if not _is_positive_amount(order.taker_asset_amount):
                rejected.append(RejectedOrderResult(
                    hash=order_hash,
                    order=core,
                    code=RejectedOrderCode.INVALID_TAKER_ASSET_AMOUNT,
                    message="order takerAssetAmount must be greater than zero",
                ))
                continue

            materialized = OrderWithMetadata(
                **core.model_dump(),
                hash=order_hash,
                remaining_fillable_taker_asset_amount=order.taker_asset_amount,
            )
            accepted.append(AcceptedOrderResult(
                order=materialized,
                is_new=self.order_repo.get_by_hash(order_hash) is None,
            ))

        logger.info(
            "[OrderSubmission] add_orders pinned=%s accepted=%d rejected=%d",
            pinned, len(accepted), len(rejected),
        )
        return AddOrdersResults(accepted=accepted, rejected=rejected)
