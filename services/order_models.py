# services/order_models.py
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, model_validator
from pydantic.alias_generators import to_camel


# uint256 을 10진 문자열로 (최대 78자리)
BigNumber = Annotated[str, StringConstraints(pattern=r"^[0-9]{1,78}$")]


class MeshModel(BaseModel):
    """
    Mesh 주문 모델 공통 베이스
    - 파이썬 속성은 snake_case, wire 포맷은 camelCase
    - 생성 후 변경 불가 (쿼리 코어는 레코드를 읽기만 한다)
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ---------------------------------------------------------
# Enums
# ---------------------------------------------------------
class OrderField(str, Enum):
    """필터/정렬이 가능한 주문 필드 (wire 이름)"""

    HASH = "hash"
    CHAIN_ID = "chainId"
    EXCHANGE_ADDRESS = "exchangeAddress"
    MAKER_ADDRESS = "makerAddress"
    MAKER_ASSET_DATA = "makerAssetData"
    MAKER_ASSET_AMOUNT = "makerAssetAmount"
    MAKER_FEE_ASSET_DATA = "makerFeeAssetData"
    MAKER_FEE = "makerFee"
    TAKER_ADDRESS = "takerAddress"
    TAKER_ASSET_DATA = "takerAssetData"
    TAKER_ASSET_AMOUNT = "takerAssetAmount"
    TAKER_FEE_ASSET_DATA = "takerFeeAssetData"
    TAKER_FEE = "takerFee"
    SENDER_ADDRESS = "senderAddress"
    FEE_RECIPIENT_ADDRESS = "feeRecipientAddress"
    EXPIRATION_TIME_SECONDS = "expirationTimeSeconds"
    SALT = "salt"
    REMAINING_FILLABLE_TAKER_ASSET_AMOUNT = "remainingFillableTakerAssetAmount"


class FilterKind(str, Enum):
    EQUAL = "EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    GREATER = "GREATER"
    GREATER_OR_EQUAL = "GREATER_OR_EQUAL"
    LESS = "LESS"
    LESS_OR_EQUAL = "LESS_OR_EQUAL"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class RejectedOrderCode(str, Enum):
    # Mesh 전체 코드 중 일부만 정의
    ETH_RPC_REQUEST_FAILED = "ETH_RPC_REQUEST_FAILED"
    INVALID_MAKER_ASSET_AMOUNT = "INVALID_MAKER_ASSET_AMOUNT"
    INVALID_TAKER_ASSET_AMOUNT = "INVALID_TAKER_ASSET_AMOUNT"


class OrderEndState(str, Enum):
    ADDED = "ADDED"
    FILLED = "FILLED"
    FULLY_FILLED = "FULLY_FILLED"
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"
    INVALID = "INVALID"
    UNEXPIRED = "UNEXPIRED"
    UNFUNDED = "UNFUNDED"
    FILLABILITY_INCREASED = "FILLABILITY_INCREASED"
    STOPPED_WATCHING = "STOPPED_WATCHING"


# ---------------------------------------------------------
# 주문
# ---------------------------------------------------------
class Order(MeshModel):
    """서명된 0x v3 주문 (프로토콜 필드만)"""

    chain_id: int
    exchange_address: str
    maker_address: str
    maker_asset_data: str
    maker_asset_amount: BigNumber
    maker_fee_asset_data: str
    maker_fee: BigNumber
    taker_address: str
    taker_asset_data: str
    taker_asset_amount: BigNumber
    taker_fee_asset_data: str
    taker_fee: BigNumber
    sender_address: str
    fee_recipient_address: str
    expiration_time_seconds: BigNumber
    salt: BigNumber
    signature: str


class NewOrder(Order):
    """addOrders 입력 주문"""


class OrderWithMetadata(Order):
    hash: str
    remaining_fillable_taker_asset_amount: BigNumber

    @model_validator(mode="after")
    def _check_remaining(self):
        if int(self.remaining_fillable_taker_asset_amount) > int(self.taker_asset_amount):
            raise ValueError("remainingFillableTakerAssetAmount exceeds takerAssetAmount")
        return self


# ---------------------------------------------------------
# 쿼리 스펙
# ---------------------------------------------------------
class OrderFilter(MeshModel):
    field: OrderField
    kind: FilterKind
    value: int | str


class OrderSort(MeshModel):
    field: OrderField
    direction: SortDirection


# ---------------------------------------------------------
# addOrders 결과
# ---------------------------------------------------------
class AcceptedOrderResult(MeshModel):
    order: OrderWithMetadata
    is_new: bool


class RejectedOrderResult(MeshModel):
    hash: str | None = None
    order: Order
    code: RejectedOrderCode
    message: str


class AddOrdersResults(MeshModel):
    accepted: list[AcceptedOrderResult] = Field(default_factory=list)
    rejected: list[RejectedOrderResult] = Field(default_factory=list)


# ---------------------------------------------------------
# Stats
# ---------------------------------------------------------
class LatestBlock(MeshModel):
    number: str | None = None
    hash: str | None = None


class Stats(MeshModel):
    version: str | None = None
    pub_sub_topic: str | None = None
    rendezvous: str | None = None
    peer_id: str | None = Field(default=None, alias="peerID")
    ethereum_chain_id: int | None = Field(default=None, alias="ethereumChainID")
    latest_block: LatestBlock | None = None
    num_peers: int | None = None
    num_orders: int | None = None
    num_orders_including_removed: int | None = None
    start_of_current_utc_day: str | None = Field(default=None, alias="startOfCurrentUTCDay")
    eth_rpc_requests_sent_in_current_utc_day: int | None = Field(
        default=None, alias="ethRPCRequestsSentInCurrentUTCDay"
    )
    eth_rpc_rate_limit_expired_requests: int | None = Field(
        default=None, alias="ethRPCRateLimitExpiredRequests"
    )
    max_expiration_time: str | None = None


# ---------------------------------------------------------
# 주문 이벤트
# ---------------------------------------------------------
class ContractEvent(MeshModel):
    block_hash: str
    tx_hash: str
    tx_index: int
    log_index: int
    is_removed: bool
    address: str
    kind: str
    parameters: dict[str, Any] = Field(default_factory=dict)


class OrderEvent(MeshModel):
    timestamp: str  # RFC3339
    order: OrderWithMetadata
    end_state: OrderEndState
    contract_events: list[ContractEvent] = Field(default_factory=list)
