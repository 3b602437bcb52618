# repositories/mock_orders.py
"""
Mesh 목업 주문 데이터 (hash 오름차순 정렬)

mainnet 0x v3 주문 형태를 흉내낸 정적 데이터.
signature 는 실제 서명이 아니다.
"""
from services.order_models import OrderWithMetadata

CHAIN_ID = 1
EXCHANGE_ADDRESS = "0x61935cbdd02287b511119ddb11aeb42f1593b7ef"
NULL_ADDRESS = "0x0000000000000000000000000000000000000000"

# ERC20 토큰 주소
WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"
ZRX = "0xe41d2489571d322189246dafa5ebde1f4699f498"
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
MANA = "0x0f5d2fb29fb7d3cfee444a200298f468908cc942"

# maker / fee recipient
MAKER_1 = "0x50f84bbee6fb250d6f49e854fa280445369d64d9"
MAKER_2 = "0x2e3b5c1d9f7a4b6c8d0e2f1a3b5c7d9e0f2a4b6c"
MAKER_3 = "0xd3e5a7c9b1f3d5e7a9c1b3d5f7e9a1c3b5d7f9e1"
MAKER_4 = "0x7c9e1a3b5d7f9e1c3a5b7d9f1e3c5a7b9d1f3e5a"
RADAR_RELAY = "0xa258b39954cef5cb142fd567a46cddb31a670124"
FEE_RECIPIENT_2 = "0x1000000000000000000000000000000000000011"


def erc20_asset_data(token_address: str) -> str:
    """ERC20Token(address) asset data 인코딩"""
    return "0xf47261b0" + "0" * 24 + token_address[2:].lower()


def _order(
    order_hash,
    maker,
    maker_token,
    maker_amount,
    taker_token,
    taker_amount,
    remaining,
    expiration,
    salt,
    fee_recipient=RADAR_RELAY,
    taker_fee="0",
):
    return {
        "chainId": CHAIN_ID,
        "exchangeAddress": EXCHANGE_ADDRESS,
        "makerAddress": maker,
        "makerAssetData": erc20_asset_data(maker_token),
        "makerAssetAmount": maker_amount,
        "makerFeeAssetData": "0x",
        "makerFee": "0",
        "takerAddress": NULL_ADDRESS,
        "takerAssetData": erc20_asset_data(taker_token),
        "takerAssetAmount": taker_amount,
        "takerFeeAssetData": erc20_asset_data(ZRX) if taker_fee != "0" else "0x",
        "takerFee": taker_fee,
        "senderAddress": NULL_ADDRESS,
        "feeRecipientAddress": fee_recipient,
        "expirationTimeSeconds": expiration,
        "salt": salt,
        "signature": "0x1b" + order_hash[2:] + order_hash[2:] + "02",
        "hash": order_hash,
        "remainingFillableTakerAssetAmount": remaining,
    }


_RAW_ORDERS = [
    _order(
        "0x06d15403630b6d83fbacbf0864eb76c2db3d6e6fc8adec8a95fc536593f17c53",
        MAKER_1, WETH, "50000000000000000", DAI, "11500000000000000000",
        "11500000000000000000", "1592600000",
        "1592518134117",
    ),
    _order(
        "0x0c4e8f7a12b9d3e65f0a7c21e8d4b6933a7f1c05d2e9b84f61c0a7d39b2e5f18",
        MAKER_2, DAI, "250000000000000000000", WETH, "1080000000000000000",
        "540000000000000000", "1592604000",
        "73605263957339214820438929217893846398521906426735893498113396104830458710651",
    ),
    _order(
        "0x1a2b9e44c07d1f3a88e5b2c64f913d0ea7c62b58e1f04d93b6a8e27c053d9f41",
        MAKER_3, ZRX, "1000000000000000000000", WETH, "1550000000000000000",
        "1550000000000000000", "1592690400",
        "1592518201554",
        FEE_RECIPIENT_2, "20000000000000000",
    ),
    _order(
        "0x23f6c8d19a0e4b72d5c13e8f6b27a094f1e8c35d0a9b7e264c3f81d5e72a6b09",
        MAKER_1, WETH, "2000000000000000000", USDC, "462000000",
        "462000000", "1592611200",
        "1592518266002",
    ),
    _order(
        "0x2f90b1e74d6c8a23e0b5f9173c8d2a649e71f0b3d5a42c861f7e3b90a6c4d258",
        MAKER_4, USDC, "1000000000", DAI, "1001500000000000000000",
        "0", "1592700000",
        "1592518302781",
    ),
    _order(
        "0x3b7e0d92f4a16c5827d9e3b0c1f8a4756e2d9b038a5f71c4e0b3d92674c1f8a3",
        MAKER_2, WETH, "100000000000000000000000", DAI, "23100000000000000000000000",
        "23100000000000000000000000", "1593000000",
        "1592518330415",
    ),
    _order(
        "0x45c2a8f0e19b7d365a0f4c82d7e6b1930c48f2a5b9d17e603f2a8c95e6d04b71",
        MAKER_3, MANA, "30000000000000000000000", WETH, "4200000000000000000",
        "4200000000000000000", "1592604000",
        "1592518377246",
        FEE_RECIPIENT_2, "10000000000000000",
    ),
    _order(
        "0x4e8a17c3b50f2d96e4c79a3108d5f6b2a3e91c745f0b8d26c7a43e19d82f6b05",
        MAKER_1, DAI, "500000000000000000000", USDC, "499000000",
        "250000000", "1592614800",
        "1592518400012",
    ),
    _order(
        "0x5a13f7e9c2d84b609f3e1a75b6c0d428e71f9a3c4b85d26e0a9c7f13e5b2d486",
        MAKER_4, WETH, "50000000000000000", ZRX, "32000000000000000000",
        "32000000000000000000", "1592622000",
        "1592518423991",
    ),
    _order(
        "0x63d9b2a8f0e47c15a8b3d96e2c71f0a4d95e8b371a6c4f02e8d7b953c0a16f24",
        MAKER_2, ZRX, "5000000000000000000000", DAI, "1750000000000000000000",
        "1750000000000000000000", "1592776800",
        "1592518467530",
    ),
    _order(
        "0x6f24e8c19d7a3b50c6f1e284a93d7b0e5f8c2a16e4b09d738c1f6e25b7a30d94",
        MAKER_3, USDC, "25000000", WETH, "108000000000000000",
        "108000000000000000", "1592608800",
        "1592518502276",
    ),
    _order(
        "0x78b5c3d0a2e69f147c3d8b21f0e5a96c2b4d71e89a6f03c5d1e8b7426f09a3c8",
        MAKER_1, WETH, "750000000000000000", DAI, "173250000000000000000",
        "86625000000000000000", "1592625600",
        "1592518549800",
    ),
    _order(
        "0x82e0f6a4d3b91c57e8a24f06b7c5d93e14a8f2b6c0d73e95a2f81b4c6d97e0a3",
        MAKER_4, DAI, "9000000000000000000", WETH, "39000000000000000",
        "39000000000000000", "1592604000",
        "1592518588143",
        FEE_RECIPIENT_2, "5000000000000000",
    ),
    _order(
        "0x8c6a2d17f5e03b984d1c7a62e9b8f05d3c6e1a94b7f28d05e41c9a763b0d8f2e",
        MAKER_2, WETH, "10000000000000000000", USDC, "2315000000",
        "2315000000", "1592697600",
        "1592518620930",
    ),
    _order(
        "0x96e6eb6174dbf0458686bdae44c9a330d9a9eb563962512a7be545c4ecc13fd4",
        MAKER_1, MANA, "12000000000000000000000", WETH, "1690000000000000000",
        "1690000000000000000", "1592611200",
        "1592518655407",
    ),
    _order(
        "0x9f41c8e3b27d0a56e9c3f18b4a6d2e07c5b19f830e7a4d62f3b8c15e9d20a7f4",
        MAKER_3, ZRX, "800000000000000000000", USDC, "283000000",
        "283000000", "1592629200",
        "1592518690064",
    ),
    _order(
        "0xa7d3e09b5c18f6a23e9b7d40c2f5a81e6b0d4c97e3a1f58d2c7b06e9f4d81a35",
        MAKER_4, WETH, "300000000000000000", MANA, "2150000000000000000000",
        "2150000000000000000000", "1592618400",
        "1592518723318",
    ),
    _order(
        "0xb1f8a26ce4073d95a6c2e1b80f9d4a73e57b3c219d08f6a4c3e15b7d2a96f0e8",
        MAKER_2, DAI, "40000000000000000000", ZRX, "113000000000000000000",
        "113000000000000000000", "1592636400",
        "1592518756779",
    ),
    _order(
        "0xbc05e7d329a8f16bd4e3c0729b1f6a58e2c8d40b7f35a9e106d2c8b4a9f3e751",
        MAKER_1, USDC, "150000000", WETH, "650000000000000000",
        "650000000000000000", "1592640000",
        "1592518790150",
        FEE_RECIPIENT_2, "15000000000000000",
    ),
    _order(
        "0xc6a9f2e08d31b74ce5f06a293b8c1d7e0a4f92b6d7e38c51f9b20a64e1c7d83f",
        MAKER_3, WETH, "5000000000000000000", DAI, "1157500000000000000000",
        "1157500000000000000000", "1592643600",
        "1592518812695",
    ),
    _order(
        "0xd0e3b8a5f72c41d96a8e0f3bc4d91e72b5f06a28e3c7d14b9a02f86e5d1b4c97",
        MAKER_4, DAI, "60000000000000000000", USDC, "59900000",
        "59900000", "1592647200",
        "1592518845337",
    ),
    _order(
        "0xdb72f4c90e6a1d83b9c5e2f74a03d86be1f79c25a8d40b6e3f92c1a7e06d5b84",
        MAKER_2, ZRX, "2500000000000000000000", WETH, "3850000000000000000",
        "1925000000000000000", "1592650800",
        "1592518879904",
    ),
    _order(
        "0xe5a8d1f63b94c07e2d6f8a13e9c4b7507f1a3e96d2b80c45a6e93f17c84b2d60",
        MAKER_1, WETH, "1500000000000000000", ZRX, "960000000000000000000",
        "960000000000000000000", "1592654400",
        "1592518911246",
    ),
    _order(
        "0xf03c9e72a6d51b84e7f2c90a5b3d8e16c94a0f7b2e61d3a8f5c07b921d8e4a36",
        MAKER_3, MANA, "45000000000000000000000", DAI, "1420000000000000000000",
        "1420000000000000000000", "1592658000",
        "1592518944871",
    ),
]

MOCK_ORDERS = [OrderWithMetadata.model_validate(raw) for raw in _RAW_ORDERS]
