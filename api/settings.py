# api/settings.py
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    version: str
    chain_id: int
    peer_id: str
    pub_sub_topic: str
    rendezvous: str
    default_orders_limit: int
    max_orders_limit: int
    log_level: str


# ----------------------------------------------------------
# 환경변수 → Settings
# ----------------------------------------------------------
def load_settings() -> Settings:
    chain_id = int(os.getenv("MESH_CHAIN_ID", "1"))
    return Settings(
        version=os.getenv("MESH_VERSION", "development"),
        chain_id=chain_id,
        peer_id=os.getenv("MESH_PEER_ID", "16Uiu2HAmGx8Z6gdq5T5AQE54GMtqDhDFhizywTy1o28NJbAMMumF"),
        pub_sub_topic=os.getenv("MESH_PUBSUB_TOPIC", f"/0x-orders/network/{chain_id}/version/1"),
        rendezvous=os.getenv("MESH_RENDEZVOUS", f"/0x-mesh/network/{chain_id}/version/1"),
        default_orders_limit=int(os.getenv("DEFAULT_ORDERS_LIMIT", "20")),
        max_orders_limit=int(os.getenv("MAX_ORDERS_LIMIT", "1000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
