# simple_kafka/config.py
from __future__ import annotations
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    """Broker connection settings shared by the producer and the consumer."""

    model_config = ConfigDict(frozen=True)

    bootstrap_servers: str = "localhost:9092"
    client_id: str = "simple"
    poll_timeout_ms: int = 100
    auto_offset_reset: str = "latest"
    flush_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP", "localhost:9092"),
            client_id=os.getenv("KAFKA_CLIENT_ID", "simple"),
            poll_timeout_ms=int(os.getenv("KAFKA_POLL_TIMEOUT_MS", "100")),
            auto_offset_reset=os.getenv("KAFKA_AUTO_OFFSET_RESET", "latest"),
            flush_timeout=float(os.getenv("KAFKA_FLUSH_TIMEOUT", "10.0")),
        )

    def consumer_conf(self, group_id: str) -> dict:
        # kafka-python keyword arguments
        return dict(
            bootstrap_servers=self.bootstrap_servers,
            group_id=group_id,
            client_id=self.client_id,
            auto_offset_reset=self.auto_offset_reset,
        )

    def producer_conf(self) -> dict:
        # librdkafka properties
        return {"bootstrap.servers": self.bootstrap_servers}
