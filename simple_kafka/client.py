# simple_kafka/client.py
"""
Broker clients used by the console programs.

kafka-python's KafkaConsumer has no wakeup(); WakeableConsumer adds one so a
thread blocked in poll() can be told to stop from another thread. The wakeup is
only seen between polls, so a bounded stop relies on KafkaConsumer.poll()
returning within timeout_ms (kafka-python >= 2.1; 2.0.x can block
indefinitely in coordinator lookup).
"""
from __future__ import annotations
import logging
import threading
from typing import Iterable, Optional

from confluent_kafka import Producer
from kafka import KafkaConsumer
from kafka.errors import KafkaError

from .config import Settings
from .models import Message, PollBatch

log = logging.getLogger(__name__)


class ConsumerInterrupted(KafkaError):
    """Raised by WakeableConsumer.poll() after interrupt() was called."""


def _decode_value(b: Optional[bytes]) -> str:
    return b.decode("utf-8", errors="replace") if b is not None else ""


class WakeableConsumer:
    def __init__(self, consumer) -> None:
        self._consumer = consumer
        self._wakeup = threading.Event()

    @classmethod
    def connect(cls, settings: Settings, group_id: str) -> "WakeableConsumer":
        consumer = KafkaConsumer(
            **settings.consumer_conf(group_id),
            key_deserializer=lambda b: b,
            value_deserializer=_decode_value,
        )
        log.info("Connected to %s group=%s client_id=%s", settings.bootstrap_servers, group_id, settings.client_id)
        return cls(consumer)

    def subscribe(self, topics: Iterable[str]) -> None:
        self._consumer.subscribe(topics=list(topics))

    def poll(self, timeout_ms: int) -> PollBatch:
        self._raise_if_woken()
        records = self._consumer.poll(timeout_ms=timeout_ms)
        batch = [
            Message(key=msg.key, value=msg.value)
            for tp_records in records.values()
            for msg in tp_records
        ]
        # Records fetched before the wakeup are handed out; it fires next call.
        if not batch:
            self._raise_if_woken()
        return batch

    def interrupt(self) -> None:
        """Abort the current or next poll(). Safe to call from any thread."""
        self._wakeup.set()

    def close(self) -> None:
        self._consumer.close()

    def _raise_if_woken(self) -> None:
        if self._wakeup.is_set():
            self._wakeup.clear()
            raise ConsumerInterrupted("consumer poll interrupted")


# --- Producer ---
def get_producer(settings: Settings) -> Producer:
    return Producer(settings.producer_conf())


def send(producer: Producer, topic: str, message: Message) -> None:
    """Queue message for delivery. Delivery results are not inspected."""
    producer.produce(topic, key=message.key, value=message.value.encode("utf-8"))
    producer.poll(0)
