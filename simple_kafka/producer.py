"""
producer.py — publish every line typed on the console to a topic.

    simple-producer <topicName>

Sending is fire-and-forget: delivery reports are never inspected.
"""
from __future__ import annotations
import logging
import sys
from typing import List, Optional, TextIO

from confluent_kafka import KafkaException

from .client import get_producer, send
from .config import Settings
from .models import Message

log = logging.getLogger(__name__)

PROMPT = "Enter message (type exit to quit)"


class Publisher:
    def __init__(self, topic: str, producer, *, flush_timeout: float = 10.0) -> None:
        self.topic = topic
        self._producer = producer
        self._flush_timeout = flush_timeout

    def publish(self, line: str) -> None:
        try:
            send(self._producer, self.topic, Message(key=None, value=line))
        except (BufferError, KafkaException) as e:
            log.error("Failed queueing message for topic=%s: %s", self.topic, e)

    def run(self, stdin: TextIO, out: Optional[TextIO] = None) -> None:
        print(PROMPT, file=out or sys.stdout, flush=True)
        try:
            for raw in stdin:
                line = raw.rstrip("\r\n")
                if line == "exit":
                    break
                self.publish(line)
        finally:
            stdin.close()
            self.close()

    def close(self) -> None:
        remaining = self._producer.flush(self._flush_timeout)
        if remaining:
            log.warning("%s message(s) still undelivered for topic=%s", remaining, self.topic)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: simple-producer <topicName>", file=sys.stderr)
        return 1

    settings = Settings.from_env()
    publisher = Publisher(args[0], get_producer(settings), flush_timeout=settings.flush_timeout)
    publisher.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
