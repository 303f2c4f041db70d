"""
simple_kafka — interactive Kafka producer/consumer pair.

  - simple-producer <topic>: every line typed becomes a message on <topic>
  - simple-consumer <topic> <group>: prints new messages until "exit" is typed

Install deps:
    pip install -e .
"""
from __future__ import annotations
import logging

log = logging.getLogger("simple_kafka")
if not log.handlers:
    log.setLevel(logging.INFO)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s"))
    log.addHandler(_handler)

__version__ = "0.1.0"
