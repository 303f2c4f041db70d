# simple_kafka/subscription.py
"""
SubscriptionLoop — prints every message of one topic until stopped.

The loop thread spends its life blocked in poll(). Stopping it is done by
interrupting the client it owns, which makes the current (or next) poll()
raise ConsumerInterrupted; the loop then closes the client and exits.
A batch already returned by poll() is always printed in full.
"""
from __future__ import annotations
import logging
import sys
import threading
from typing import Callable, Optional, TextIO

from .client import ConsumerInterrupted, WakeableConsumer
from .config import Settings
from .models import LoopState

log = logging.getLogger(__name__)

CLOSED_NOTICE = "After closing consumer"


class SubscriptionLoop:
    def __init__(
        self,
        topic: str,
        group_id: str,
        *,
        settings: Optional[Settings] = None,
        client_factory: Optional[Callable[[str], object]] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.topic = topic
        self.group_id = group_id
        self.settings = settings or Settings()
        self._client_factory = client_factory or (lambda group_id: WakeableConsumer.connect(self.settings, group_id))
        self._out = out
        self._client = None
        self._state = LoopState.CREATED
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> LoopState:
        return self._state

    def start(self) -> None:
        with self._lock:
            if self._state is not LoopState.CREATED:
                raise RuntimeError(f"subscription loop already started (state={self._state.value})")
            self._state = LoopState.RUNNING
            self._thread = threading.Thread(
                target=self._run,
                name=f"simple-{self.topic}-{self.group_id}",
                daemon=True,
            )
        self._thread.start()

    def request_stop(self) -> None:
        with self._lock:
            if self._state is not LoopState.RUNNING:
                return
            self._state = LoopState.STOP_REQUESTED
            client = self._client
        # No client yet: _run() sees STOP_REQUESTED once it has built one.
        if client is not None:
            client.interrupt()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ---------- loop thread ----------
    def _run(self) -> None:
        client = None
        try:
            client = self._client_factory(self.group_id)
            with self._lock:
                self._client = client
                stop_pending = self._state is LoopState.STOP_REQUESTED
            if stop_pending:
                client.interrupt()
            client.subscribe([self.topic])
            log.info("Consumer started topic=%s group=%s", self.topic, self.group_id)
            while True:
                for message in client.poll(self.settings.poll_timeout_ms):
                    self._write(message.value)
        except ConsumerInterrupted:
            log.info("Consumer stopping topic=%s group=%s", self.topic, self.group_id)
        except Exception as e:
            log.exception("Consumer failed topic=%s group=%s: %s", self.topic, self.group_id, e)
        finally:
            if client is not None:
                self._close(client)
            with self._lock:
                self._state = LoopState.STOPPED

    def _close(self, client) -> None:
        try:
            client.close()
        except Exception as e:
            log.exception("Failed closing consumer topic=%s group=%s: %s", self.topic, self.group_id, e)
            return
        log.info("Consumer closed topic=%s group=%s", self.topic, self.group_id)
        try:
            self._write(CLOSED_NOTICE)
        except Exception as e:
            log.warning("Could not write close notice: %s", e)

    def _write(self, line: str) -> None:
        out = self._out or sys.stdout
        out.write(line + "\n")
        out.flush()
