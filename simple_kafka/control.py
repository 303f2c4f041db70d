# simple_kafka/control.py
from __future__ import annotations
import logging
import sys
from typing import Iterator, Optional, TextIO

from .subscription import SubscriptionLoop

log = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
STOPPING_NOTICE = "Stopping consumer..."


def read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens, blocking on the stream between lines."""
    for line in stream:
        yield from line.split()


class ControlChannel:
    """Runs on the main thread: waits for "exit", then stops and joins the loop."""

    def __init__(self, loop: SubscriptionLoop, *, stdin: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
        self._loop = loop
        self._stdin = stdin
        self._out = out

    def run(self) -> None:
        self._loop.start()
        self.wait_for_exit()
        self.shutdown()

    def wait_for_exit(self) -> None:
        try:
            for token in read_tokens(self._stdin or sys.stdin):
                if token == EXIT_COMMAND:
                    return
        except KeyboardInterrupt:
            log.info("Interrupted, shutting down")
            return
        log.info("End of input, shutting down")

    def shutdown(self) -> None:
        self._loop.request_stop()
        out = self._out or sys.stdout
        out.write(STOPPING_NOTICE + "\n")
        out.flush()
        try:
            self._loop.join()
        except KeyboardInterrupt:
            log.error("Interrupted while waiting for consumer topic=%s to stop", self._loop.topic)
