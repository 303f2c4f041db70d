"""
consumer.py — subscribe to a topic and print every new message.

    simple-consumer <topicName> <groupId>

Type "exit" to stop.
"""
from __future__ import annotations
import sys
from typing import List, Optional

from .config import Settings
from .control import ControlChannel
from .subscription import SubscriptionLoop


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: simple-consumer <topicName> <groupId>", file=sys.stderr)
        return 1

    topic_name, group_id = args
    loop = SubscriptionLoop(topic_name, group_id, settings=Settings.from_env())
    ControlChannel(loop).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
