from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: Optional[bytes] = None
    value: str


# One poll() worth of messages, possibly empty
PollBatch = List[Message]


class LoopState(str, Enum):
    CREATED = "created"
    RUNNING = "running"
    STOP_REQUESTED = "stop_requested"
    STOPPED = "stopped"
