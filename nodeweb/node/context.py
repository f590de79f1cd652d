"""
Node Context
============

Identity of this node plus the SSC participation flag.

The flag is the only mutable state the gateway writes. It is read by the SSC
engine before it runs its protocol steps and written by the toggle endpoint.
"""

import threading
from dataclasses import dataclass, field


class ParticipationFlag:
    """
    Process-wide boolean cell.

    Every get()/set() happens under one lock, so a reader always sees the last
    completed write in full. set() is a blind overwrite: concurrent writers
    resolve as last-write-wins.
    """

    def __init__(self, initial: bool = True):
        self._value = bool(initial)
        self._lock = threading.Lock()

    def get(self) -> bool:
        with self._lock:
            return self._value

    def set(self, enable: bool) -> None:
        with self._lock:
            self._value = bool(enable)

    def __bool__(self):
        return self.get()

    def __repr__(self):
        return f"ParticipationFlag({self.get()})"


@dataclass(frozen=True)
class NodeContext:
    """
    Per-process node context, built once at startup.

    Attributes:
        public_key: This node's public key (hex string)
        participate_ssc: Whether this node takes part in SSC
    """
    public_key: str
    participate_ssc: ParticipationFlag = field(default_factory=ParticipationFlag)
