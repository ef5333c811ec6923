# clientdesk: Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from clientdesk.core.ports.snapshot import SnapshotRepoPort
from clientdesk.core.ports.time import TimePort

__all__ = [
    "SnapshotRepoPort",
    "TimePort",
]
