from dataclasses import dataclass
from typing import Any, Optional

@dataclass(frozen=True)
class RequestTicket:
    seq: int
    key: Any = None

class RequestTracker:
    """
    Tags the fetches of one view with increasing sequence numbers.
    Only the most recently issued ticket is current; responses carrying an
    older ticket are stale and must not be displayed.
    """
    def __init__(self):
        self._seq = 0
        self._latest: Optional[RequestTicket] = None

    def issue(self, key: Any = None) -> RequestTicket:
        self._seq += 1
        self._latest = RequestTicket(self._seq, key)
        return self._latest

    def is_current(self, ticket: RequestTicket) -> bool:
        return self._latest is not None and ticket.seq == self._latest.seq

    @property
    def latest(self) -> Optional[RequestTicket]:
        return self._latest
