import logging
from typing import Callable, List
from collections import deque

class LogStream(logging.Handler):
    """Keeps the latest log lines in memory and pushes new ones to listeners."""

    def __init__(self, maxlen: int = 100):
        super().__init__()
        self.listeners: List[Callable[[str], None]] = []
        self.buffer = deque(maxlen=maxlen)
        self.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S'))

    def emit(self, record):
        try:
            msg = self.format(record)
            self.buffer.append(msg)
        except Exception:
            self.handleError(record)
            return

        for listener in list(self.listeners):
            try:
                listener(msg)
            except Exception:
                # A broken listener (e.g. a closed UI element) is dropped
                self.unregister(listener)

    def register(self, listener: Callable[[str], None]):
        self.listeners.append(listener)

    def unregister(self, listener: Callable[[str], None]):
        if listener in self.listeners:
            self.listeners.remove(listener)

    def recent(self, limit: int = 50) -> List[str]:
        lines = list(self.buffer)
        return lines[-limit:] if limit else lines

log_stream = LogStream()
