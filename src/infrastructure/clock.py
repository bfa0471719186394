import threading
import time


class MonotonicClock:
    """Relógio do sistema baseado em `time.monotonic`."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """Relógio controlado manualmente, para testes e reprodução de sessões."""

    def __init__(self, start: float = 0.0) -> None:
        self._now: float = start
        self._lock: threading.Lock = threading.Lock()

    def now(self) -> float:
        with self._lock:
            return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError('ManualClock cannot go backwards')
        with self._lock:
            self._now += seconds
            return self._now

    def set(self, value: float) -> None:
        with self._lock:
            self._now = value
