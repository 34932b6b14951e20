import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("boggle")


class StageTimer:
    """Wall-clock timings, in milliseconds, for the named steps of one solve."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._created = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            # Repeated stages accumulate, e.g. one "solve" per board in a batch
            elapsed_ms = (time.perf_counter() - t0) * 1000
            self.timings[name] = round(self.timings.get(name, 0.0) + elapsed_ms, 2)
            logger.debug("stage=%s elapsed=%.2fms", name, elapsed_ms)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._created) * 1000, 2)

    def summary(self) -> dict[str, float]:
        return {**self.timings, "total": self.total_ms}
