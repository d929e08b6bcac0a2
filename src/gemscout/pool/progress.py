"""Thread-safe progress reporting for pool evaluation."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from gemscout.models import AthleteRecord


logger = logging.getLogger(__name__)


class ProgressCounter:
    """Monotonic counter usable as a per-record progress observer.

    Logs at INFO each time the count crosses a ``report_every`` boundary and
    once more when it reaches ``total``.
    """

    def __init__(
        self,
        total: int,
        *,
        report_every: Optional[int] = None,
        label: str = "Evaluated athletes",
    ) -> None:
        self.total = max(0, total)
        self.label = label
        self.report_every = max(1, report_every or self.total // 10 or 1)
        self._count = 0
        self._lock = threading.Lock()

    def __call__(self, record: Optional[AthleteRecord] = None) -> None:
        self.advance()

    @property
    def count(self) -> int:
        return self._count

    @property
    def done(self) -> bool:
        return self._count >= self.total

    def advance(self, n: int = 1) -> int:
        with self._lock:
            previous = self._count
            self._count += n
            current = self._count
        crossed_step = current // self.report_every > previous // self.report_every
        reached_total = previous < self.total <= current
        if crossed_step or reached_total:
            logger.info("%s: %s/%s", self.label, current, self.total)
        return current
