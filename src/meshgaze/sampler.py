"""Periodic tx/rx throughput sampler."""

from __future__ import annotations

import logging
from typing import Callable, Protocol, Sequence

from meshgaze.metrics import rx_bytes_of, total_stat, tx_bytes_of
from meshgaze.models import PeerRoutePair
from meshgaze.utils import format_bytes

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def stop(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


class RateSampler:
    """Turns cumulative byte totals into per-second rates on a fixed interval.

    The sampler does not own a clock; start() hands tick() to a scheduler
    such as Textual's ``set_interval`` and keeps the returned timer so that
    stop() can release it.
    """

    def __init__(
        self,
        snapshot_provider: Callable[[], Sequence[PeerRoutePair]],
        interval: float = 2.0,
        on_update: Callable[[str, str], None] | None = None,
        si: bool = False,
        precision: int = 1,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._snapshot_provider = snapshot_provider
        self._on_update = on_update
        self.interval = interval
        self.si = si
        self.precision = precision
        self.prev_tx_sum: int | float = 0
        self.prev_rx_sum: int | float = 0
        self.tx_rate = format_bytes(0, si=si, precision=precision)
        self.rx_rate = format_bytes(0, si=si, precision=precision)
        self._timer: TimerHandle | None = None

    @property
    def running(self) -> bool:
        return self._timer is not None

    def start(self, scheduler: Scheduler) -> None:
        if self._timer is not None:
            return
        self._timer = scheduler(self.interval, self.tick)
        logger.debug("Rate sampler started (interval=%ss)", self.interval)

    def stop(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.stop()
        logger.debug("Rate sampler stopped")

    def reset(self) -> None:
        """Rebase on the current snapshot and publish zero rates.

        Used when the snapshot source switches to different counters (another
        instance, or one recovering from an error) so the next tick does not
        report the jump between the two as throughput.
        """
        self.prev_tx_sum, self.prev_rx_sum = self._totals()
        self.tx_rate = format_bytes(0, si=self.si, precision=self.precision)
        self.rx_rate = format_bytes(0, si=self.si, precision=self.precision)
        logger.debug("Rate sampler rebased (tx=%s rx=%s)", self.prev_tx_sum, self.prev_rx_sum)
        if self._on_update is not None:
            self._on_update(self.tx_rate, self.rx_rate)

    def _totals(self) -> tuple[int | float, int | float]:
        snapshot = list(self._snapshot_provider())
        return total_stat(snapshot, tx_bytes_of), total_stat(snapshot, rx_bytes_of)

    def tick(self) -> None:
        """Take one sample: read a single snapshot and publish both rates."""
        tx_sum, rx_sum = self._totals()

        self.tx_rate = format_bytes(
            (tx_sum - self.prev_tx_sum) / self.interval, si=self.si, precision=self.precision
        )
        self.rx_rate = format_bytes(
            (rx_sum - self.prev_rx_sum) / self.interval, si=self.si, precision=self.precision
        )
        self.prev_tx_sum = tx_sum
        self.prev_rx_sum = rx_sum

        if self._on_update is not None:
            self._on_update(self.tx_rate, self.rx_rate)
