import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timezone

from src.page.dtos import TimeRemaining

logger = logging.getLogger(__name__)

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE
_MS_PER_DAY = 24 * _MS_PER_HOUR


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def compute_time_remaining(target: datetime, now: datetime) -> TimeRemaining:
    """
    Break the time left until `target` into days, hours, minutes and seconds.
    Once `now` reaches the target every field stays at zero.
    """
    delta = target - now
    distance = delta.days * _MS_PER_DAY + delta.seconds * _MS_PER_SECOND + delta.microseconds // 1000
    if distance <= 0:
        return TimeRemaining()

    return TimeRemaining(
        days=distance // _MS_PER_DAY,
        hours=(distance % _MS_PER_DAY) // _MS_PER_HOUR,
        minutes=(distance % _MS_PER_HOUR) // _MS_PER_MINUTE,
        seconds=(distance % _MS_PER_MINUTE) // _MS_PER_SECOND,
    )


class CountdownTicker:
    """Recomputes the countdown on a fixed interval until stopped."""

    def __init__(
        self,
        target: datetime,
        on_tick: Callable[[TimeRemaining], None],
        clock: Callable[[], datetime] = utc_now,
        interval: float = 1.0,
    ):
        self._target = target
        self._on_tick = on_tick
        self._clock = clock
        self._interval = interval
        self._task: asyncio.Task | None = None

    @property
    def target(self) -> datetime:
        return self._target

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self) -> TimeRemaining:
        remaining = compute_time_remaining(self._target, self._clock())
        self._on_tick(remaining)
        return remaining

    def start(self) -> None:
        """Publish the current value and schedule the recurring tick. Needs a running loop."""
        if self.running:
            return
        self.tick()
        self._task = asyncio.get_running_loop().create_task(self._run())

    def stop(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self.tick()
            except Exception:
                logger.exception("Countdown tick failed")
