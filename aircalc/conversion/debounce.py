"""Debounce для конвертера «пересчёт по мере ввода».

Пока пользователь печатает, пересчёт откладывается; после паузы `delay_s`
обрабатывается только последнее значение.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Tuple

from aircalc.config import DEFAULT_CONFIG
from aircalc.core.validation import ensure_finite, ensure_non_negative


class Debouncer:
    """Latest-value-wins coalescer for "convert while typing".

    `submit()` stores the newest request; `poll()` hands it out once no newer
    request arrived for `delay_s`. No threads or timers: the caller's event
    loop decides when to poll.
    """

    def __init__(self, delay_s: Optional[float] = None, clock: Callable[[], float] = time.monotonic) -> None:
        self.delay_s = DEFAULT_CONFIG.debounce_s if delay_s is None else float(delay_s)
        ensure_finite(self.delay_s, "delay_s")
        ensure_non_negative(self.delay_s, "delay_s")
        self._clock = clock
        self._pending: Optional[Tuple[Any, ...]] = None
        self._submitted_at = 0.0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def submit(self, *args: Any) -> None:
        self._pending = args
        self._submitted_at = self._clock()

    def cancel(self) -> None:
        self._pending = None

    def poll(self, now: Optional[float] = None) -> Optional[Tuple[Any, ...]]:
        if self._pending is None:
            return None
        now = self._clock() if now is None else now
        if now - self._submitted_at < self.delay_s:
            return None
        request, self._pending = self._pending, None
        return request
