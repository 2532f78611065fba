"""Frame timing: delta time between frames and a frame-rate cap."""

from __future__ import annotations

import time
from typing import Callable, Optional

FPS = 60
FRAME_DELAY = 1000 // FPS


def _default_ticks() -> Callable[[], int]:
    start = time.monotonic()
    return lambda: int((time.monotonic() - start) * 1000)


def _default_sleep(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000.0)


class FrameTimer:
    """Computes per-frame delta times in milliseconds and caps the frame rate."""

    def __init__(
        self,
        ticks: Optional[Callable[[], int]] = None,
        sleep: Optional[Callable[[int], None]] = None,
        frame_delay: int = FRAME_DELAY,
    ) -> None:
        self._ticks = ticks or _default_ticks()
        self._sleep = sleep or _default_sleep
        self.frame_delay = frame_delay
        self.frame_start = 0
        self.last_frame = 0
        self.frame_time = 0

    def compute_delta_time(self) -> int:
        """Milliseconds since the previous frame started; marks a new frame start."""
        self.frame_start = self._ticks()
        dt = self.frame_start - self.last_frame
        self.last_frame = self.frame_start
        return dt

    def delay_time(self) -> int:
        """Wait out the rest of the frame if it ran too fast; return the wait in ms."""
        self.frame_time = self._ticks() - self.frame_start
        if self.frame_time < self.frame_delay:
            wait = self.frame_delay - self.frame_time
            self._sleep(wait)
            return wait
        return 0