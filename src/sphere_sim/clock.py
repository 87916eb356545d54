# MIT License (see LICENSE)
"""
Frame clock driven by externally supplied timestamps.

The clock never reads wall time itself. The driver passes a monotonically
increasing timestamp (seconds) once per frame and gets back the frame delta.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from .constants import FPS_FALLBACK


@dataclass
class Clock:
    """
    Tracks elapsed time and frame count since the last reset.

    Attributes:
        prev_time: Timestamp of the previous advance() call. Zero means no
                   frame has been seen yet.
        total_time: Sum of frame deltas since reset, in seconds.
        total_frames: Number of frames with a valid predecessor.
    """
    prev_time: float = 0.0
    total_time: float = 0.0
    total_frames: int = 0

    def reset(self) -> None:
        self.prev_time = 0.0
        self.total_time = 0.0
        self.total_frames = 0

    def advance(self, time: float) -> float:
        """
        Record a new frame timestamp and return the delta since the last one.

        The first call after a reset only establishes the baseline: it
        returns 0 and does not count as a frame, so startup does not bias
        the average frame rate.
        """
        dt = 0.0
        if self.prev_time > 0:
            dt = time - self.prev_time
            self.total_frames += 1
        self.total_time += dt
        self.prev_time = time
        return dt

    def fps(self) -> float:
        """Average frames per second, or FPS_FALLBACK when no time has elapsed."""
        if self.total_time == 0:
            return FPS_FALLBACK
        fps = self.total_frames / self.total_time
        if not math.isfinite(fps):
            return FPS_FALLBACK
        return fps
