# MIT License (see LICENSE)
"""
Frame driver and periodic auto-reset.

The driver stands in for the interactive frontend: it owns the frame
loop, forwards particle-count changes to the simulation, re-randomizes
the scene on a fixed cadence after each count change, and hands every
frame to a renderer.

All time is driver time (the timestamps passed to frame()); nothing here
reads the wall clock, so headless runs are reproducible.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .constants import DEFAULT_PARTICLE_COUNT, RESET_DELAY
from .renderer import NullRenderer, RendererAdapter
from .simulation import Simulation

logger = logging.getLogger(__name__)


@dataclass
class RepeatTimer:
    """
    Fixed-cadence interval timer polled with driver timestamps.

    Once armed at time t0 it becomes due at t0 + k * interval for k = 1, 2, ...
    A poll that skips several deadlines fires only once and realigns to
    the cadence.
    """
    interval: float = RESET_DELAY
    next_due: float | None = None

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise ValueError(f"interval must be positive, got {self.interval}")

    @property
    def armed(self) -> bool:
        return self.next_due is not None

    def arm(self, now: float) -> None:
        """(Re)start the cadence from now, dropping any pending deadline."""
        self.next_due = now + self.interval

    def disarm(self) -> None:
        self.next_due = None

    def due(self, now: float) -> bool:
        """Return True if a deadline has passed since the last poll."""
        if self.next_due is None or now < self.next_due:
            return False
        while self.next_due <= now:
            self.next_due += self.interval
        return True


@dataclass
class Driver:
    """
    Runs a Simulation frame by frame.

    Attributes:
        simulation: The simulation being driven.
        renderer: Receives every frame after the simulation advances.
        reset_interval: Seconds between automatic repeat() calls.
        timer: Auto-reset timer, armed by set_particle_count().
        last_fps: Frame rate read at the start of the last frame.

    Example:
        driver = Driver(Simulation(rng=np.random.default_rng(1)))
        driver.start(50)
        driver.run(600, frame_dt=1 / 60)
    """
    simulation: Simulation = field(default_factory=Simulation)
    renderer: RendererAdapter = field(default_factory=NullRenderer)
    reset_interval: float = RESET_DELAY
    last_fps: float = 0.0

    def __post_init__(self) -> None:
        self.timer = RepeatTimer(self.reset_interval)

    def start(self, particle_count: int = DEFAULT_PARTICLE_COUNT) -> None:
        """Initial reset. The auto-reset timer stays idle until the count changes."""
        self.simulation.reset(particle_count)
        logger.info("started with %d particles", particle_count)

    def set_particle_count(self, particle_count: int, now: float) -> None:
        """
        Change the particle count, as a user control would.

        Restarts the auto-reset cadence from now, then resets the scene.
        """
        self.timer.arm(now)
        self.simulation.reset(particle_count)
        logger.info("particle count set to %d", particle_count)

    def frame(self, timestamp: float) -> None:
        """
        Process one frame at the given timestamp (seconds).

        Order: auto-reset if due, read FPS for display, advance, render.
        """
        if self.timer.due(timestamp):
            logger.info("auto-reset at t=%.3f", timestamp)
            self.simulation.repeat()
        self.last_fps = self.simulation.fps()
        self.simulation.advance(timestamp)
        self.renderer.render_simulation(self.simulation, self.last_fps)

    def run(self, frames: int, frame_dt: float = 1 / 60, start: float | None = None) -> float | None:
        """
        Run a fixed-rate headless loop.

        Args:
            frames: Number of frames to process.
            frame_dt: Seconds between frames.
            start: Timestamp of the first frame. Defaults to frame_dt, since
                   a timestamp of 0 reads as "no previous frame" to the clock.

        Returns:
            Timestamp of the last processed frame, or None if frames is 0.
        """
        if frame_dt <= 0:
            raise ValueError(f"frame_dt must be positive, got {frame_dt}")
        t0 = frame_dt if start is None else start
        t = None
        for n in range(frames):
            t = t0 + n * frame_dt
            self.frame(t)
        return t
