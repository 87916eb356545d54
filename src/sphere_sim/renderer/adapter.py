# MIT License (see LICENSE)
"""
Renderer adapters: read-only consumers of simulation state.

The engine has no rendering dependency. A renderer is handed the
simulation once per frame and must not mutate particles.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import Particle

if TYPE_CHECKING:
    from ..simulation import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(sim.fps())
        for p in sim.particles:
            renderer.draw_particle(p)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, fps: float) -> None:
        """
        Begin a new frame.

        Args:
            fps: Average frame rate to display for this frame.
        """
        ...

    @abstractmethod
    def draw_particle(self, particle: Particle) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_simulation(self, sim: "Simulation", fps: float | None = None) -> None:
        """Draw every particle of a simulation as one frame."""
        self.begin_frame(sim.fps() if fps is None else fps)
        for p in sim.particles:
            self.draw_particle(p)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer writing one line per particle to a stream.

    Output:
        FPS: 59.94
        [0] r=0.120 @ (0.31, -0.22, 1.05) v=(1.20, 0.00, -3.10)
        [1] r=0.084 @ (-1.40, 0.77, -0.02) v=(0.00, 2.54, 0.61)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._index = 0

    def begin_frame(self, fps: float) -> None:
        self._index = 0
        self.output.write(f"FPS: {fps:.2f}\n")

    def draw_particle(self, particle: Particle) -> None:
        pos = particle.position
        line = f"[{self._index}] r={particle.radius:.3f} @ ({pos[0]:.2f}, {pos[1]:.2f}, {pos[2]:.2f})"
        if self.verbose:
            vel = particle.velocity
            line += f" v=({vel[0]:.2f}, {vel[1]:.2f}, {vel[2]:.2f})"
        self.output.write(line + "\n")
        self._index += 1

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer for headless runs and benchmarks."""

    def begin_frame(self, fps: float) -> None:
        pass

    def draw_particle(self, particle: Particle) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records particle state for every frame.

    Example:
        renderer = BufferedRenderer()
        for t in timestamps:
            sim.advance(t)
            renderer.render_simulation(sim)
        first = renderer.frames[0]["particles"][0]["position"]
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, fps: float) -> None:
        self._current_frame = {"fps": fps, "particles": []}

    def draw_particle(self, particle: Particle) -> None:
        if self._current_frame is None:
            return
        # Copies: the live arrays keep changing after this frame.
        self._current_frame["particles"].append({
            "position": particle.position.tolist(),
            "velocity": particle.velocity.tolist(),
            "radius": particle.radius,
            "color": particle.color.tolist(),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
