# MIT License (see LICENSE)
"""
Renderer adapters for agent visualization.

This module provides an abstract base class for rendering and a few
backend-free implementations. The simulation core has no rendering
dependency; adapters only read the agent's vertices and velocity and map
them through a CoordinateFrame.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

from ..constants import PROBE_SCALE
from ..types import Agent
from ..util import polar_point
from .frame import CoordinateFrame

if TYPE_CHECKING:
    from ..simulation import Simulation


def velocity_ray(agent: Agent, scale: float = PROBE_SCALE) -> tuple[np.ndarray, np.ndarray]:
    """
    Simulation-space segment from the apex along the velocity.

    Its length is |v| * scale, so it collapses to a point at rest.
    """
    start = agent.apex
    return start, polar_point(start, agent.speed * scale, agent.heading)


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses integrate with a graphics backend (pygame, matplotlib,
    a web canvas, ...). The adapter owns the CoordinateFrame.

    Usage:
        renderer = MyRenderer(frame=CoordinateFrame.centered(800, 600, 50))
        renderer.begin_frame(sim.frame)
        renderer.draw_agent(sim.agent)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    def __init__(self, frame: CoordinateFrame | None = None, ray_scale: float = PROBE_SCALE):
        self.frame = frame or CoordinateFrame()
        self.ray_scale = ray_scale

    def screen_triangle(self, agent: Agent) -> np.ndarray:
        """Agent vertices [3, 2] in screen space."""
        return np.array([self.frame.to_screen(p) for p in agent.vertices])

    def screen_ray(self, agent: Agent) -> tuple[np.ndarray, np.ndarray]:
        """Velocity ray endpoints in screen space."""
        a, b = velocity_ray(agent, self.ray_scale)
        return self.frame.to_screen(a), self.frame.to_screen(b)

    @abstractmethod
    def begin_frame(self, frame: int) -> None:
        """
        Begin a new frame for rendering.

        Args:
            frame: Index of the simulation frame being drawn.
        """
        ...

    @abstractmethod
    def draw_agent(self, agent: Agent) -> None:
        """
        Draw the agent outline and its velocity ray.

        Args:
            agent: The agent to draw.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_simulation(self, sim: "Simulation") -> None:
        """
        Convenience method to render one simulation frame.

        Args:
            sim: The simulation to render.
        """
        self.begin_frame(sim.frame)
        self.draw_agent(sim.agent)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Writes the agent's position, velocity and acceleration readouts to a
    stream (stdout by default).

    Output:
        === Frame 12 ===
        apex (0.00, 0.54) base (40.00, -99.46) (-40.00, -99.46)
        v=(0.0000, 0.0447) a=(0.0000, 0.0337) |v|=0.0447 heading=1.57
    """

    def __init__(
        self,
        output: TextIO | None = None,
        verbose: bool = True,
        frame: CoordinateFrame | None = None,
    ):
        """
        Initialize the debug renderer.

        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity and acceleration info.
            frame: Coordinate frame; text output stays in simulation space.
        """
        super().__init__(frame)
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, frame: int) -> None:
        self.output.write(f"=== Frame {frame} ===\n")

    def draw_agent(self, agent: Agent) -> None:
        apex, left, right = agent.vertices
        line = (
            f"apex ({apex[0]:.2f}, {apex[1]:.2f}) "
            f"base ({left[0]:.2f}, {left[1]:.2f}) ({right[0]:.2f}, {right[1]:.2f})"
        )
        self.output.write(line + "\n")

        if self.verbose:
            v, a = agent.velocity, agent.acceleration
            self.output.write(
                f"v=({v[0]:.4f}, {v[1]:.4f}) a=({a[0]:.4f}, {a[1]:.4f}) "
                f"|v|={agent.speed:.4f} heading={agent.heading:.2f}\n"
            )

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer.

    Useful as a placeholder or for benchmarking the step without drawing.
    """

    def begin_frame(self, frame: int) -> None:
        pass

    def draw_agent(self, agent: Agent) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records screen-space drawing data per frame.

    Each frame is a dict with the frame index, the grid segments, the
    triangle outline and the velocity ray, all in screen coordinates.
    This is exactly what a graphics backend would draw.

    Example:
        renderer = BufferedRenderer(frame=CoordinateFrame.centered(800, 600, 50),
                                    size=(800, 600))
        for _ in range(100):
            sim.step()
            renderer.render_simulation(sim)
        last = renderer.frames[-1]["triangle"]
    """

    def __init__(
        self,
        frame: CoordinateFrame | None = None,
        size: tuple[float, float] = (0.0, 0.0),
        ray_scale: float = PROBE_SCALE,
    ):
        super().__init__(frame, ray_scale)
        self.size = size
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, frame: int) -> None:
        width, height = self.size
        self._current_frame = {
            "frame": frame,
            "grid": self.frame.grid_lines(width, height),
            "triangle": None,
            "ray": None,
        }

    def draw_agent(self, agent: Agent) -> None:
        if self._current_frame is None:
            return
        start, end = self.screen_ray(agent)
        self._current_frame["triangle"] = self.screen_triangle(agent).tolist()
        self._current_frame["ray"] = [start.tolist(), end.tolist()]

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
