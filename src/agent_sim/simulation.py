# MIT License (see LICENSE)
"""
The simulation context and frame loop.

The Simulation object owns everything that changes from frame to frame:
- The Agent (shape, velocity, acceleration).
- The InputQueue of pending key presses.
- The frame counter.

One call to step() is one displayed frame:
    1. Drain queued input into the agent's acceleration.
    2. Integrate the agent (damped Euler + reorientation).

Rendering is separate; see agent_sim.renderer.

Structure:
    - Host creates a Simulation (usually Simulation.default()).
    - Host event handler calls sim.press(key).
    - Host frame callback calls sim.step(), then renders.
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
import logging

from .constants import KEY_IMPULSE, PROBE_SCALE
from .core.integrators import damped_euler_step
from .core.invariants import shape_drift
from .input import InputQueue, Key
from .profiler import Profiler
from .types import Agent, Triangle

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Single-agent simulation world.

    Attributes:
        agent: The controlled agent.
        impulse: Acceleration added per key press.
        probe_scale: Velocity probe length multiplier used for orientation.
        log_every: Log agent state and side-length drift at DEBUG every N
                   frames (0 disables).
        profiler: Optional Profiler instance for timing statistics.
    """
    agent: Agent = field(default_factory=Agent)
    impulse: float = KEY_IMPULSE
    probe_scale: float = PROBE_SCALE
    log_every: int = 0
    profiler: Profiler | None = None

    # Internal state
    frame: int = 0

    def __post_init__(self) -> None:
        if self.impulse <= 0:
            raise ValueError(f"impulse must be positive, got {self.impulse}")
        if self.probe_scale <= 0:
            raise ValueError(f"probe_scale must be positive, got {self.probe_scale}")
        if isinstance(self.log_every, bool) or not isinstance(self.log_every, int) or self.log_every < 0:
            raise ValueError(f"log_every must be a non-negative integer, got {self.log_every!r}")
        self.input = InputQueue(magnitude=self.impulse)
        self._reference_shape = self.agent.shape

    @classmethod
    def default(cls, **kwargs) -> "Simulation":
        """Simulation with the stock triangle at the origin, pointing +y."""
        return cls(agent=Agent(), **kwargs)

    @classmethod
    def from_vertices(cls, vertices, **agent_kwargs) -> "Simulation":
        """Simulation whose agent starts at the given (apex, left, right)."""
        return cls(agent=Agent(shape=Triangle(vertices), **agent_kwargs))

    def press(self, key: Key | str) -> bool:
        """Queue a key press; it takes effect on the next step()."""
        return self.input.push(key)

    def _section(self, name: str):
        return self.profiler.section(name) if self.profiler else nullcontext()

    def step(self) -> None:
        """Advance the simulation by one frame."""
        with self._section("input"):
            self.input.drain(self.agent)
        with self._section("integrate"):
            damped_euler_step(self.agent, self.probe_scale)
        self.frame += 1

        if self.log_every and self.frame % self.log_every == 0:
            a = self.agent
            logger.debug(
                "frame=%d apex=(%.2f, %.2f) v=(%.4f, %.4f) a=(%.4f, %.4f) drift=%.2e",
                self.frame, a.apex[0], a.apex[1],
                a.velocity[0], a.velocity[1],
                a.acceleration[0], a.acceleration[1],
                shape_drift(self._reference_shape, a.shape),
            )

    def run(self, frames: int) -> None:
        """Step `frames` times."""
        for _ in range(frames):
            self.step()
