# MIT License (see LICENSE)
"""
Per-frame integrator for the agent.

The agent is advanced with a damped semi-implicit Euler update, one call
per displayed frame. There is no dt: velocity is already "units per frame".

    v ← v + a                  (acceleration applied first)
    x ← x + v                  (rigid translation of all three vertices)
    reorient(x, v)             (base swung to trail v)
    v ← clamp(v, max_speed)    (per-axis cap)
    v ← k_v · v                (drag)
    a ← k_a · a                (impulse decay)

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

from ..constants import PROBE_SCALE
from ..types import Agent
from ..util import add, clamp, scale
from .orientation import reorient


def damped_euler_step(agent: Agent, probe_scale: float = PROBE_SCALE) -> None:
    """
    Advance the agent by one frame.

    Args:
        agent: Agent to integrate (its attributes are replaced, not mutated).
        probe_scale: Probe distance multiplier passed to reorientation.

    Note:
        Reorientation sees the unclamped, undamped velocity of this frame;
        the clamp and damping only affect the velocity carried into the
        next frame.
    """
    v = add(agent.velocity, agent.acceleration)
    shape = agent.shape.translated(v)
    agent.shape = reorient(shape, v, probe_scale)

    v = clamp(v, agent.max_speed)
    agent.velocity = scale(v, agent.velocity_damping)
    agent.acceleration = scale(agent.acceleration, agent.acceleration_damping)


def integrate(agent: Agent, frames: int, probe_scale: float = PROBE_SCALE) -> None:
    """Run `frames` consecutive damped Euler steps."""
    for _ in range(frames):
        damped_euler_step(agent, probe_scale)
