# MIT License (see LICENSE)
"""
agent_sim - A steerable 2D triangle with damped per-frame physics.

The agent is a triangle driven by arrow-key impulses. Each frame its
velocity picks up the current acceleration, the triangle moves by that
velocity and swings around so its apex faces the direction of travel,
then velocity and acceleration decay.

Main entry points:
    - Simulation: Frame loop context owning the agent and its input queue.
    - Agent: Triangle shape plus velocity, acceleration and damping.
    - Triangle: The agent's three vertices (apex first).
    - Key: Arrow keys accepted by Simulation.press().

Submodules:
    - util: 2D vector math.
    - core: Orientation, integrator, invariants.
    - io: JSON configuration loading.
    - renderer: Coordinate frame and optional visualization adapters.

Example:
    from agent_sim import Simulation

    sim = Simulation.default()
    sim.press("ArrowUp")
    sim.step()
"""
from .simulation import Simulation
from .types import Agent, Triangle
from .input import Key, InputQueue

__all__ = [
    # Simulation
    "Simulation",
    "InputQueue",
    "Key",
    # Types
    "Agent",
    "Triangle",
]
