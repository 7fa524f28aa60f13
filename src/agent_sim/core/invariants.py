# MIT License (see LICENSE)
"""
Diagnostics for checking the agent update.

Used for verifying simulation correctness and debugging drift. The frame
update is a rigid motion, so side lengths must never change; with no
input, speed must decay geometrically.
"""
from __future__ import annotations

import numpy as np

from ..types import Agent, Triangle


def shape_drift(reference: Triangle, current: Triangle) -> float:
    """
    Largest absolute change in any side length between two triangles.

    Should stay at floating-point noise level for the whole run.
    """
    return float(np.max(np.abs(np.subtract(reference.side_lengths, current.side_lengths))))


def kinetic_energy(agent: Agent) -> float:
    """
    Kinetic energy of the agent with unit mass.

    T = 0.5 * |v|²
    """
    v = agent.velocity
    return 0.5 * float(np.dot(v, v))
