# MIT License (see LICENSE)
"""
Core agent update.

This subpackage provides:
    - Orientation: swinging the triangle to face its velocity.
    - Integrators: the damped semi-implicit Euler frame step.
    - Invariants: drift diagnostics for tests and debug logging.

Typical usage:
    from agent_sim.core import damped_euler_step

    agent.apply_impulse((0.0, 0.045))
    damped_euler_step(agent)
"""
from .orientation import heading_probe, reorientation_angle, reorient
from .integrators import damped_euler_step, integrate
from .invariants import shape_drift, kinetic_energy

__all__ = [
    # Orientation
    "heading_probe",
    "reorientation_angle",
    "reorient",
    # Integrators
    "damped_euler_step",
    "integrate",
    # Invariants
    "shape_drift",
    "kinetic_energy",
]
