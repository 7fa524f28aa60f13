# MIT License (see LICENSE)
"""
Configuration input for the agent simulation.

Typical usage:
    from agent_sim.io import load_simulation

    sim = load_simulation("agent.json")
"""
from .json_io import (
    load_config_raw,
    load_simulation,
    simulation_from_json,
    agent_from_json,
)

__all__ = [
    "load_config_raw",
    "load_simulation",
    "simulation_from_json",
    "agent_from_json",
]
