# MIT License (see LICENSE)
"""
JSON configuration loading for the agent simulation.

Only configuration is read here; simulation state is never written back.

JSON Schema Overview:
---------------------
{
  "vertices": [[x, y], [x, y], [x, y]],   # (apex, left, right); default: stock triangle
  "velocity_damping": float,              # Default: 0.9925, in (0, 1]
  "acceleration_damping": float,          # Default: 0.75, in (0, 1]
  "max_speed": [sx, sy],                  # Default: [2, 2]
  "impulse": float,                       # Acceleration per key press, default: 0.045
  "probe_scale": float,                   # Velocity probe/ray multiplier, default: 100
  "log_every": int                        # DEBUG state log period in frames, default: 0
}
Unknown keys are ignored.
"""
from __future__ import annotations
import json
import logging
from typing import TYPE_CHECKING, Any

from ..constants import (
    ACCELERATION_DAMPING,
    DEFAULT_VERTICES,
    KEY_IMPULSE,
    MAX_SPEED,
    PROBE_SCALE,
    VELOCITY_DAMPING,
)
from ..types import Agent, Triangle

if TYPE_CHECKING:
    from ..simulation import Simulation

logger = logging.getLogger(__name__)


def load_config_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a config file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a JSON object, got {type(data).__name__}")
    return data


def _to_float(value: Any, key: str) -> float:
    """Convert a config value to float, reporting bad types as ValueError."""
    if isinstance(value, bool):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"'{key}' must be a number, got {value!r}") from e


def _integer(value: Any, key: str) -> int:
    """Integer config value; 1.5 is rejected rather than truncated."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    return value


def _sequence(value: Any, key: str, count: int) -> list:
    """A list of exactly `count` entries."""
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"'{key}' must be a list, got {type(value).__name__}")
    if len(value) != count:
        raise ValueError(f"'{key}' must have {count} entries, got {len(value)}")
    return list(value)


def agent_from_json(d: dict[str, Any]) -> Agent:
    """
    Build an Agent at rest from a config dictionary.

    Raises:
        ValueError: If vertices are not three [x, y] pairs, a field has the
            wrong type or a coefficient is out of range.
    """
    verts = _sequence(d.get("vertices", DEFAULT_VERTICES), "vertices", 3)
    try:
        shape = Triangle(verts)
    except TypeError as e:
        raise ValueError(f"'vertices' must be three [x, y] pairs, got {verts!r}") from e

    max_speed = _sequence(d.get("max_speed", MAX_SPEED), "max_speed", 2)

    return Agent(
        shape=shape,
        velocity_damping=_to_float(d.get("velocity_damping", VELOCITY_DAMPING), "velocity_damping"),
        acceleration_damping=_to_float(
            d.get("acceleration_damping", ACCELERATION_DAMPING), "acceleration_damping"
        ),
        max_speed=tuple(_to_float(s, "max_speed") for s in max_speed),
    )


def simulation_from_json(d: dict[str, Any]) -> "Simulation":
    """
    Construct a Simulation from a config dictionary.

    Missing keys fall back to the package defaults.
    """
    # Import locally to avoid a circular import at package init
    from ..simulation import Simulation

    return Simulation(
        agent=agent_from_json(d),
        impulse=_to_float(d.get("impulse", KEY_IMPULSE), "impulse"),
        probe_scale=_to_float(d.get("probe_scale", PROBE_SCALE), "probe_scale"),
        log_every=_integer(d.get("log_every", 0), "log_every"),
    )


def load_simulation(path: str) -> "Simulation":
    """
    Load and construct a ready-to-run Simulation from a JSON config file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If a field has an invalid value.
    """
    data = load_config_raw(path)
    sim = simulation_from_json(data)
    logger.info("Loaded simulation config from %s", path)
    return sim
