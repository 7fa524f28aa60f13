# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides:
    - CoordinateFrame: offset + Y flip from simulation to screen space.
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer for benchmarking.
    - BufferedRenderer: Records screen-space frames for playback or checks.

The simulation has no rendering dependency; these adapters are optional.

Typical usage:
    from agent_sim.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render_simulation(sim)
"""
from .frame import CoordinateFrame, to_screen
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    velocity_ray,
)

__all__ = [
    "CoordinateFrame",
    "to_screen",
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "velocity_ray",
]
