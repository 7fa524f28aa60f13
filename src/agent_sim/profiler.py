# MIT License (see LICENSE)
"""
Simple profiling utilities for the frame loop.

Times the phases of Simulation.step() (input, integrate) and, in scripts,
rendering, without external dependencies.

Example:
    profiler = Profiler()
    sim = Simulation.default(profiler=profiler)
    sim.run(600)
    print(profiler.stats.summary())
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator
import time


@dataclass
class ProfileStats:
    """
    Per-phase frame timings.

    One list of durations (seconds) per phase name, one entry per frame the
    phase ran in. Simulation.step() fills "input" and "integrate"; scripts
    usually add "render".
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Frame count and timings per phase.

        Returns:
            {phase: {"n": frames, "mean_ms": ..., "max_ms": ..., "total_ms": ...}}.
            The max is what matters for holding 60 fps; the mean hides
            occasional slow frames.
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out

    def clear(self) -> None:
        """Forget all samples, e.g. after a warmup run."""
        self.samples.clear()



class Profiler:
    """
    Context-manager based profiler for timing frame phases.

    Usage:
        with profiler.section("render"):
            renderer.render_simulation(sim)
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time the enclosed block and record it under `name`.

        The sample is recorded even if the block raises.
        """
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
