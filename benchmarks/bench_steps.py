"""
Microbenchmark: time per frame with and without rendering.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from agent_sim import Simulation, Key
from agent_sim.profiler import Profiler
from agent_sim.renderer import BufferedRenderer, NullRenderer, CoordinateFrame

KEYS = list(Key)


def run(renderer, frames: int = 5000):
    prof = Profiler()
    sim = Simulation.default(profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # warmup
    sim.run(30)
    prof.stats.clear()

    t0 = time.perf_counter()
    for _ in range(frames):
        if rng.random() < 0.1:
            sim.press(KEYS[int(rng.integers(len(KEYS)))])
        sim.step()
        with prof.section("render"):
            renderer.render_simulation(sim)
    t1 = time.perf_counter()

    return (t1 - t0) / frames, prof.stats.summary()


if __name__ == "__main__":
    frame = CoordinateFrame.centered(800, 600, grid_size=50)
    for name, renderer in [("null", NullRenderer()), ("buffered", BufferedRenderer(frame, (800, 600)))]:
        per_frame, summary = run(renderer)
        print(f"{name:9s} frame={1e3*per_frame:8.4f} ms  frames/s={1/per_frame:10.1f}")
        for k in ["input", "integrate", "render"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
