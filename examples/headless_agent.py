# examples/headless_agent.py
# Scripted key presses, text output every 60 frames.
from agent_sim import Simulation
from agent_sim.logging_config import setup_logging
from agent_sim.renderer import DebugRenderer

setup_logging("INFO")

sim = Simulation.default(log_every=60)
renderer = DebugRenderer()

script = {0: "ArrowUp", 10: "ArrowUp", 120: "ArrowRight", 125: "ArrowRight", 300: "ArrowDown"}

for frame in range(600):
    if frame in script:
        sim.press(script[frame])
    sim.step()
    if sim.frame % 60 == 0:
        renderer.render_simulation(sim)

print("apex:", sim.agent.apex)
print("vel:", sim.agent.velocity)
