# examples/interactive_agent.py
# Arrow keys steer the triangle. Needs the "viewer" extra (pygame).
import sys

import pygame

from agent_sim import Simulation
from agent_sim.io import load_simulation
from agent_sim.logging_config import setup_logging
from agent_sim.renderer import RendererAdapter, CoordinateFrame

W, H = 800, 600
BACKGROUND = (187, 187, 187)
GRID = (170, 170, 170)
ORIGIN = (255, 255, 255)
OUTLINE = (0, 0, 0)
RAY = (255, 0, 0)


class PygameRenderer(RendererAdapter):
    """Draws onto a pygame surface."""

    def __init__(self, surface, frame):
        super().__init__(frame)
        self.surface = surface

    def begin_frame(self, frame):
        self.surface.fill(BACKGROUND)
        w, h = self.surface.get_size()
        for a, b in self.frame.grid_lines(w, h):
            pygame.draw.line(self.surface, GRID, a, b)
        ox, oy = self.frame.offset
        pygame.draw.circle(self.surface, ORIGIN, (int(ox), int(oy)), 4)

    def draw_agent(self, agent):
        pygame.draw.polygon(self.surface, OUTLINE, self.screen_triangle(agent).tolist(), 1)
        start, end = self.screen_ray(agent)
        pygame.draw.line(self.surface, RAY, start.tolist(), end.tolist())

    def end_frame(self):
        pygame.display.flip()


def main():
    setup_logging("INFO")
    sim = load_simulation(sys.argv[1]) if len(sys.argv) > 1 else Simulation.default()

    pygame.init()
    screen = pygame.display.set_mode((W, H))
    pygame.display.set_caption("agent_sim")
    clock = pygame.time.Clock()
    renderer = PygameRenderer(screen, CoordinateFrame.centered(W, H, grid_size=50))

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                sim.press(pygame.key.name(event.key))
        sim.step()
        renderer.render_simulation(sim)
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
