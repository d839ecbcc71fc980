import logging

import pygame

from maze_stepper.algo.base import Generator
from maze_stepper.config import BG_COLOR, FPS, TEXT_COLOR, UPDATES_PER_SECOND
from maze_stepper.viz.painter import PygamePainter

logger = logging.getLogger(__name__)

class Renderer:
    HUD_HEIGHT = 28
    # Never run more updates than this in one frame, even after a stall.
    MAX_UPDATES_PER_FRAME = 1000

    def __init__(self, generator: Generator, width=1280, height=720, updates_per_second=UPDATES_PER_SECOND):
        self.generator = generator
        self.screen_width = width
        self.screen_height = height
        self.updates_per_second = updates_per_second

        self.font = None
        self.running = True
        self.paused = False
        self.clock = None
        self.surface = None
        self.painter = None
        # Fractional updates owed by the tick timer
        self.pending = 0.0

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Stepper - {self.generator.name}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.painter = PygamePainter(self.surface, hud_height=self.HUD_HEIGHT)

    def reset(self):
        self.generator.reinit()
        self.pending = 0.0
        logger.info(f"Reset {self.generator.name} ({self.generator.variant})")

    def follow_mouse(self, pos):
        if self.generator.is_done:
            self.generator.move_to(self.painter.cell_at(*pos))

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.painter.resize(self.surface)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    self.reset()
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.follow_mouse(event.pos)

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0]:  # Left drag
                    self.follow_mouse(event.pos)

    def tick(self, dt: float):
        """Runs as many updates as the tick timer owes for dt seconds."""
        if self.paused or self.generator.is_done:
            self.pending = 0.0
            return
        self.pending += dt * self.updates_per_second
        count = min(int(self.pending), self.MAX_UPDATES_PER_FRAME)
        self.pending -= int(self.pending)
        for _ in range(count):
            self.generator.update()
            if self.generator.is_done:
                break

    def draw_hud(self):
        generator = self.generator
        status = "Paused" if self.paused else generator.phase.value.capitalize()
        text = (
            f"{generator.name} [{generator.variant}]  "
            f"Status: {status}  Updates: {generator.step_count:,}  FPS: {int(self.clock.get_fps())}"
        )
        lbl = self.font.render(text, True, TEXT_COLOR)
        self.surface.blit(lbl, (10, (self.HUD_HEIGHT - lbl.get_height()) // 2))

    def run_loop(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self.handle_input()
            self.tick(dt)

            self.surface.fill(BG_COLOR)
            self.generator.draw(self.painter)
            self.draw_hud()
            pygame.display.flip()

        pygame.quit()
