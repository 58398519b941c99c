import logging
import numpy as np
import pygame
from maze_carver.core.config import WINDOW_TITLE, DEFAULT_FPS
from maze_carver.core.grid import MazeState
from maze_carver.algo.base import Generator
from maze_carver.viz.renderer import Renderer
from maze_carver.viz.recorder import VideoRecorder

logger = logging.getLogger(__name__)


class MazeWindow:
    """
    Platform harness: one generator step per tick, a full re-render when the
    step reports a visible change, presentation scaled to the window.
    """

    def __init__(self, state: MazeState, generator: Generator, fps=DEFAULT_FPS, record=False):
        self.state = state
        self.generator = generator
        self.fps = fps

        self.renderer = Renderer(state)
        self.frame = self.renderer.new_frame()

        # Window starts at the raster size and never shrinks below it
        self.min_width = self.renderer.width
        self.min_height = self.renderer.height
        self.screen_width = self.min_width
        self.screen_height = self.min_height

        self.recorder = VideoRecorder(active=record)

        self.running = True
        self.redraw_requested = True
        self.error = None
        self.clock = None
        self.surface = None

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        logger.info(f"Window opened ({self.screen_width}x{self.screen_height})")

    def resize(self, width: int, height: int):
        width = max(width, self.min_width)
        height = max(height, self.min_height)
        if (width, height) != (self.screen_width, self.screen_height):
            self.screen_width, self.screen_height = width, height
            self.surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.redraw_requested = True

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)

            elif event.type == pygame.WINDOWEXPOSED:
                self.redraw_requested = True

    def update(self):
        if self.generator.step():
            self.redraw_requested = True

    def draw(self):
        self.renderer.render(self.frame)

        # make_surface expects (width, height, 3)
        surf = pygame.surfarray.make_surface(np.transpose(self.frame[..., :3], (1, 0, 2)))
        # The window manager may still shrink the window below the minimum
        target = self.surface.get_size()
        if target != surf.get_size():
            surf = pygame.transform.scale(surf, target)

        self.surface.blit(surf, (0, 0))
        pygame.display.flip()

    def tick(self):
        self.handle_input()
        if not self.running:
            return

        self.update()

        if self.redraw_requested:
            try:
                self.draw()
            except pygame.error as e:
                logger.error(f"Presenting frame failed: {e}")
                self.error = e
                self.running = False
                return
            self.redraw_requested = False

        if self.recorder.active and not self.recorder.capture_frame(self.frame):
            logger.error("Recording failed, stopping")
            self.error = OSError(f"Could not record to {self.recorder.output_file}")
            self.running = False

    def run_loop(self) -> bool:
        while self.running:
            self.tick()
            self.clock.tick(self.fps)

        self.close()
        return self.error is None

    def run(self) -> bool:
        try:
            self.init_window()
        except pygame.error as e:
            logger.error(f"Could not open window: {e}")
            self.error = e
            pygame.quit()
            return False
        return self.run_loop()

    def close(self):
        self.recorder.stop()
        pygame.quit()
        logger.info("Window closed")
