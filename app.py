"""
App shell: display and main loop. Paint with the left mouse button, erase with the right.
Each frame feeds pointer state and the measured frame time to the engine, then blits the
projected frame. Window resizes rebuild the grid at the new size.
"""

import logging
import os
import time
from collections import deque

import pygame

from world import Button, DiffusionEngine
from ui.grid_view import draw_frame, window_to_grid
import config

TITLE = "Diffuser"
BACKGROUND = (255, 255, 255)
FPS_WINDOWS = 5
MOUSE_BUTTONS = {1: Button.LEFT, 3: Button.RIGHT}

logger = logging.getLogger(__name__)


def _grid_size(window_w: int, window_h: int, cell_size: int) -> tuple[int, int]:
    return max(1, window_w // cell_size), max(1, window_h // cell_size)


def run(cfg: dict | None = None) -> None:
    cfg = cfg if cfg is not None else config.load_config()
    cell_size = max(1, int(cfg["cell_size"]))
    workers = max(1, int(cfg["render_workers"]))
    target_fps = max(1, int(cfg["target_fps"]))
    width, height = cfg["world"]["width"], cfg["world"]["height"]

    pygame.init()
    screen = pygame.display.set_mode((width * cell_size, height * cell_size), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    engine = DiffusionEngine(
        width=width,
        height=height,
        max_value=cfg["max_value"],
        value_cutoff=cfg["value_cutoff"],
        decay_factor=cfg["decay_factor"],
    )
    frame = bytearray(4 * width * height)
    view_rect = pygame.Rect(0, 0, width * cell_size, height * cell_size)

    paused = False
    frame_counter = 0
    fps_values: deque[int] = deque(maxlen=FPS_WINDOWS)
    last_fps_update = time.monotonic()
    frame_time = 1.0 / target_fps
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break
                if event.key == pygame.K_c:
                    engine.clear()
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                    logger.info("Diffusion %s", "paused" if paused else "resumed")
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in MOUSE_BUTTONS:
                engine.press(MOUSE_BUTTONS[event.button])
            elif event.type == pygame.MOUSEBUTTONUP and event.button in MOUSE_BUTTONS:
                engine.release(MOUSE_BUTTONS[event.button])
            elif event.type == pygame.MOUSEMOTION:
                engine.move_pointer(*window_to_grid(event.pos, view_rect, engine.width, engine.height))
            elif event.type == pygame.VIDEORESIZE:
                width, height = _grid_size(event.w, event.h, cell_size)
                engine.resize(width, height)
                frame = bytearray(4 * width * height)
                view_rect = pygame.Rect(0, 0, event.w, event.h)
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
        if not running:
            break

        if paused:
            engine.paint()
        else:
            engine.update(frame_time)

        engine.render(frame, workers)
        screen.fill(BACKGROUND)
        draw_frame(screen, view_rect, frame, engine.width, engine.height)
        pygame.display.flip()

        frame_time = clock.tick(target_fps) / 1000.0
        frame_counter += 1
        now = time.monotonic()
        if now - last_fps_update > 1.0:
            last_fps_update = now
            fps_values.append(frame_counter)
            frame_counter = 0
            logger.info("FPS %d", sum(fps_values) // len(fps_values))

    pygame.quit()


def main() -> None:
    cfg = config.load_config()
    level = os.environ.get("DIFFUSER_LOG", cfg["log_level"]).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting the diffuser...")
    run(cfg)


if __name__ == "__main__":
    main()
