"""Simulation view: RGBA frame from the projector, scaled into its rect with a thin grey border."""

import pygame

BORDER_COLOR = (80, 80, 80)
BORDER_PX = 1


def frame_to_surface(frame: bytearray, width: int, height: int) -> pygame.Surface:
    """Wrap a row-major RGBA buffer (4 * width * height bytes) as a surface without copying."""
    return pygame.image.frombuffer(frame, (width, height), "RGBA")


def draw_frame(
    surface: pygame.Surface,
    rect: pygame.Rect,
    frame: bytearray,
    width: int,
    height: int,
    *,
    border: bool = False,
) -> None:
    """Draw the frame into rect. One cell covers rect.width / width pixels; nearest-neighbour scaling keeps cells crisp."""
    if width == 0 or height == 0:
        return
    img = frame_to_surface(frame, width, height)
    if img.get_size() != rect.size:
        img = pygame.transform.scale(img, rect.size)
    surface.blit(img, rect.topleft)
    if border:
        pygame.draw.rect(surface, BORDER_COLOR, rect, BORDER_PX)


def window_to_grid(pos: tuple[int, int], rect: pygame.Rect, width: int, height: int) -> tuple[float, float]:
    """Window pixel -> grid-space float coordinates (may fall outside the grid). Cell centres land on integers."""
    sx = width / rect.width if rect.width else 0.0
    sy = height / rect.height if rect.height else 0.0
    return ((pos[0] - rect.x + 0.5) * sx - 0.5, (pos[1] - rect.y + 0.5) * sy - 0.5)
