"""UI: blitting projected frames and mapping window pixels to grid cells."""

from ui.grid_view import draw_frame, frame_to_surface, window_to_grid

__all__ = ["draw_frame", "frame_to_surface", "window_to_grid"]
