"""Digital line between two pointer samples so fast strokes paint without gaps."""

from typing import Iterator


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """8-connected cells from (x0, y0) to (x1, y1), both ends included, in stroke order."""
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def line_cells(
    x0: int, y0: int, x1: int, y1: int, width: int, height: int
) -> Iterator[tuple[int, int]]:
    """bresenham() clipped to [0, width) x [0, height); off-grid cells are skipped."""
    for x, y in bresenham(x0, y0, x1, y1):
        if 0 <= x < width and 0 <= y < height:
            yield x, y
