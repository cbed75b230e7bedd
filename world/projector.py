"""
Value-to-pixel projection: each cell becomes one RGBA pixel (luma, luma, luma, 255).
Higher paint value = darker pixel. Cells are independent, so the work is split into
disjoint slices that threads can fill without locking.
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np

from world.errors import DimensionMismatchError
from world.grid import Grid

BYTES_PER_PIXEL = 4
OPAQUE = 255


def value_to_luma(values: np.ndarray) -> np.ndarray:
    """luma = round((1 - clamp(v, 0, 1)) * 255), halves rounded up. Returns uint8."""
    inverted = 1.0 - np.clip(values, 0.0, 1.0)
    return np.floor(inverted * 255.0 + 0.5).astype(np.uint8)


def _project_slice(values: np.ndarray, pixels: np.ndarray, start: int, stop: int) -> None:
    luma = value_to_luma(values[start:stop])
    block = pixels[start:stop]
    block[:, 0] = luma
    block[:, 1] = luma
    block[:, 2] = luma
    block[:, 3] = OPAQUE


def render(grid: Grid, out: bytearray | None = None, workers: int = 1) -> bytearray:
    """
    Fill out (allocated if None) with 4 * len(grid) bytes, one pixel per cell in
    row-major order. workers > 1 renders disjoint row bands on a thread pool.
    """
    expected = BYTES_PER_PIXEL * len(grid)
    if out is None:
        out = bytearray(expected)
    if len(out) != expected:
        raise DimensionMismatchError(
            f"Output buffer holds {len(out)} bytes, grid of {len(grid)} cells needs {expected}"
        )
    pixels = np.frombuffer(out, dtype=np.uint8).reshape(-1, BYTES_PER_PIXEL)
    values = grid.cells
    n = values.size
    workers = max(1, min(workers, grid.height))
    if workers == 1:
        _project_slice(values, pixels, 0, n)
        return out
    # Split on row boundaries so each band is a contiguous block of the output.
    rows = np.linspace(0, grid.height, workers + 1).astype(np.int64)
    bounds = [(int(a) * grid.width, int(b) * grid.width) for a, b in zip(rows[:-1], rows[1:])]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_project_slice, values, pixels, a, b) for a, b in bounds if b > a]
        for f in futures:
            f.result()
    return out
