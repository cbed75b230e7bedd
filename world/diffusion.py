"""
Per-frame update: paint the pointer stroke, then spill and decay.
Spillover: a cell above the cutoff keeps 1/9 of its value and hands 1/9 to each of its
up to 8 neighbours. Zero-pad at the edges, so shares aimed off-grid are lost.
Spillover is summed into a separate accumulator grid and merged afterwards, so every
cell decides whether to spill from the same snapshot of the base grid.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from world.constants import (
    DEFAULT_DECAY_FACTOR,
    DEFAULT_MAX_VALUE,
    DEFAULT_RESOLUTION_H,
    DEFAULT_RESOLUTION_W,
    DEFAULT_VALUE_CUTOFF,
    SPILL_SHARES,
)
from world.errors import DimensionMismatchError
from world.grid import Grid
from world.line import line_cells
from world.projector import render

logger = logging.getLogger(__name__)

# 3×3 spill kernel: every neighbour receives one share, the centre is handled in place.
SPILL_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.float64)


class Button(Enum):
    LEFT = "left"
    RIGHT = "right"


class PaintMode(Enum):
    IDLE = "idle"
    ADDING = "adding"
    ERASING = "erasing"


@dataclass
class PointerStroke:
    """Pointer samples for one frame; previous is None at the start of a stroke."""

    previous: tuple[float, float] | None
    current: tuple[float, float]


def round_half_away(v: float) -> int:
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


def _convolve3x3_vectorized(arr: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """Convolve with 3×3 kernel; same shape; zero-pad."""
    ny, nx = arr.shape
    out = np.zeros_like(arr)
    pad = np.zeros((ny + 2, nx + 2), dtype=arr.dtype)
    pad[1:-1, 1:-1] = arr
    for ki in range(3):
        for kj in range(3):
            if kernel[ki, kj]:
                out += kernel[ki, kj] * pad[ki : ki + ny, kj : kj + nx]
    return out


def spill(base: Grid, accumulator: Grid, value_cutoff: float = DEFAULT_VALUE_CUTOFF) -> None:
    """
    Divide every cell above value_cutoff by 9 and scatter-add the result to the
    accumulator cells of its valid neighbours. Cells at or below the cutoff become 0.
    """
    cells = base.cells
    spilling = cells > value_cutoff
    cells[spilling] /= SPILL_SHARES
    cells[~spilling] = 0.0
    # Only spilling cells are non-zero now, so the whole grid is the spill source.
    accumulator.as_2d()[...] += _convolve3x3_vectorized(base.as_2d(), SPILL_KERNEL)


def merge(
    base: Grid,
    accumulator: Grid,
    decay_amount: float = 0.0,
    max_value: float = DEFAULT_MAX_VALUE,
) -> None:
    """base = clamp(base + accumulator - decay_amount, 0, max_value); accumulator reset."""
    np.clip(base.cells + accumulator.cells - decay_amount, 0.0, max_value, out=base.cells)
    accumulator.fill(0.0)


class DiffusionEngine:
    """Owns the base and accumulator grids plus the painting state of the pointer."""

    def __init__(
        self,
        width: int = DEFAULT_RESOLUTION_W,
        height: int = DEFAULT_RESOLUTION_H,
        max_value: float = DEFAULT_MAX_VALUE,
        value_cutoff: float = DEFAULT_VALUE_CUTOFF,
        decay_factor: float = DEFAULT_DECAY_FACTOR,
    ) -> None:
        self.max_value = max_value
        self.value_cutoff = value_cutoff
        self.decay_factor = decay_factor
        self.base = Grid(height, width)
        self.accumulator = Grid(height, width)
        self.pointer_xy: tuple[float, float] = (0.0, 0.0)
        self.previous_pointer_xy: tuple[float, float] | None = None
        self.held: set[Button] = set()
        logger.debug("Created base and accumulator grids (w: %d, h: %d)", width, height)

    @property
    def width(self) -> int:
        return self.base.width

    @property
    def height(self) -> int:
        return self.base.height

    @property
    def paint_mode(self) -> PaintMode:
        # Left wins when both buttons are held.
        if Button.LEFT in self.held:
            return PaintMode.ADDING
        if Button.RIGHT in self.held:
            return PaintMode.ERASING
        return PaintMode.IDLE

    def move_pointer(self, x: float, y: float) -> None:
        self.pointer_xy = (x, y)

    def press(self, button: Button) -> None:
        logger.info("Pressed %s button", button.value)
        self.held.add(button)

    def release(self, button: Button) -> None:
        logger.info("Released %s button", button.value)
        self.held.discard(button)

    def resize(self, width: int, height: int) -> None:
        """Replace both grids together; painting restarts with a fresh stroke."""
        base, accumulator = Grid(height, width), Grid(height, width)
        self.base, self.accumulator = base, accumulator
        self.previous_pointer_xy = None
        logger.info("Resized grids to (w: %d, h: %d)", width, height)

    def clear(self) -> None:
        self.base.fill(0.0)
        self.accumulator.fill(0.0)
        self.previous_pointer_xy = None

    def stroke(self) -> PointerStroke:
        return PointerStroke(previous=self.previous_pointer_xy, current=self.pointer_xy)

    def paint(self) -> None:
        mode = self.paint_mode
        if mode is PaintMode.IDLE:
            self.previous_pointer_xy = None
            return
        stroke = self.stroke()
        x, y = (round_half_away(v) for v in stroke.current)
        if not self.base.contains(x, y):
            logger.debug("Pointer outside grid bounds {x: %d, y: %d}", x, y)
            self.previous_pointer_xy = None
            return
        value = self.max_value if mode is PaintMode.ADDING else 0.0
        if stroke.previous is None:
            self.base.set(x, y, value)
            logger.debug("Painting {x: %d, y: %d}", x, y)
        else:
            prev_x, prev_y = (round_half_away(v) for v in stroke.previous)
            for cx, cy in line_cells(prev_x, prev_y, x, y, self.width, self.height):
                self.base.set(cx, cy, value)
            logger.debug("Painting from {x: %d, y: %d} to {x: %d, y: %d}", prev_x, prev_y, x, y)
        self.previous_pointer_xy = stroke.current

    def step(self, frame_time: float) -> None:
        """One diffusion tick. Decay is scaled by frame_time (seconds)."""
        if len(self.base) != len(self.accumulator):
            raise DimensionMismatchError(
                "grids should be identical length but they are not: "
                f"len(base) == {len(self.base)}, len(accumulator) == {len(self.accumulator)}"
            )
        spill(self.base, self.accumulator, self.value_cutoff)
        merge(self.base, self.accumulator, self.decay_factor * frame_time, self.max_value)

    def update(self, frame_time: float) -> None:
        self.paint()
        self.step(frame_time)

    def render(self, out: bytearray | None = None, workers: int = 1) -> bytearray:
        return render(self.base, out, workers)
