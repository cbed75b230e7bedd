"""Flat row-major grid of paint values. Cell (x, y) lives at index x + width * y."""

import logging
from enum import Enum
from typing import Iterator

import numpy as np

from world.constants import DEFAULT_RESOLUTION_H, DEFAULT_RESOLUTION_W, NEIGHBOUR_OFFSETS
from world.errors import InvalidIndexError

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Compass direction as a (dx, dy) offset; y grows southwards."""

    NORTH_WEST = NEIGHBOUR_OFFSETS[0]
    NORTH = NEIGHBOUR_OFFSETS[1]
    NORTH_EAST = NEIGHBOUR_OFFSETS[2]
    WEST = NEIGHBOUR_OFFSETS[3]
    EAST = NEIGHBOUR_OFFSETS[4]
    SOUTH_EAST = NEIGHBOUR_OFFSETS[5]
    SOUTH = NEIGHBOUR_OFFSETS[6]
    SOUTH_WEST = NEIGHBOUR_OFFSETS[7]

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


def calculate_index_from_xy(x: int, y: int, width: int) -> int:
    return x + width * y


def calculate_xy_from_index(index: int, width: int) -> tuple[int, int]:
    y, x = divmod(index, width)
    return x, y


class Grid:
    """Fixed-size scalar field. Lookups return None off-grid; setters return False."""

    __slots__ = ("width", "height", "cells")

    def __init__(self, height: int = DEFAULT_RESOLUTION_H, width: int = DEFAULT_RESOLUTION_W) -> None:
        if height <= 0 or width <= 0:
            raise ValueError(f"Grid dimensions must be positive, got height={height}, width={width}")
        if height > width:
            logger.warning(
                "Grid height (%d) is greater than grid width (%d). Are you sure about that?",
                height,
                width,
            )
        self.width = width
        self.height = height
        self.cells = np.zeros(height * width, dtype=np.float64)

    def __len__(self) -> int:
        return self.cells.size

    @property
    def shape(self) -> tuple[int, int]:
        return (self.width, self.height)

    def as_2d(self) -> np.ndarray:
        """(height, width) view; writes go through to cells."""
        return self.cells.reshape(self.height, self.width)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise InvalidIndexError("cells", calculate_index_from_xy(x, y, self.width), len(self))
        return calculate_index_from_xy(x, y, self.width)

    def xy(self, index: int) -> tuple[int, int]:
        if not 0 <= index < len(self):
            raise InvalidIndexError("cells", index, len(self))
        return calculate_xy_from_index(index, self.width)

    def get(self, x: int, y: int) -> float | None:
        if not self.contains(x, y):
            return None
        return float(self.cells[calculate_index_from_xy(x, y, self.width)])

    def set(self, x: int, y: int, value: float) -> bool:
        if not self.contains(x, y):
            return False
        self.cells[calculate_index_from_xy(x, y, self.width)] = value
        return True

    def get_by_index(self, index: int) -> float | None:
        if not 0 <= index < self.cells.size:
            return None
        return float(self.cells[index])

    def set_by_index(self, index: int, value: float) -> bool:
        if not 0 <= index < self.cells.size:
            return False
        self.cells[index] = value
        return True

    def neighbour_index(self, index: int, direction: Direction) -> int | None:
        """
        Index of the cell next to index in direction, or None if that crosses an edge.
        No wraparound: a diagonal is missing if either its row or its column is off-grid.
        """
        if not 0 <= index < self.cells.size:
            return None
        x, y = calculate_xy_from_index(index, self.width)
        nx, ny = x + direction.dx, y + direction.dy
        if not self.contains(nx, ny):
            return None
        return calculate_index_from_xy(nx, ny, self.width)

    def neighbour_by_index(self, index: int, direction: Direction) -> float | None:
        n = self.neighbour_index(index, direction)
        return None if n is None else float(self.cells[n])

    def neighbour(self, x: int, y: int, direction: Direction) -> float | None:
        if not self.contains(x, y):
            return None
        return self.neighbour_by_index(calculate_index_from_xy(x, y, self.width), direction)

    def neighbours(self, index: int) -> Iterator[tuple[Direction, int]]:
        for direction in Direction:
            n = self.neighbour_index(index, direction)
            if n is not None:
                yield direction, n

    def iterate(self) -> Iterator[tuple[int, int, float]]:
        width = self.width
        for index, value in enumerate(self.cells.tolist()):
            y, x = divmod(index, width)
            yield x, y, value

    def iterate_mut(self) -> Iterator[tuple[int, int, np.ndarray]]:
        """Yield (x, y, cell) where cell is a one-element view: cell[0] = v writes the grid."""
        width = self.width
        for index in range(self.cells.size):
            y, x = divmod(index, width)
            yield x, y, self.cells[index : index + 1]

    def fill(self, value: float) -> None:
        self.cells.fill(value)

    def total(self) -> float:
        return float(np.sum(self.cells))
