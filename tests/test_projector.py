"""Tests for the value-to-pixel projection."""

from __future__ import annotations

import numpy as np
import pytest

from world.errors import DimensionMismatchError
from world.grid import Grid
from world.projector import render, value_to_luma


def test_reference_pixels() -> None:
    grid = Grid(height=1, width=3)
    grid.cells[:] = [1.0, 0.0, 0.5]
    out = render(grid)
    assert list(out) == [0, 0, 0, 255, 255, 255, 255, 255, 128, 128, 128, 255]


def test_out_of_range_values_are_clamped() -> None:
    luma = value_to_luma(np.array([-3.0, 7.5, 0.25]))
    assert luma.tolist() == [255, 0, 191]
    assert luma.dtype == np.uint8


def test_fills_caller_buffer_in_place() -> None:
    grid = Grid(height=2, width=2)
    grid.set(1, 1, 1.0)
    buf = bytearray(16)
    result = render(grid, buf)
    assert result is buf
    assert tuple(buf[12:16]) == (0, 0, 0, 255)
    assert tuple(buf[0:4]) == (255, 255, 255, 255)


def test_wrong_buffer_length_rejected() -> None:
    grid = Grid(height=2, width=2)
    with pytest.raises(DimensionMismatchError):
        render(grid, bytearray(15))


@pytest.mark.parametrize("workers", [2, 3, 8, 50])
def test_threaded_render_matches_single_worker(workers: int) -> None:
    rng = np.random.default_rng(11)
    grid = Grid(height=13, width=17)
    grid.cells[:] = rng.random(len(grid))
    assert render(grid, workers=workers) == render(grid)
