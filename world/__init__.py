"""World: grid, stroke rasterizer, spill/decay engine and pixel projection."""

from world.grid import Direction, Grid
from world.diffusion import Button, DiffusionEngine, PaintMode, PointerStroke
from world.projector import render
from world.constants import (
    DEFAULT_DECAY_FACTOR,
    DEFAULT_MAX_VALUE,
    DEFAULT_RESOLUTION_H,
    DEFAULT_RESOLUTION_W,
    DEFAULT_VALUE_CUTOFF,
)

__all__ = [
    "Grid",
    "Direction",
    "DiffusionEngine",
    "Button",
    "PaintMode",
    "PointerStroke",
    "render",
    "DEFAULT_MAX_VALUE",
    "DEFAULT_VALUE_CUTOFF",
    "DEFAULT_DECAY_FACTOR",
    "DEFAULT_RESOLUTION_W",
    "DEFAULT_RESOLUTION_H",
]
