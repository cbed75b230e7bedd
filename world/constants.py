"""Simulation constants. Values are paint intensity in [0, DEFAULT_MAX_VALUE]; empty = 0."""

DEFAULT_MAX_VALUE = 1.0
# Cells at or below this are snapped to 0 instead of spilling.
DEFAULT_VALUE_CUTOFF = 1e-3
# Subtracted from every cell per second of frame time.
DEFAULT_DECAY_FACTOR = 0.01
DEFAULT_RESOLUTION_W, DEFAULT_RESOLUTION_H = 640, 360
# A spilling cell keeps one share and hands one share to each of its 8 neighbours.
SPILL_SHARES = 9.0
# Neighbour offsets (dx, dy), y grows southwards. Order matches Direction.
NEIGHBOUR_OFFSETS = [(-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (1, 1), (0, 1), (-1, 1)]
