"""Diffuser exceptions."""


class DiffuserError(Exception):
    """Base exception for the simulation kernel."""


class InvalidIndexError(DiffuserError, IndexError):
    """Raised when a cell that must exist is missing."""

    def __init__(self, list_name: str, index: int, length: int) -> None:
        self.list_name = list_name
        self.index = index
        self.length = length
        super().__init__(
            f'No element in list "{list_name}" at index {index}, list is {length} elements long'
        )


class DimensionMismatchError(DiffuserError, ValueError):
    """Raised when two buffers that must line up cell-for-cell do not."""
