from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Set

import numpy as np

from predprey.ecology.randomizer import Randomizer

if TYPE_CHECKING:
    from predprey.ecology.organism import Organism

DEFAULT_DEPTH = 80
DEFAULT_WIDTH = 120

# Moore neighbourhood, row-major
NEIGHBOUR_OFFSETS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]


class OutOfBoundsError(IndexError):
    pass


@dataclass(frozen=True)
class Location:
    row: int
    col: int


class Field:
    """
    Rectangular grid of cells, each empty or holding exactly one organism.

    The grid does not own the organisms; it only stores references to them.
    Organisms move through Organism.set_location, which clears the old cell
    before occupying the new one, so a cell and its occupant always agree.

    Cells can also be reserved for newborns that are placed only after the
    current step's sweep. Reserved cells are never reported as free.
    """

    def __init__(self, depth: int, width: int, randomizer: Optional[Randomizer] = None):
        if depth <= 0 or width <= 0:
            print(f"The dimensions must be greater than zero (got {depth}x{width}).")
            print(f"Using default values {DEFAULT_DEPTH}x{DEFAULT_WIDTH}.")
            depth, width = DEFAULT_DEPTH, DEFAULT_WIDTH
        self.depth: int = depth
        self.width: int = width
        self.randomizer = randomizer
        self.grid: np.ndarray = np.full((depth, width), None, dtype=object)
        self.reserved: Set[Location] = set()

    def __repr__(self) -> str:
        return f"Field(depth={self.depth}, width={self.width})"

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.depth and 0 <= col < self.width

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(
                f"Location ({row}, {col}) is outside the {self.depth}x{self.width} field"
            )

    def check_location(self, location: Location) -> None:
        """Raise OutOfBoundsError unless the location lies on this field."""
        self._check_bounds(location.row, location.col)

    def place(self, organism: "Organism", row: int, col: int) -> None:
        """
        Store an organism reference at (row, col).

        Any previous occupant is overwritten without being touched; callers
        go through Organism.set_location so that never leaves a stale
        occupant behind.
        """
        self._check_bounds(row, col)
        self.grid[row, col] = organism

    def get_object_at(self, row: int, col: int) -> Optional["Organism"]:
        self._check_bounds(row, col)
        return self.grid[row, col]

    def get_object_at_location(self, location: Location) -> Optional["Organism"]:
        return self.get_object_at(location.row, location.col)

    def clear_location(self, location: Location) -> None:
        self._check_bounds(location.row, location.col)
        self.grid[location.row, location.col] = None

    def clear(self) -> None:
        self.grid.fill(None)
        self.reserved.clear()

    def reserve(self, location: Location) -> None:
        self._check_bounds(location.row, location.col)
        self.reserved.add(location)

    def release(self, location: Location) -> None:
        self.reserved.discard(location)

    def is_reserved(self, location: Location) -> bool:
        return location in self.reserved

    def adjacent_locations(self, location: Location) -> List[Location]:
        """
        Return the in-bounds neighbours of a location, excluding the location itself.

        Neighbours are generated in row-major offset order and then shuffled
        with the field's randomizer, if it has one. Edges do not wrap.
        """
        adjacent = []
        for d_row, d_col in NEIGHBOUR_OFFSETS:
            row = location.row + d_row
            col = location.col + d_col
            if self.in_bounds(row, col):
                adjacent.append(Location(row, col))
        if self.randomizer is not None:
            self.randomizer.shuffle(adjacent)
        return adjacent

    def free_adjacent_locations(self, location: Location) -> List[Location]:
        return [
            loc
            for loc in self.adjacent_locations(location)
            if self.grid[loc.row, loc.col] is None and loc not in self.reserved
        ]

    def free_adjacent_location(self, location: Location) -> Optional[Location]:
        free = self.free_adjacent_locations(location)
        if free:
            return free[0]
        return None

    def species_layout(self) -> np.ndarray:
        """
        Returns:
            np.ndarray: depth x width array holding each occupant's kind, "" where empty.
        """
        layout = np.full((self.depth, self.width), "", dtype=object)
        for row in range(self.depth):
            for col in range(self.width):
                occupant = self.grid[row, col]
                if occupant is not None:
                    layout[row, col] = occupant.kind
        return layout
