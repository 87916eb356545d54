# MIT License (see LICENSE)
"""
Broadphase collision detection using a uniform grid over the box.

The box [-L/2, L/2]³ is partitioned into cubic cells whose edge is the
largest possible sphere diameter. Two spheres can only touch if their
centers lie in the same or adjacent cells, so each particle is tested
against the 27-cell neighborhood around its own cell.

Key concepts:
- Each particle lives in exactly one cell, chosen by its center.
- The grid stores particle indices, never particle objects.
- The grid is rebuilt from scratch every frame; nothing persists.
- Only occupied cells are stored, so memory is bounded by particle count.
"""
from __future__ import annotations
import math
from collections import defaultdict
from typing import Iterator, Sequence

from ..types import Particle

Cell = tuple[int, int, int]

# Neighbor offsets in visiting order: x outermost, z innermost.
_OFFSETS: tuple[Cell, ...] = tuple(
    (di, dj, dk) for di in (-1, 0, 1) for dj in (-1, 0, 1) for dk in (-1, 0, 1)
)


class SpatialGrid:
    """
    Uniform bucket grid for broadphase neighbor queries.

    Attributes:
        box_size: Edge length of the cubic box in meters.
        cell: Edge length of a grid cell in meters.
        dim: Number of cells along each axis.

    Example:
        grid = SpatialGrid(box_size=4.0, cell_size=2 * max_radius)
        grid.build(particles)
        for i, p in enumerate(particles):
            for j in grid.neighbors(p.position):
                collide(p, particles[j])
    """

    def __init__(self, box_size: float, cell_size: float) -> None:
        """
        Initialize an empty grid.

        Args:
            box_size: Edge length of the box. Must be positive.
            cell_size: Cell edge. Should be at least the largest sphere
                       diameter so that touching spheres share a neighborhood.
        """
        if box_size <= 0:
            raise ValueError(f"box_size must be positive, got {box_size}")
        if not cell_size > 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.box_size = float(box_size)
        self.cell = float(cell_size)
        self.dim = int(math.floor(self.box_size / self.cell)) + 1
        self._buckets: dict[Cell, list[int]] = defaultdict(list)

    def index(self, x: float) -> int:
        """Cell index along one axis for a world coordinate inside the box."""
        return int(math.floor((x + 0.5 * self.box_size) / self.cell))

    def cell_of(self, position) -> Cell:
        """Cell coordinates (i, j, k) containing a world position."""
        return (self.index(position[0]), self.index(position[1]), self.index(position[2]))

    def build(self, particles: Sequence[Particle]) -> None:
        """
        Assign every particle index to the bucket of its center cell.

        Previous contents are discarded. Bucket order follows particle order.
        """
        self._buckets = defaultdict(list)
        for idx, p in enumerate(particles):
            self._buckets[self.cell_of(p.position)].append(idx)

    def bucket(self, cell: Cell) -> list[int]:
        """Particle indices stored in a cell (empty list if unoccupied)."""
        return self._buckets.get(cell, [])

    def occupied(self) -> int:
        """Number of non-empty cells."""
        return len(self._buckets)

    def neighbor_cells(self, cell: Cell) -> Iterator[Cell]:
        """
        Yield the cell itself and its face/edge/corner neighbors.

        Cells outside [0, dim) on any axis are skipped, so boundary cells
        have fewer than 27 neighbors.
        """
        i, j, k = cell
        dim = self.dim
        for di, dj, dk in _OFFSETS:
            gi, gj, gk = i + di, j + dj, k + dk
            if 0 <= gi < dim and 0 <= gj < dim and 0 <= gk < dim:
                yield (gi, gj, gk)

    def neighbors(self, position) -> Iterator[int]:
        """
        Yield indices of all particles in the 27-cell neighborhood of a position.

        The particle at that position is included; callers filter self-pairs.
        """
        for c in self.neighbor_cells(self.cell_of(position)):
            yield from self.bucket(c)
