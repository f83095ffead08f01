"""
Indexed vertex buffers for wall geometry.

A RelativeBuffers instance holds one chunk of triangle geometry: per-vertex
positions and texture coordinates plus a flat triangle index list. Chunks
are produced in a local frame, moved into place with ``transform`` and
merged with ``concat`` / ``concat_all``. None of these operations mutate
their inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Attribute:
    """A single mesh vertex: position + texture coordinate (both in pixels)."""
    space_coord_px: Vec3
    tex_coord_px: Vec2


def _frozen(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


class RelativeBuffers:
    """Vertex + index buffers for a chunk of geometry.

    Attributes:
        positions: Shape (N, 3), dtype=float32
        tex_coords: Shape (N, 2), dtype=float32
        indices: Shape (M,), dtype=uint32, three entries per triangle.
            Every index is < N; construction raises ValueError otherwise.
    """

    __slots__ = ("positions", "tex_coords", "indices")

    def __init__(self, positions, tex_coords, indices):
        positions = np.array(positions, dtype=np.float32).reshape(-1, 3)
        tex_coords = np.array(tex_coords, dtype=np.float32).reshape(-1, 2)
        indices = np.array(indices, dtype=np.uint32).reshape(-1)
        if len(positions) != len(tex_coords):
            raise ValueError(
                f"Position count {len(positions)} does not match "
                f"texture coordinate count {len(tex_coords)}"
            )
        if len(indices) and int(indices.max()) >= len(positions):
            raise ValueError(
                f"Index {int(indices.max())} references vertex beyond count {len(positions)}"
            )
        self.positions = _frozen(positions)
        self.tex_coords = _frozen(tex_coords)
        self.indices = _frozen(indices)

    @classmethod
    def empty(cls) -> 'RelativeBuffers':
        return cls(np.zeros((0, 3)), np.zeros((0, 2)), np.zeros(0))

    @classmethod
    def from_attributes(cls, attributes: Sequence[Attribute],
                        indices: Iterable[int]) -> 'RelativeBuffers':
        """Build buffers from a list of Attribute rows."""
        if not attributes:
            return cls(np.zeros((0, 3)), np.zeros((0, 2)), list(indices))
        return cls(
            [a.space_coord_px for a in attributes],
            [a.tex_coord_px for a in attributes],
            list(indices),
        )

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def is_empty(self) -> bool:
        return len(self.positions) == 0

    @property
    def attributes(self) -> List[Attribute]:
        """Vertices as Attribute rows, in buffer order."""
        return [
            Attribute(
                space_coord_px=tuple(float(c) for c in pos),
                tex_coord_px=tuple(float(c) for c in tex),
            )
            for pos, tex in zip(self.positions, self.tex_coords)
        ]

    def concat(self, other: 'RelativeBuffers') -> 'RelativeBuffers':
        """Append other's geometry, shifting its indices past our vertices."""
        return RelativeBuffers(
            np.concatenate([self.positions, other.positions]),
            np.concatenate([self.tex_coords, other.tex_coords]),
            np.concatenate([self.indices, other.indices + np.uint32(self.vertex_count)]),
        )

    def __add__(self, other: 'RelativeBuffers') -> 'RelativeBuffers':
        return self.concat(other)

    @classmethod
    def concat_all(cls, buffers: Iterable['RelativeBuffers']) -> 'RelativeBuffers':
        """Merge many buffers in one pass.

        Equivalent to folding ``concat`` over ``buffers`` left to right, but
        each array is copied once.
        """
        positions = []
        tex_coords = []
        indices = []
        offset = 0

        for b in buffers:
            positions.append(b.positions)
            tex_coords.append(b.tex_coords)
            indices.append(b.indices + np.uint32(offset))
            offset += b.vertex_count

        if not positions:
            return cls.empty()

        return cls(
            np.concatenate(positions),
            np.concatenate(tex_coords),
            np.concatenate(indices),
        )

    def transform(self, matrix: np.ndarray) -> 'RelativeBuffers':
        """Apply a 4x4 affine matrix to every position.

        Texture coordinates and indices are carried over unchanged.
        """
        matrix = np.asarray(matrix, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError(f"Expected a 4x4 matrix, got shape {matrix.shape}")
        homogeneous = np.hstack([self.positions.astype(np.float64),
                                 np.ones((self.vertex_count, 1))])
        moved = homogeneous @ matrix.T
        return RelativeBuffers(moved[:, :3], self.tex_coords, self.indices)

    def resolved_triangles(self) -> List[Tuple[Vec3, Vec3, Vec3]]:
        """Triangles as tuples of vertex positions (index-free view)."""
        tris = self.positions[self.indices].reshape(-1, 3, 3)
        return [tuple(tuple(float(c) for c in v) for v in tri) for tri in tris]

    def bounds(self) -> Tuple[Vec3, Vec3]:
        """Axis-aligned bounding box (min, max) of all positions."""
        if self.is_empty:
            return (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)
        lo = self.positions.min(axis=0)
        hi = self.positions.max(axis=0)
        return tuple(float(c) for c in lo), tuple(float(c) for c in hi)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RelativeBuffers):
            return NotImplemented
        return (np.array_equal(self.positions, other.positions)
                and np.array_equal(self.tex_coords, other.tex_coords)
                and np.array_equal(self.indices, other.indices))

    __hash__ = None

    def __repr__(self) -> str:
        return (f"RelativeBuffers(vertices={self.vertex_count}, "
                f"indices={self.index_count})")
