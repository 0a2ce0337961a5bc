"""Doubly connected edge list records for planar polygonal meshes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class Vertex:
    """A mesh vertex with integer coordinates and one outgoing half-edge."""

    x: int
    y: int
    idx: int
    half_edge: Optional["HalfEdge"] = None

    def __repr__(self) -> str:
        return f"Vertex(idx={self.idx}, x={self.x}, y={self.y})"


@dataclass(eq=False, repr=False)
class Face:
    """A mesh face, holding one half-edge that has it as its left face."""

    idx: int
    half_edge: Optional["HalfEdge"] = None

    def __repr__(self) -> str:
        return f"Face(idx={self.idx})"


@dataclass(eq=False, repr=False)
class HalfEdge:
    """A directed edge of a face boundary, linked to its twin and neighbours."""

    idx: int
    origin: Vertex
    twin: Optional["HalfEdge"] = None
    next: Optional["HalfEdge"] = None
    prev: Optional["HalfEdge"] = None
    left_face: Optional[Face] = None

    @property
    def destination(self) -> Vertex:
        """The vertex this half-edge points to, i.e. the origin of its twin."""
        if self.twin is None:
            raise ValueError(f"half-edge {self.idx} has no twin")
        return self.twin.origin

    def __repr__(self) -> str:
        face = None if self.left_face is None else self.left_face.idx
        return f"HalfEdge(idx={self.idx}, origin={self.origin.idx}, face={face})"


@dataclass(frozen=True)
class Edge:
    """A directed edge read from a face description: destination index and face."""

    dest: int
    face_idx: int