"""Polygonal mesh loading, DCEL construction and topology checks."""

from __future__ import annotations

import io
import itertools
from typing import Iterable, Iterator, Optional, TextIO

from malha.dcel import Edge, Face, HalfEdge, Vertex
from malha.sweepline import SweepLine

OPEN_MESSAGE = "aberta"
NOT_PLANAR_MESSAGE = "não subdivisão planar"
OVERLAPPED_MESSAGE = "superposta"


class MeshFormatError(ValueError):
    """Raised when a mesh description cannot be read."""


def _boundary(start: HalfEdge) -> Iterator[HalfEdge]:
    """Walk a face loop from ``start``, stopping before the edge that closes it."""
    seen: set[HalfEdge] = set()
    he = start
    while he.next is not None and he.next is not start and he not in seen:
        seen.add(he)
        yield he
        he = he.next


class Mesh:
    """A polygonal mesh stored as a doubly connected edge list."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.n_vertices = 0
        self.n_faces = 0
        self.n_half_edges = 0
        self.vertices: list[Vertex] = []
        self.faces: list[Face] = []
        self.half_edges: list[HalfEdge] = []
        self.face_vertices: list[list[int]] = []
        self._edges_map: dict[int, list[Edge]] = {}

    @classmethod
    def from_text(cls, text: str) -> "Mesh":
        """Build a mesh from its textual description."""
        mesh = cls()
        mesh.load(io.StringIO(text))
        return mesh

    @staticmethod
    def _to_int(token: str) -> int:
        try:
            return int(token)
        except ValueError:
            raise MeshFormatError(f"expected an integer, got {token!r}") from None

    def load(self, stream: Iterable[str] | TextIO) -> None:
        """Read a mesh: counts, vertex coordinates, then one face per line."""
        self._reset()
        rows = (line.split() for line in stream)
        rows = (row for row in rows if row)
        pending: list[str] = []

        def take(count: int) -> list[int]:
            while len(pending) < count:
                row = next(rows, None)
                if row is None:
                    raise MeshFormatError("unexpected end of input")
                pending.extend(row)
            taken = pending[:count]
            del pending[:count]
            return [self._to_int(token) for token in taken]

        n_vertices, n_faces = take(2)
        if n_vertices < 0 or n_faces < 0:
            raise MeshFormatError("vertex and face counts must not be negative")
        self.n_vertices, self.n_faces = n_vertices, n_faces

        for idx in range(n_vertices):
            x, y = take(2)
            self._add_vertex(x, y, idx)

        for idx in range(n_faces):
            self.faces.append(Face(idx))
            if pending:
                row, pending[:] = list(pending), []
            else:
                row = next(rows, None)
                if row is None:
                    raise MeshFormatError(f"missing description of face {idx + 1}")
            indices = [self._to_int(token) for token in row]
            for vertex_index in indices:
                if not 1 <= vertex_index <= len(self.vertices):
                    raise MeshFormatError(
                        f"face {idx + 1} refers to unknown vertex {vertex_index}"
                    )
            self.face_vertices.append(indices)

        self._construct_edges()

    def _add_vertex(self, x: int, y: int, idx: int) -> Optional[Vertex]:
        if any(v.x == x and v.y == y for v in self.vertices):
            return None
        vertex = Vertex(x, y, idx)
        self.vertices.append(vertex)
        return vertex

    def _construct_edges(self) -> None:
        for face_idx, indices in enumerate(self.face_vertices):
            successors = indices[1:] + indices[:1]
            for orig, dest in zip(indices, successors):
                self._edges_map.setdefault(orig - 1, []).append(Edge(dest - 1, face_idx))
        self._construct_half_edges()

    def _create_half_edge(self, origin: Vertex, face_idx: int, idx: int) -> HalfEdge:
        face = self.faces[face_idx]
        he = HalfEdge(idx, origin, left_face=face)
        if origin.half_edge is None:
            origin.half_edge = he
        face.half_edge = he
        return he

    def _construct_half_edges(self) -> None:
        counter = itertools.count()
        pending = {origin: list(edges) for origin, edges in self._edges_map.items()}

        for origin, edge_list in pending.items():
            for edge in list(edge_list):
                dest = edge.dest
                if origin > dest:
                    continue

                he = self._create_half_edge(self.vertices[origin], edge.face_idx, next(counter))
                self.n_half_edges += 1

                twin = None
                candidates = pending.get(dest, [])
                match = next((c for c in candidates if c.dest == origin), None)
                if match is not None:
                    twin = self._create_half_edge(
                        self.vertices[dest], match.face_idx, next(counter)
                    )
                    self.n_half_edges += 1
                    candidates.remove(match)

                if twin is None:
                    # An edge without its opposite: the mesh cannot be closed.
                    return

                he.twin, twin.twin = twin, he
                self.half_edges.extend((he, twin))

        for he in self.half_edges:
            he.next = next(
                (
                    h
                    for h in self.half_edges
                    if h.left_face is he.left_face and h.origin is he.twin.origin
                ),
                None,
            )
        for he in self.half_edges:
            he.prev = next(
                (h for h in self.half_edges if h.left_face is he.left_face and h.next is he),
                None,
            )

    def is_open(self) -> bool:
        """Whether some edge borders only one face."""
        for face in self.faces:
            start = face.half_edge
            if start is None or start.next is None:
                return True
            for he in _boundary(start):
                if he.twin is None:
                    return True
                if he.twin.left_face is None or he.twin.left_face is face:
                    return True
        return False

    def is_not_planar_subdivision(self) -> bool:
        """Whether some vertex is shared by more faces than a planar subdivision allows."""
        for face in self.faces:
            start = face.half_edge
            if start is None:
                return True
            for he in _boundary(start):
                if he.twin is None:
                    return True
                if he.twin.left_face is face:
                    continue
                others = sum(
                    1
                    for h in self.half_edges
                    if h.origin is he.origin and h.left_face is not face
                )
                if others > 2:
                    return True
        return False

    def is_overlapped(self) -> bool:
        """Whether the sweep line finds crossing or nested edges."""
        return SweepLine().find_intersection(self.half_edges)

    def topology_error(self) -> Optional[str]:
        """The first topology problem found, or None for a valid mesh."""
        if self.is_open():
            return OPEN_MESSAGE
        if self.is_not_planar_subdivision():
            return NOT_PLANAR_MESSAGE
        if self.is_overlapped():
            return OVERLAPPED_MESSAGE
        return None

    def is_topology_valid(self) -> bool:
        """Whether the mesh is closed, a planar subdivision and free of overlaps."""
        return self.topology_error() is None

    def dcel_lines(self) -> list[str]:
        """The DCEL as text lines: counts, vertices, faces, then half-edges (1-based)."""
        lines = [f"{self.n_vertices} {self.n_half_edges // 2} {self.n_faces}"]
        for vertex in self.vertices:
            if vertex.half_edge is None:
                raise MeshFormatError(f"vertex {vertex.idx + 1} has no incident edge")
            lines.append(f"{vertex.x} {vertex.y} {vertex.half_edge.idx + 1}")
        for face in self.faces:
            if face.half_edge is None:
                raise MeshFormatError(f"face {face.idx + 1} has no boundary")
            lines.append(f"{face.half_edge.idx + 1}")
        for he in self.half_edges:
            lines.append(
                f"{he.origin.idx + 1} {he.twin.idx + 1} {he.left_face.idx + 1} "
                f"{he.next.idx + 1} {he.prev.idx + 1}"
            )
        return lines