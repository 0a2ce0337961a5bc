"""Sweep-line search for crossing or overlapping edges in a mesh."""

from __future__ import annotations

import heapq
import itertools
from bisect import bisect_left
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Optional

from malha.dcel import Face, HalfEdge, Vertex


class EventType(IntEnum):
    LEFT_ENDPOINT = 0
    RIGHT_ENDPOINT = 1


@dataclass(frozen=True, eq=False)
class Event:
    """An endpoint of a segment reached by the sweep line."""

    half_edge: HalfEdge
    vertex: Vertex
    kind: EventType


def orientation(a: Vertex, b: Vertex, c: Vertex) -> int:
    """Return 0 if the points are collinear, 1 if clockwise, 2 if counter-clockwise."""
    val = (b.y - a.y) * (c.x - b.x) - (b.x - a.x) * (c.y - b.y)
    if val == 0:
        return 0
    return 1 if val > 0 else 2


def on_segment(p: Vertex, q: Vertex, r: Vertex) -> bool:
    """Whether q lies within the bounding box of the segment p-r."""
    return (
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def _face_loop(face: Face) -> Iterator[HalfEdge]:
    start = face.half_edge
    he = start
    while True:
        yield he
        he = he.next
        if he is start:
            return


def _strictly_inside(face: Face, point: Vertex) -> bool:
    return all(
        orientation(he.origin, he.next.origin, point) == 2 for he in _face_loop(face)
    )


def is_inside_another_face(prev: HalfEdge, current: HalfEdge) -> bool:
    """Whether both endpoints of ``current`` lie strictly inside the face of ``prev``."""
    prev_face = prev.left_face
    if current.left_face is prev_face:
        return False
    return _strictly_inside(prev_face, current.origin) and _strictly_inside(
        prev_face, current.destination
    )


def intersects(prev: HalfEdge, current: HalfEdge) -> bool:
    """Whether two edges overlap: one lies in the other's face, or they cross."""
    if is_inside_another_face(prev, current):
        return True

    p1, q1 = prev.origin, prev.destination
    p2, q2 = current.origin, current.destination

    if p1 is p2 or p1 is q2 or q1 is p2 or q1 is q2:
        return False

    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)

    if o1 != o2 and o3 != o4:
        return True

    return (
        (o1 == 0 and on_segment(p1, p2, q1))
        or (o2 == 0 and on_segment(p1, q2, q1))
        or (o3 == 0 and on_segment(p2, p1, q2))
        or (o4 == 0 and on_segment(p2, q1, q2))
    )


class SweepLine:
    """Bottom-to-top sweep over edge endpoints keeping an ordered status of active edges."""

    def __init__(self) -> None:
        self.sweep_y = 0
        self._status: list[HalfEdge] = []
        self._queue: list[tuple] = []
        self._counter = itertools.count()

    def _x_at_sweep(self, he: HalfEdge) -> float:
        p1, p2 = he.origin, he.destination
        if p1.y == p2.y:
            return float(p1.x)
        return p1.x + (p2.x - p1.x) * (self.sweep_y - p1.y) / (p2.y - p1.y)

    def _status_key(self, he: HalfEdge) -> tuple[float, int]:
        return (self._x_at_sweep(he), he.idx)

    def _push(self, vertex: Vertex, kind: EventType, he: HalfEdge) -> None:
        # Lowest y first, then lowest x, right endpoints before left ones.
        entry = (vertex.y, vertex.x, -int(kind), next(self._counter), Event(he, vertex, kind))
        heapq.heappush(self._queue, entry)

    def _enqueue(self, he: Optional[HalfEdge]) -> None:
        if he is None:
            return
        left, right = he.origin, he.destination
        if (left.x, left.y) < (right.x, right.y):
            self._push(left, EventType.LEFT_ENDPOINT, he)
            self._push(right, EventType.RIGHT_ENDPOINT, he)
        else:
            self._push(left, EventType.RIGHT_ENDPOINT, he.twin)
            self._push(right, EventType.LEFT_ENDPOINT, he.twin)

    def _position(self, he: HalfEdge) -> Optional[int]:
        return next((i for i, item in enumerate(self._status) if item is he), None)

    def _add(self, event: Event) -> bool:
        he = event.half_edge
        pos = self._position(he)
        if pos is None:
            pos = bisect_left(self._status, self._status_key(he), key=self._status_key)
            self._status.insert(pos, he)

        if pos == 0:
            return False
        if intersects(self._status[pos - 1], he):
            return True
        if pos + 1 < len(self._status):
            return intersects(self._status[pos + 1], he)
        return False

    def _remove(self, event: Event) -> bool:
        pos = self._position(event.half_edge)
        if pos is None:
            return False
        has_prev = pos > 0
        has_next = pos + 1 < len(self._status)
        prev = self._status[pos - 1] if has_prev else None
        following = self._status[pos + 1] if has_next else None
        del self._status[pos]
        return has_prev and has_next and intersects(prev, following)

    def find_intersection(self, half_edges: Iterable[Optional[HalfEdge]]) -> bool:
        """Return True as soon as the sweep finds two overlapping edges."""
        self._status = []
        self._queue = []
        for he in half_edges:
            self._enqueue(he)

        while self._queue:
            event = heapq.heappop(self._queue)[-1]
            self.sweep_y = event.vertex.y
            if event.kind is EventType.LEFT_ENDPOINT:
                if self._add(event):
                    return True
            elif self._remove(event):
                return True
        return False