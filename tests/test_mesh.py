import io

import pytest

from malha.mesh import Mesh, MeshFormatError

CLOSED_TRIANGLE = "3 2\n0 0\n4 0\n0 4\n1 2 3\n1 3 2\n"
SHIFTED_TRIANGLE = "3 2\n10 10\n13 10\n10 12\n1 2 3\n1 3 2\n"


def test_closed_triangle_dcel():
    mesh = Mesh.from_text(CLOSED_TRIANGLE)
    assert mesh.is_topology_valid()
    assert mesh.dcel_lines() == [
        "3 3 2",
        "0 0 1",
        "4 0 2",
        "0 4 4",
        "5",
        "6",
        "1 2 1 5 4",
        "2 1 2 3 6",
        "1 4 2 6 2",
        "3 3 1 1 5",
        "2 6 1 4 1",
        "3 5 2 2 3",
    ]


@pytest.mark.parametrize("text", [CLOSED_TRIANGLE, SHIFTED_TRIANGLE])
def test_valid_mesh_checks(text):
    mesh = Mesh.from_text(text)
    assert mesh.is_open() is False
    assert mesh.is_not_planar_subdivision() is False
    assert mesh.is_overlapped() is False
    assert mesh.topology_error() is None


@pytest.mark.parametrize("text", [CLOSED_TRIANGLE, SHIFTED_TRIANGLE])
def test_half_edge_invariants(text):
    mesh = Mesh.from_text(text)
    assert len(mesh.half_edges) == mesh.n_half_edges
    for he in mesh.half_edges:
        assert he.twin.twin is he
        assert he.next.prev is he
        assert he.prev.next is he
        assert he.next.left_face is he.left_face
        assert he.destination is he.next.origin
        assert he.twin.left_face is not he.left_face


def test_dcel_line_count():
    mesh = Mesh.from_text(CLOSED_TRIANGLE)
    lines = mesh.dcel_lines()
    assert len(lines) == 1 + len(mesh.vertices) + len(mesh.faces) + len(mesh.half_edges)


def test_single_triangle_is_open():
    mesh = Mesh.from_text("3 1\n0 0\n4 0\n0 4\n1 2 3\n")
    assert mesh.is_open()
    assert mesh.topology_error() == "aberta"
    assert not mesh.is_topology_valid()


def test_layout_does_not_change_result():
    reference = Mesh.from_text(CLOSED_TRIANGLE).dcel_lines()
    one_line = Mesh.from_text("3 2 0 0 4 0 0 4\n1 2 3\n1 3 2\n").dcel_lines()
    spaced = Mesh.from_text("\n3 2\n\n0 0\n4 0\n0 4\n\n1 2 3\n\n1 3 2").dcel_lines()
    assert one_line == reference
    assert spaced == reference


def test_face_may_follow_last_vertex_on_same_line():
    mesh = Mesh.from_text("3 2\n0 0\n4 0\n0 4 1 2 3\n1 3 2\n")
    assert mesh.face_vertices == [[1, 2, 3], [1, 3, 2]]
    assert mesh.dcel_lines() == Mesh.from_text(CLOSED_TRIANGLE).dcel_lines()


def test_load_from_stream():
    mesh = Mesh()
    mesh.load(io.StringIO(CLOSED_TRIANGLE))
    assert mesh.n_vertices == 3
    assert mesh.n_faces == 2
    assert [(v.x, v.y) for v in mesh.vertices] == [(0, 0), (4, 0), (0, 4)]


def test_duplicate_vertex_is_skipped():
    mesh = Mesh.from_text("3 1\n0 0\n0 0\n1 1\n1 2\n")
    assert [(v.x, v.y) for v in mesh.vertices] == [(0, 0), (1, 1)]
    assert mesh.n_vertices == 3


@pytest.mark.parametrize(
    "text",
    [
        "abc",
        "",
        "3 1\n0 0\n",
        "3 2\n0 0\n4 0\n0 4\n1 2 3\n",
        "3 1\n0 0\n4 0\n0 4\n1 2 9\n",
        "3 1\n0 0\n4 0\n0 4\n0 1 2\n",
        "-1 0\n",
        "3 1\n0 0\n4 x\n0 4\n1 2 3\n",
    ],
)
def test_bad_input_raises(text):
    with pytest.raises(MeshFormatError):
        Mesh.from_text(text)


def test_reload_replaces_previous_mesh():
    mesh = Mesh.from_text("3 1\n0 0\n4 0\n0 4\n1 2 3\n")
    mesh.load(io.StringIO(CLOSED_TRIANGLE))
    assert mesh.is_topology_valid()
    assert len(mesh.faces) == 2