# malha

`malha` reads a planar polygonal mesh with integer coordinates, builds its
doubly connected edge list (DCEL) and checks whether the mesh has a valid
topology.

## Installation

```
pip install .
```

## Input format

The first line holds two integers, the number of vertices `n` and the number
of faces `f`. The next `n` vertices are given as integer coordinates `x y`,
numbered from 1 in the order given. Then come `f` lines, each listing the
vertex indices of one face, separated by spaces.

```
4 2
0 0
1 0
1 1
0 1
1 2 3
1 3 4
```

A vertex whose coordinates repeat an earlier one is not added again. Missing
or non-integer values, negative counts, and face entries that refer to an
unknown vertex raise `MeshFormatError`.

## Command line

```
malha mesh.txt
malha < mesh.txt
```

The mesh is read from the file given, or from standard input when no file (or
`-`) is given. The program then prints one of:

- `aberta`: some edge bounds only one face (the mesh is open);
- `não subdivisão planar`: a vertex is shared by more faces than a planar
  subdivision allows;
- `superposta`: edges of the mesh cross, or an edge lies inside another face.

When none of these holds, it prints the DCEL:

- a line with the number of vertices, edges and faces;
- one line per vertex: `x y` and the index of a half-edge leaving it;
- one line per face: the index of a half-edge on its boundary;
- one line per half-edge: origin, twin, left face, next and previous.

All indices in the output start at 1. If the input cannot be read, a message
starting with `malha:` goes to standard error and the exit status is 1.

## Library use

```python
from malha.mesh import Mesh

with open("mesh.txt") as stream:
    mesh = Mesh.from_text(stream.read())

error = mesh.topology_error()
if error is None:
    print("\n".join(mesh.dcel_lines()))
else:
    print(error)
```

- `Mesh.load(stream)` reads a mesh from any iterable of text lines;
  `Mesh.from_text(text)` builds one from a string.
- `Mesh.is_open()`, `Mesh.is_not_planar_subdivision()` and
  `Mesh.is_overlapped()` run each check separately; `Mesh.topology_error()`
  returns the message of the first check that fails, or `None`;
  `Mesh.is_topology_valid()` is `True` when all pass.
- `Mesh.dcel_lines()` returns the DCEL output as a list of strings.
- `Mesh.vertices`, `Mesh.faces` and `Mesh.half_edges` hold the records from
  `malha.dcel`: `Vertex`, `Face` and `HalfEdge` (with `origin`, `twin`,
  `next`, `prev`, `left_face` and the `destination` property).

The sweep-line search lives in `malha.sweepline`:
`SweepLine().find_intersection(half_edges)` returns `True` as soon as two
edges are found to overlap. The module also provides the predicates
`orientation`, `on_segment`, `is_inside_another_face` and `intersects`.

## Limits

The package only checks and prints meshes. It does not draw them, write them
to any file format, or repair an invalid mesh.