"""Command line entry: read a mesh, check its topology and print its DCEL."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from malha.mesh import Mesh, MeshFormatError


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="malha",
        description="Check a planar polygonal mesh and print its DCEL when valid.",
    )
    parser.add_argument(
        "path", nargs="?", default="-", help="mesh file to read (default: standard input)"
    )
    args = parser.parse_args(argv)

    mesh = Mesh()
    try:
        if args.path == "-":
            mesh.load(sys.stdin)
        else:
            with open(args.path, encoding="utf-8") as stream:
                mesh.load(stream)
    except (OSError, MeshFormatError) as exc:
        print(f"malha: {exc}", file=sys.stderr)
        return 1

    error = mesh.topology_error()
    if error is not None:
        print(error)
    else:
        print("\n".join(mesh.dcel_lines()))
    return 0


if __name__ == "__main__":
    sys.exit(main())