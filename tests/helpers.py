# File: tests/helpers.py
# Purpose: Scene builders and fake host services shared by the tests

import os

from io_scene_x_java.core.host import StaticTessellator, TextureWriter
from io_scene_x_java.core.schema import PolygonMesh


class RecordingTextureWriter(TextureWriter):
    """Writes a small placeholder file and remembers every call"""

    def __init__(self, result=True):
        self.result = result
        self.calls = []

    def write(self, face, front, filepath):
        self.calls.append((face, front, filepath))
        if self.result:
            with open(filepath, "wb") as f:
                f.write(b"\xff\xd8\xff")
        return self.result


def triangle(uvs=None):
    """Unit triangle in the XY plane, normals +Z"""
    return PolygonMesh(
        points=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
        polygons=[(1, 2, 3)],
        normals=[(0.0, 0.0, 1.0)] * 3,
        uvs_front=list(uvs or []),
        uvs_back=list(uvs or []),
    )


def square():
    """Unit square split into two triangles, one smoothing edge (negative index)"""
    return PolygonMesh(
        points=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)],
        polygons=[(1, 2, -3), (1, -3, 4)],
        normals=[(0.0, 0.0, 1.0)] * 4,
    )


def read(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


def output_path(directory, name):
    return os.path.join(directory, name)


tessellator = StaticTessellator()
