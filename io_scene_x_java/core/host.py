# -*- coding: utf-8 -*-
"""
Host services used by the export core

- Tessellator: face -> PolygonMesh (positions, UVs, normals on request)
- TextureWriter: writes the image bound to one side of a face to disk

The Blender implementations live in host/blender_scene.py.
"""

from abc import ABC, abstractmethod

from .schema import PolygonMesh, SceneNode


class Tessellator(ABC):
    """Host mesh tessellation"""

    @abstractmethod
    def mesh(self, face: SceneNode, flags: int) -> PolygonMesh:
        """
        Triangulate a face.

        Args:
            face: SceneNode of kind FACE
            flags: MESH_* bit set selecting the attributes to compute

        Returns:
            PolygonMesh in the face's local coordinates
        """
        pass


class TextureWriter(ABC):
    """Host texture serialization"""

    @abstractmethod
    def write(self, face: SceneNode, front: bool, filepath: str) -> bool:
        """
        Serialize the texture bound to one side of a face.

        Returns:
            bool - whether a file was written
        """
        pass


class StaticTessellator(Tessellator):
    """
    Tessellator for snapshots that already carry their geometry:
    face.source is a PolygonMesh.
    """

    def mesh(self, face: SceneNode, flags: int) -> PolygonMesh:
        if not isinstance(face.source, PolygonMesh):
            raise TypeError(f"face '{face.name}' carries no PolygonMesh")
        return face.source
