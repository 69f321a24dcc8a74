# File: core/mesh_extractor.py
# Purpose: Per-face tessellation, world transform, handedness conversion and
#          index bookkeeping into merged buffers
# Notes:
# - DirectX, normal mode: each point is stored twice (front copy at 2k,
#   back copy at 2k+1); front triangles are wound v3,v2,v1, back ones v1,v2,v3
# - DirectX, textured-only mode: one copy per point, triangles only for the
#   side(s) carrying a material
# - Polygon indices are 1-based and sign-encoded: abs(i) - 1 + start_index
# - Java: positions scaled by unit_scale, normals never scaled

from typing import Optional, Sequence, Tuple

from .coordinate_converter import CoordinateConverter, texture_coordinate
from .host import Tessellator
from .material_registry import JavaMaterialTable, MaterialRegistry
from .schema import FaceRecord, JavaFaceRecord, Material, MeshBuffer
from ..config.constants import (
    JAVA_FLOAT_FORMAT,
    JAVA_NULL,
    MESH_NORMALS,
    MESH_POINTS,
    MESH_UVQ_BACK,
    MESH_UVQ_FRONT,
)

DIRECTX_MESH_FLAGS = MESH_UVQ_FRONT | MESH_UVQ_BACK | MESH_NORMALS
JAVA_MESH_FLAGS = MESH_POINTS | MESH_UVQ_FRONT | MESH_NORMALS


def texture_size(material: Optional[Material], own_material: Optional[Material]) -> Tuple[float, float]:
    """
    UV divisor for one face side. Only materials inherited from a group or
    component carry UVs in texture pixels; the face's own material is already normalized.
    """
    if material is None or own_material is not None:
        return (1.0, 1.0)
    texture = material.texture
    if texture is None or not texture.has_size:
        return (1.0, 1.0)
    return (float(texture.width), float(texture.height))


def triangle_indices(polygon: Sequence[int], start_index: int) -> Tuple[int, int, int]:
    """0-based buffer indices of one host triangle"""
    if len(polygon) < 3:
        raise ValueError(f"polygon with {len(polygon)} indices is not a triangle")
    return tuple(abs(i) - 1 + start_index for i in polygon[:3])


class DirectXMeshExtractor:
    """
    Appends faces to a MeshBuffer.

    Usage:
        extractor = DirectXMeshExtractor(tessellator, registry, rotated=False)
        for record in records:
            extractor.extract(buffer, record)
    """

    def __init__(self, tessellator: Tessellator, registry: MaterialRegistry,
                 rotated: bool = False, textured_only: bool = False, unit_scale: float = 1.0):
        self.tessellator = tessellator
        self.registry = registry
        self.converter = CoordinateConverter(rotated)
        self.textured_only = textured_only
        self.unit_scale = unit_scale

    def extract(self, buffer: MeshBuffer, record: FaceRecord) -> None:
        face = record.face
        mesh = self.tessellator.mesh(face, DIRECTX_MESH_FLAGS).transformed(record.transform)
        front_mat = record.material
        back_mat = record.back_material

        for p in range(1, mesh.count_points + 1):
            pos = self.converter.convert_position(mesh.point_at(p), self.unit_scale)
            norm = mesh.normal_at(p)

            if not self.textured_only:
                size = texture_size(front_mat, face.material)
                buffer.vertices.append(pos)
                buffer.normals.append(self.converter.convert_normal(norm))
                buffer.texture_coords.append(texture_coordinate(mesh.uv_at(p, True), size))

                size = texture_size(back_mat, face.back_material)
                buffer.vertices.append(pos)
                buffer.normals.append(self.converter.convert_normal(norm, back=True))
                buffer.texture_coords.append(texture_coordinate(mesh.uv_at(p, False), size))
            else:
                front = front_mat is not None
                if front:
                    size = texture_size(front_mat, face.material)
                else:
                    size = texture_size(back_mat, face.back_material)
                buffer.vertices.append(pos)
                buffer.normals.append(self.converter.convert_normal(norm, back=not front))
                buffer.texture_coords.append(texture_coordinate(mesh.uv_at(p, front), size))

        for polygon in mesh.polygons:
            v1, v2, v3 = triangle_indices(polygon, buffer.start_index)

            if not self.textured_only:
                buffer.faces.append((v3 * 2, v2 * 2, v1 * 2))
                buffer.faces.append((v1 * 2 + 1, v2 * 2 + 1, v3 * 2 + 1))
            else:
                if front_mat is not None:
                    buffer.faces.append((v3, v2, v1))
                if back_mat is not None:
                    buffer.faces.append((v1, v2, v3))

            for front, material in ((True, front_mat), (False, back_mat)):
                if self.textured_only and material is None:
                    continue
                entry = self.registry.resolve(material, face, front)
                buffer.face_materials.append(buffer.materials.index_of(entry.label))

        buffer.start_index += mesh.count_points


# ==================== Java ====================

def point_string(p: Sequence[float], scale: float = 1.0, sep: str = "f,", sfx: str = "f") -> str:
    x = float(p[0]) * scale
    y = float(p[1]) * scale
    z = float(p[2]) * scale
    return (JAVA_FLOAT_FORMAT % x) + sep + (JAVA_FLOAT_FORMAT % y) + sep + (JAVA_FLOAT_FORMAT % z) + sfx


def uv_string(uv: Sequence[float], sep: str = "f,", sfx: str = "f") -> str:
    return (JAVA_FLOAT_FORMAT % float(uv[0])) + sep + (JAVA_FLOAT_FORMAT % float(uv[1])) + sfx


class JavaMeshExtractor:
    """Builds one JavaFaceRecord per face"""

    def __init__(self, tessellator: Tessellator, table: JavaMaterialTable, unit_scale: float):
        self.tessellator = tessellator
        self.table = table
        self.unit_scale = unit_scale

    def extract(self, record: FaceRecord) -> JavaFaceRecord:
        mesh = self.tessellator.mesh(record.face, JAVA_MESH_FLAGS).transformed(record.transform)
        color_id, texture_id = self.table.ids_for(record.material)
        result = JavaFaceRecord(color_id=color_id, texture_id=texture_id)

        for polygon in mesh.polygons:
            for i in polygon:
                result.points.append(point_string(mesh.point_at(i), self.unit_scale))
        for polygon in mesh.polygons:
            for i in polygon:
                result.normals.append(point_string(mesh.normal_at(i), 1))
        if texture_id != JAVA_NULL:
            result.texcoords = []
            for polygon in mesh.polygons:
                for i in polygon:
                    result.texcoords.append(uv_string(mesh.uv_at(i, True)))
        return result
