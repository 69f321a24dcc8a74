# File: writers/directx_writer.py
# Purpose: Write the DirectX .x text document
# Notes:
# - Layout: header (version tag, comment) -> Default_Material (always,
#   from the registry default) -> Material blocks -> [Frame { FrameTransformMatrix] -> Mesh blocks -> [}]
# - Lists use ',' between items and ';' after the last one, so struct
#   lists end in ';;'
# - Floats: 4 decimals for geometry, shortest repr for material colors
# - The document is built in memory and written in one go

from typing import Iterable, List, Optional, Sequence

from ..config.constants import (
    DEFAULT_MATERIAL_NAME,
    DIRECTX_COMMENT,
    DIRECTX_FLOAT_FORMAT,
    DIRECTX_MATERIAL_POWER,
    DIRECTX_VERSION_TAG,
    ROTATION_FRAME_ROWS,
)
from ..core.material_registry import MaterialEntry
from ..core.schema import MeshBuffer
from ..utils.file_manager import FileManager


def format_vec3(v: Sequence[float]) -> str:
    f = DIRECTX_FLOAT_FORMAT
    return f"{f % v[0]};{f % v[1]};{f % v[2]};"


def format_uv(uv: Sequence[float]) -> str:
    f = DIRECTX_FLOAT_FORMAT
    return f"{f % uv[0]};{f % uv[1]};"


def format_face(face: Sequence[int]) -> str:
    return "3;" + ",".join(str(i) for i in face) + ";"


def format_color_component(value: float) -> str:
    return repr(float(value))


def directx_header() -> str:
    return f"{DIRECTX_VERSION_TAG}\n{DIRECTX_COMMENT}\n"


def directx_material(entry: MaterialEntry, output_path: str) -> str:
    r, g, b = entry.rgb
    text = f"Material {entry.label}{{ \n"
    # faceColor
    text += f"{format_color_component(r)};{format_color_component(g)};{format_color_component(b)};"
    # alpha
    text += f"{format_color_component(entry.alpha)};;\n"
    # power
    text += f"{DIRECTX_MATERIAL_POWER};\n"
    # specularColor
    text += "0.000000;0.000000;0.000000;;\n"
    # emissiveColor
    text += "0.000000;0.000000;0.000000;;\n"
    if entry.texture_filename:
        reference = FileManager.texture_reference(output_path, entry.texture_filename)
        text += f'   TextureFilename {{ "{reference}";   }} \n'
    text += "} \n"
    return text


def directx_materials(entries: Iterable[MaterialEntry], output_path: str) -> str:
    return "".join(directx_material(entry, output_path) for entry in entries)


def directx_rotation() -> str:
    rows = [",".join("%.6f" % v for v in row) for row in ROTATION_FRAME_ROWS]
    return (
        "Frame {\n"
        " FrameTransformMatrix\n"
        "    {\n"
        + ",\n".join("        " + row for row in rows) + ";;\n"
        "    }\n"
    )


def _list(items: List[str], sep: str) -> str:
    return sep.join(items) + ";"


def directx_mesh(buffer: MeshBuffer) -> str:
    """Mesh block of one buffer; empty string for a buffer without vertices"""
    if buffer.is_empty:
        return ""
    faces = [format_face(f) for f in buffer.faces]

    text = f"Mesh {buffer.name}{{\n"
    text += f" {len(buffer.vertices)};\n"
    text += " " + _list([format_vec3(v) for v in buffer.vertices], ",\n ") + "\n"
    text += f" {len(faces)};\n"
    text += " " + _list(faces, ",\n ") + "\n"

    text += "  MeshMaterialList {\n"
    text += f"  {len(buffer.materials)};\n"
    text += f"  {len(buffer.face_materials)};\n"
    text += "  " + _list([str(i) for i in buffer.face_materials], ",\n  ") + "\n"
    text += "  " + "\n  ".join("{ " + label + " }" for label in buffer.materials.labels) + "\n"
    text += "  }\n"

    text += "  MeshTextureCoords {\n"
    text += f"  {len(buffer.texture_coords)};\n"
    text += "  " + _list([format_uv(uv) for uv in buffer.texture_coords], ",\n  ") + "\n"
    text += "  }\n"

    text += "  MeshNormals {\n"
    text += f"  {len(buffer.normals)};\n"
    text += "  " + _list([format_vec3(n) for n in buffer.normals], ",\n  ") + "\n"
    text += f"  {len(faces)};\n"
    text += "  " + _list(faces, ",\n  ") + "\n"
    text += "  }\n"
    text += " }\n"
    return text


class DirectXWriter:
    """
    DirectXWriter
    -------------
    Usage:
        writer = DirectXWriter("out/truck.x")
        writer.write(registry.emitted(), meshes, rotated=False)
    """

    def __init__(self, filepath: str):
        self.filepath = filepath

    def build(self, materials: Iterable[MaterialEntry], meshes: Iterable[MeshBuffer],
              rotated: bool = False, default: Optional[MaterialEntry] = None) -> str:
        if default is None:
            default = MaterialEntry(index=0, label=DEFAULT_MATERIAL_NAME)
        parts = [
            directx_header(),
            directx_material(default, self.filepath),
            directx_materials(materials, self.filepath),
        ]
        if rotated:
            parts.append(directx_rotation())
        for buffer in meshes:
            block = directx_mesh(buffer)
            if block:
                parts.append(block)
        if rotated:
            parts.append("}\n")
        return "".join(parts)

    def write(self, materials: Iterable[MaterialEntry], meshes: Iterable[MeshBuffer],
              rotated: bool = False, default: Optional[MaterialEntry] = None) -> str:
        text = self.build(materials, meshes, rotated, default)
        FileManager.ensure_directory(self.filepath)
        with open(self.filepath, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        return self.filepath
