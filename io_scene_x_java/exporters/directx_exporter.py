# File: exporters/directx_exporter.py
# Purpose: DirectX .x pipeline (all faces / textured faces only / rotated for Blender)
# Notes:
# - One Mesh per visible top-level group or component instance; visible loose
#   faces are merged into a last mesh
# - Mesh names: sanitized entity name, component definition name, or mesh_N
#   where N counts the non-empty meshes produced so far
# - Materials are registered across the whole export and written once, before the meshes

from typing import List, Optional, Sequence

from .base_exporter import BaseExporter
from ..config.constants import (
    EXT_DIRECTX,
    GENERATED_MESH_PREFIX,
    PROGRESS_INTERVAL,
    TEXTURED_ONLY_SUFFIX,
    UNTITLED_MODEL_NAME,
)
from ..core.context import ExportContext
from ..core.material_registry import sanitize_identifier
from ..core.mesh_extractor import DirectXMeshExtractor
from ..core.scene_walker import flatten_directx
from ..core.schema import Material, MeshBuffer, NodeKind, SceneGraph
from ..core.transform import IDENTITY, Matrix4
from ..utils.file_manager import FileManager
from ..validators.path_validator import validate_output_path
from ..writers.audit_writer import ErrorCode
from ..writers.directx_writer import DirectXWriter


class DirectXExporter(BaseExporter):
    """
    DirectX exporter

    Usage:
        settings = DirectXExportSettings(textured_only=False, rotated=True)
        DirectXExporter(settings).export(graph, "out/truck.x", tessellator, texture_writer)
    """

    @staticmethod
    def default_filename(model_path: str, textured_only: bool = False) -> str:
        """'truck.blend' -> 'truck.x' ('truck-T.x' for textured faces only)"""
        name = FileManager.model_name(model_path, UNTITLED_MODEL_NAME)
        if textured_only:
            name += TEXTURED_ONLY_SUFFIX
        return name + EXT_DIRECTX

    def validate(self, graph: SceneGraph, output_path: str) -> bool:
        validate_output_path(output_path, EXT_DIRECTX)
        return True

    def build_data(self, graph: SceneGraph, ctx: ExportContext) -> List[MeshBuffer]:
        extractor = DirectXMeshExtractor(
            ctx.tessellator,
            ctx.registry,
            rotated=self.settings.rotated,
            textured_only=self.settings.textured_only,
            unit_scale=self.settings.unit_scale,
        )
        loose_faces = []

        for handle in graph.roots:
            node = graph.node(handle)
            if not node.visible:
                continue
            generated = f"{GENERATED_MESH_PREFIX}{len(ctx.meshes)}"

            if node.kind is NodeKind.COMPONENT_INSTANCE:
                ctx.stats.components += 1
                name = node.name or node.definition_name
                self._export_entity(ctx, extractor, graph, node.children, name, generated,
                                    node.transform, node.material)
            elif node.kind is NodeKind.GROUP:
                ctx.stats.groups += 1
                self.logger.info(f"group: {node.name or generated}")
                self._export_entity(ctx, extractor, graph, node.children, node.name, generated,
                                    node.transform, node.material)
            else:
                loose_faces.append(handle)

        if loose_faces:
            generated = f"{GENERATED_MESH_PREFIX}{len(ctx.meshes)}"
            self._export_entity(ctx, extractor, graph, loose_faces, "", generated, IDENTITY, None)

        self.logger.info(ctx.stats.summary())
        self.logger.info(f"{len(ctx.meshes)} mesh(es), {len(ctx.registry.emitted())} material(s)")
        return ctx.meshes

    def _export_entity(self, ctx: ExportContext, extractor: DirectXMeshExtractor, graph: SceneGraph,
                       handles: Sequence[int], name: str, generated: str,
                       transform: Matrix4, material: Optional[Material]) -> Optional[MeshBuffer]:
        records = flatten_directx(graph, handles, transform, material,
                                  textured_only=self.settings.textured_only, stats=ctx.stats)
        buffer = MeshBuffer(name=sanitize_identifier(name) or generated)

        for progress, record in enumerate(records, 1):
            extractor.extract(buffer, record)
            if progress % PROGRESS_INTERVAL == 0:
                self.logger.info(f"{progress} / {len(records)} faces..", buffer.name)

        if buffer.is_empty:
            self.logger.warning(f"mesh '{buffer.name}' has no vertices, skipped", code=ErrorCode.GEO001)
            return None
        ctx.meshes.append(buffer)
        return buffer

    def write_files(self, data: List[MeshBuffer], ctx: ExportContext) -> List[str]:
        self.logger.info(f"Saving to : {ctx.output_path}")
        writer = DirectXWriter(ctx.output_path)
        path = writer.write(ctx.registry.emitted(), data, rotated=self.settings.rotated,
                            default=ctx.registry.default)
        return [path]
