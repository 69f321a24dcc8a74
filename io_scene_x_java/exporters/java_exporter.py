# File: exporters/java_exporter.py
# Purpose: Java/GL source pipeline
# Notes:
# - Exports the selection, or every top-level entity when nothing is selected
# - No face to export -> no file is opened
# - Every model material gets its constants up front, in model order

from typing import List, Union

from .base_exporter import BaseExporter
from ..config.constants import EXT_JAVA, UNTITLED_MODEL_NAME
from ..core.context import ExportContext
from ..core.material_registry import JavaMaterialTable
from ..core.mesh_extractor import JavaMeshExtractor
from ..core.scene_walker import flatten_java
from ..core.schema import FaceRecord, GroupMarker, JavaFaceRecord, NodeKind, SceneGraph
from ..core.transform import IDENTITY
from ..utils.file_manager import FileManager
from ..validators.path_validator import validate_output_path
from ..writers.audit_writer import ErrorCode
from ..writers.java_writer import JavaWriter


class JavaExporter(BaseExporter):
    """Java exporter"""

    def __init__(self, settings, logger=None):
        super().__init__(settings, logger)
        self._walk: List[Union[FaceRecord, GroupMarker]] = []   # filled by validate()

    @staticmethod
    def model_name(model_path: str) -> str:
        """'truck.blend' -> 'Truck' (class TruckModel)"""
        return FileManager.model_name(model_path, UNTITLED_MODEL_NAME).capitalize()

    @staticmethod
    def default_filename(model_path: str) -> str:
        return FileManager.model_name(model_path, UNTITLED_MODEL_NAME.lower()) + EXT_JAVA

    def validate(self, graph: SceneGraph, output_path: str) -> bool:
        self._walk = flatten_java(graph, graph.top_level(), IDENTITY)
        if not any(isinstance(entry, FaceRecord) for entry in self._walk):
            self.logger.warning("No faces selected or in the model, no file written", code=ErrorCode.EXP000)
            return False
        validate_output_path(output_path, EXT_JAVA)
        return True

    def build_data(self, graph: SceneGraph, ctx: ExportContext):
        table = JavaMaterialTable(self.logger, self.settings.alias_sanitized_names)
        for material in graph.materials:
            table.declare(material)

        extractor = JavaMeshExtractor(ctx.tessellator, table, self.settings.unit_scale)
        entries: List[Union[JavaFaceRecord, GroupMarker]] = []
        for entry in self._walk:
            if isinstance(entry, GroupMarker):
                if entry.kind is NodeKind.GROUP:
                    ctx.stats.groups += 1
                else:
                    ctx.stats.components += 1
                entries.append(entry)
            else:
                ctx.stats.faces += 1
                entries.append(extractor.extract(entry))

        self.logger.info(ctx.stats.summary())
        return self.model_name(graph.path), table, entries

    def write_files(self, data, ctx: ExportContext) -> List[str]:
        model_name, table, entries = data
        self.logger.info(f"Saving to : {ctx.output_path}")
        writer = JavaWriter(ctx.output_path)
        return [writer.write(model_name, table.constants, entries)]
