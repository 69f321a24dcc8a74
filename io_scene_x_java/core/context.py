# File: core/context.py
# Purpose: State owned by one export invocation
# Notes:
# - Created at the start of an export, dropped at its end
# - Replaces module-level accumulators; walker and extractor receive it explicitly

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .host import Tessellator, TextureWriter
from .material_registry import MaterialRegistry
from .schema import ExportStats, MeshBuffer


@dataclass
class ExportContext:
    output_path: str
    settings: Any
    tessellator: Tessellator
    texture_writer: Optional[TextureWriter] = None
    logger: Any = None
    registry: Optional[MaterialRegistry] = None
    stats: ExportStats = field(default_factory=ExportStats)
    meshes: List[MeshBuffer] = field(default_factory=list)

    def __post_init__(self):
        if self.registry is None:
            self.registry = MaterialRegistry(
                output_path=self.output_path,
                texture_writer=self.texture_writer,
                logger=self.logger,
                alias_sanitized_names=getattr(self.settings, "alias_sanitized_names", True),
            )
