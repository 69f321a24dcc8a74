# -*- coding: utf-8 -*-
"""
Base exporter (abstract)
Defines the export flow as a template method
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..core.context import ExportContext
from ..core.host import Tessellator, TextureWriter
from ..core.schema import SceneGraph
from ..utils.logger import Logger


class BaseExporter(ABC):
    """
    Base exporter
    validate -> build_data -> write_files -> post_process

    Host failures raised while building (tessellation, texture writing) are not
    caught here; they abort the export.
    """

    def __init__(self, settings, logger: Optional[Logger] = None):
        """
        Args:
            settings: DirectXExportSettings / JavaExportSettings
            logger: Logger
        """
        self.settings = settings
        self.logger = logger if logger is not None else Logger(verbose=getattr(settings, "verbose", True))

    def export(self, graph: SceneGraph, output_path: str, tessellator: Tessellator,
               texture_writer: Optional[TextureWriter] = None) -> Optional[str]:
        """
        Export flow template method

        Args:
            graph: scene snapshot
            output_path: chosen output file
            tessellator: host mesh service
            texture_writer: host texture service (optional)

        Returns:
            str - written file path, None when nothing was exported
        """
        # 1. validate
        if not self.validate(graph, output_path):
            return None

        ctx = ExportContext(
            output_path=output_path,
            settings=self.settings,
            tessellator=tessellator,
            texture_writer=texture_writer,
            logger=self.logger,
        )

        # 2. build data
        data = self.build_data(graph, ctx)

        # 3. write files
        files = self.write_files(data, ctx)

        # 4. post process
        self.post_process(files, ctx)

        return files[0] if files else None

    @abstractmethod
    def validate(self, graph: SceneGraph, output_path: str) -> bool:
        """Whether the export should run at all"""
        pass

    @abstractmethod
    def build_data(self, graph: SceneGraph, ctx: ExportContext):
        """Walk the scene and fill the buffers (subclass)"""
        pass

    @abstractmethod
    def write_files(self, data, ctx: ExportContext) -> List[str]:
        """Write the output; returns the written paths (subclass)"""
        pass

    def post_process(self, files: List[str], ctx: ExportContext) -> None:
        self.logger.info(f"Export finished, {len(files)} file(s) written")
