# File: export_processor.py
# Purpose: Runs one exporter for the operators
# Notes:
# - Binds an audit log (<output>.log) to the logger when requested
# - Failures are logged with their traceback (EXP999) and re-raised so the
#   operator can report them in the host UI
# - No host API here; the operator hands over the scene snapshot and services

import traceback
from typing import Optional

from .config.constants import EXT_AUDIT
from .core.host import Tessellator, TextureWriter
from .core.schema import SceneGraph
from .exporters.base_exporter import BaseExporter
from .utils.file_manager import FileManager
from .utils.logger import Logger
from .writers.audit_writer import AuditLogger, ErrorCode


class ExportProcessor:
    """
    Export processor

    Usage:
        processor = ExportProcessor(logger)
        path = processor.process(DirectXExporter(settings, logger), graph, filepath,
                                 tessellator, texture_writer)
    """

    def __init__(self, logger: Logger):
        self.logger = logger
        self.audit_logger: Optional[AuditLogger] = None

    def process(self, exporter: BaseExporter, graph: SceneGraph, output_path: str,
                tessellator: Tessellator, texture_writer: Optional[TextureWriter] = None) -> Optional[str]:
        """
        Run one export

        Returns:
            written file path, None when there was nothing to export
        """
        if getattr(exporter.settings, "write_audit", False):
            self.audit_logger = AuditLogger(FileManager.audit_log_path(output_path, EXT_AUDIT))
            self.logger.audit_logger = self.audit_logger

        try:
            self.logger.info(f"Export started: {type(exporter).__name__}", output_path)
            result = exporter.export(graph, output_path, tessellator, texture_writer)
            if result is None:
                self.logger.info("Export produced no file")
            return result
        except Exception as e:
            self.logger.error(f"Export failed: {e}", code=ErrorCode.EXP999)
            self.logger.error(traceback.format_exc())
            raise
        finally:
            if self.audit_logger:
                path = self.audit_logger.save()
                self.logger.audit_logger = None
                self.logger.info(f"Audit log: {self.audit_logger.get_summary()}", path)
