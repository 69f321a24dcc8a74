# File: utils/logger.py
# Purpose: Unified logging for both exporters: console output plus optional audit log
# Notes:
# - Logger: info / warning / error
# - Console output ends up in the host's system console / info panel
# - Optionally mirrored into an AuditLogger (<output>.log)

import sys
import time
from typing import Optional, TYPE_CHECKING

# avoid the circular import at runtime
if TYPE_CHECKING:
    from ..writers.audit_writer import AuditLogger


class Logger:
    """
    Logger
    ------
    Levels: INFO / WARNING / ERROR
    - INFO / WARNING go to stdout, ERROR to stderr
    - bind an AuditLogger to keep the messages in the export's audit log
    """

    def __init__(self, audit_logger: Optional["AuditLogger"] = None, verbose: bool = True):
        self.audit_logger = audit_logger
        self.verbose = verbose

    def _log(self, level: str, message: str, context: Optional[str] = None, code: str = "") -> None:
        ts = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        line = f"[{ts}] [{level}]"
        if code:
            line += f" [{code}]"
        line += f" {message}"
        if context:
            line += f" | Context: {context}"

        if self.verbose or level == "ERROR":
            if level == "ERROR":
                print(line, file=sys.stderr)
            else:
                print(line, file=sys.stdout)

        if self.audit_logger:
            if level == "INFO":
                self.audit_logger.info(message, context)
            elif level == "WARNING":
                self.audit_logger.warning(code, message, context)
            elif level == "ERROR":
                self.audit_logger.error(code, message, context)

    def info(self, message: str, context: Optional[str] = None) -> None:
        self._log("INFO", message, context)

    def warning(self, message: str, context: Optional[str] = None, code: str = "") -> None:
        self._log("WARNING", message, context, code)

    def error(self, message: str, context: Optional[str] = None, code: str = "") -> None:
        self._log("ERROR", message, context, code)
