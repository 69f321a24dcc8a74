# File: writers/audit_writer.py
# Purpose: <output>.log next to the exported file, one line per logged event
# Notes:
# - Filled through Logger when an export runs with write_audit on
# - Line format: [timestamp] [severity] [code] message | Object: name
# - Codes: EXP (export), MAT (material), TEX (texture), GEO (geometry)

import time
from dataclasses import dataclass, field
from typing import List, Optional

from ..utils.file_manager import FileManager

SEVERITIES = ("ERROR", "WARNING", "INFO")


def _now() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


@dataclass
class AuditEntry:
    severity: str
    message: str
    code: str = ""
    object_name: Optional[str] = None
    timestamp: str = field(default_factory=_now)

    def line(self) -> str:
        text = f"[{self.timestamp}] [{self.severity}]"
        if self.code:
            text += f" [{self.code}]"
        text += f" {self.message}"
        if self.object_name:
            text += f" | Object: {self.object_name}"
        return text


class AuditLogger:
    """
    Audit log of one export run.

    Usage:
        audit = AuditLogger("out/truck.log")
        audit.warning(ErrorCode.MAT001, "materials 'Wood#1' and 'Wood!1' both sanitize to 'Wood1'")
        audit.save()
    """

    def __init__(self, filepath: str):
        self.filepath = filepath
        self.entries: List[AuditEntry] = []

    def info(self, message: str, object_name: Optional[str] = None) -> None:
        self.entries.append(AuditEntry("INFO", message, "", object_name))

    def warning(self, code: str, message: str, object_name: Optional[str] = None) -> None:
        self.entries.append(AuditEntry("WARNING", message, code, object_name))

    def error(self, code: str, message: str, object_name: Optional[str] = None) -> None:
        self.entries.append(AuditEntry("ERROR", message, code, object_name))

    def count(self, severity: str) -> int:
        return sum(1 for e in self.entries if e.severity == severity)

    def with_code(self, code: str) -> List[AuditEntry]:
        return [e for e in self.entries if e.code == code]

    def has_errors(self) -> bool:
        return self.count("ERROR") > 0

    def has_warnings(self) -> bool:
        return self.count("WARNING") > 0

    def get_summary(self) -> str:
        return ", ".join(f"{self.count(s)} {s.lower()}" for s in SEVERITIES)

    def save(self) -> str:
        FileManager.ensure_directory(self.filepath)
        with open(self.filepath, "w", encoding="utf-8", newline="\n") as f:
            f.write("# Export Audit Log\n")
            f.write(f"# Generated: {_now()}\n")
            f.write(f"# Summary: {self.get_summary()}\n")
            f.write("#" + "=" * 70 + "\n\n")
            for entry in self.entries:
                f.write(entry.line() + "\n")
        return self.filepath


class ErrorCode:
    EXP000 = "EXP000"  # nothing to export
    EXP999 = "EXP999"  # export aborted by an exception
    MAT001 = "MAT001"  # two materials sanitize to the same label
    TEX002 = "TEX002"  # host could not write the texture file
    GEO001 = "GEO001"  # mesh without vertices skipped
