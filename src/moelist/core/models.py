"""
Data records passed between the pipeline stages.

RawFileEntry -> Archive (grouping) -> ArchiveInfo (extraction) -> report text.
All records are frozen; nothing is mutated after construction.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .paths import ArchiveType


@dataclass(frozen=True)
class RawFileEntry:
    """A single file from the input batch."""

    name: str
    size: int
    path: Optional[str] = None
    source: Optional[Path] = field(default=None, compare=False)


@dataclass(frozen=True)
class Archive:
    """A classified unit to report on: one zip, one rar, or one dropped folder."""

    name: str
    size: int
    type: ArchiveType
    files: Tuple[RawFileEntry, ...] = ()


@dataclass(frozen=True)
class ArchiveInfo:
    """Summary metadata extracted from one Archive."""

    name: str
    size: int
    exts: Tuple[str, ...] = ()
    file_count: int = 0
    folder_count: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "size": self.size,
            "exts": list(self.exts),
            "fileCount": self.file_count,
            "folderCount": self.folder_count,
        }
