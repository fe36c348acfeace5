"""
Pure helpers over forward-slash path strings.

Paths here are the strings a file batch carries, not filesystem paths: a
file dropped as part of a directory tree looks like `/album/disc1/01.flac`,
a loose file is just its name, and archive members look like `docs/a.txt`
(directories end with `/`).
"""

from typing import Literal, Optional

ArchiveType = Literal["zip", "rar", "folder"]

SEPARATOR = "/"


def split_path(path: str) -> list[str]:
    return path.split(SEPARATOR)


def is_directory_path(path: str) -> bool:
    return path.endswith(SEPARATOR)


def get_extension(path: str) -> Optional[str]:
    """Return the text after the last `.` of the final path segment.

    `None` when the segment has no dot. A trailing dot yields an empty string;
    callers treat that the same as no extension.
    """
    base = path.rsplit(SEPARATOR, 1)[-1]
    if "." not in base:
        return None
    return base.rsplit(".", 1)[-1]


def top_level_folder(path: Optional[str]) -> Optional[str]:
    """Name of the dropped folder a path belongs to, if it came from a tree."""
    if not path or not path.startswith(SEPARATOR):
        return None
    return split_path(path)[1]


def archive_type_for(name: str) -> Optional[ArchiveType]:
    if name.endswith(".zip"):
        return "zip"
    if name.endswith(".rar"):
        return "rar"
    return None
