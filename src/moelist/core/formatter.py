"""
Render ArchiveInfo lists as forum-ready text.

Three styles are available:
- preview: fixed-width columns, plain text
- code: the preview wrapped in BBCode quote + monospace font tags
- table: a BBCode table with Chinese column headers

Every style ends with totals for size, files and folders, and every style
returns an empty string for an empty list.
"""

from typing import Callable, Dict, List, Sequence

from .. import __version__
from .errors import MoelistError
from .models import ArchiveInfo
from .sizes import get_size_type

VERSION_MARKER = f"moelist v{__version__}"

_PREVIEW_HEADER = "        Size Type Summary                  Extensions   Name"
_PREVIEW_DIVIDER = (
    "------------ ---- ------------------------ ------------ ------------------------"
)

_CODE_START = "[quote][font=courier new, courier, monospace]"
_CODE_END = "[/font][/quote]"

_TABLE_START = (
    "[table=100%][tr]"
    "[td]档案[/td]"
    "[td][align=right]体积[/align][/td]"
    "[td][align=right]体积类型[/align][/td]"
    "[td][align=right]文件数[/align][/td]"
    "[td][align=right]文件夹数[/align][/td]"
    "[td]扩展名[/td][/tr]"
)


def _group(n: int) -> str:
    return f"{n:,}"


def _right(text: object) -> str:
    return f"[align=right]{text}[/align]"


class MoelistFormatter:
    """Builds the report text for a list of ArchiveInfo records."""

    @staticmethod
    def get_preview_style(infos: Sequence[ArchiveInfo]) -> str:
        if not infos:
            return ""

        total_size = 0
        total_files = 0
        total_folders = 0

        lines: List[str] = [_PREVIEW_HEADER, _PREVIEW_DIVIDER]
        for info in infos:
            summary = f"{info.file_count} files, {info.folder_count} folders"
            extensions = ", ".join(info.exts)
            lines.append(
                f"{_group(info.size):>12} {get_size_type(info.size):>4} "
                f"{summary:<24} {extensions:<12} {info.name}"
            )
            total_size += info.size
            total_files += info.file_count
            total_folders += info.folder_count

        lines.append(_PREVIEW_DIVIDER)
        lines.append(
            f"{_group(total_size):>12}      {total_files} files, {total_folders} folders"
        )
        return "\n".join(lines)

    @staticmethod
    def get_code_style(infos: Sequence[ArchiveInfo]) -> str:
        if not infos:
            return ""
        content = MoelistFormatter.get_preview_style(infos)
        return "\n".join([_CODE_START, VERSION_MARKER, content, _CODE_END])

    @staticmethod
    def get_table_style(infos: Sequence[ArchiveInfo]) -> str:
        if not infos:
            return ""

        total_size = 0
        total_files = 0
        total_folders = 0

        lines: List[str] = ["[quote]", VERSION_MARKER, _TABLE_START]
        for info in infos:
            lines.append(
                f"[tr][td]{info.name}[/td]"
                f"[td]{_right(_group(info.size))}[/td]"
                f"[td]{_right(get_size_type(info.size))}[/td]"
                f"[td]{_right(info.file_count)}[/td]"
                f"[td]{_right(info.folder_count)}[/td]"
                f"[td]{', '.join(info.exts)}[/td][/tr]"
            )
            total_size += info.size
            total_files += info.file_count
            total_folders += info.folder_count

        lines.append(
            "[tr][td]总计[/td]"
            f"[td]{_right(_group(total_size))}[/td]"
            "[td][/td]"
            f"[td]{_right(total_files)}[/td]"
            f"[td]{_right(total_folders)}[/td]"
            "[td][/td][/tr]"
            "[/table]"
        )
        lines.append("[/quote]")
        return "\n".join(lines)

    @classmethod
    def render(cls, infos: Sequence[ArchiveInfo], style: str) -> str:
        """Render with a style name: preview, code or table."""
        styles: Dict[str, Callable[[Sequence[ArchiveInfo]], str]] = {
            "preview": cls.get_preview_style,
            "code": cls.get_code_style,
            "table": cls.get_table_style,
        }
        try:
            renderer = styles[style]
        except KeyError:
            raise MoelistError(
                f"Unknown report style '{style}'. Choose from: {', '.join(styles)}"
            ) from None
        return renderer(infos)
