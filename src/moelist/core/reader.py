"""
Archive inspection.

`ArchiveInfoReader` turns one `Archive` into an `ArchiveInfo`. Zip and rar
containers are read into memory and handed to `zipfile` / `rarfile`; folder
archives are summarised from the member paths alone. Decoding happens in a
worker thread so several archives can be inspected concurrently with
`read_archive_infos`.
"""

import asyncio
import io
import logging
import zipfile
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Set

import rarfile

from .errors import ArchiveReadError
from .models import Archive, ArchiveInfo, RawFileEntry
from .paths import get_extension, is_directory_path, split_path

logger = logging.getLogger(__name__)


async def read_entry_bytes(entry: RawFileEntry) -> bytes:
    """Read the whole file behind an entry."""
    if entry.source is None:
        raise ArchiveReadError(entry.name, "no local file to read from")
    try:
        return await asyncio.to_thread(entry.source.read_bytes)
    except OSError as e:
        raise ArchiveReadError(entry.name, f"could not read file: {e}") from e


class RarBackend:
    """Shared rarfile parsing setup, created once on the first rar read.

    Headers are parsed in strict mode: a truncated or damaged header is an
    error rather than the end of the listing.
    """

    errors = "strict"

    def __init__(self) -> None:
        logger.debug("rar backend initialized (rarfile %s)", rarfile.__version__)

    def list_headers(self, data: bytes) -> List[rarfile.RarInfo]:
        with rarfile.RarFile(io.BytesIO(data), errors=self.errors) as rf:
            headers = rf.infolist()
            if not headers and rf.needs_password():
                raise rarfile.PasswordRequired("archive headers are encrypted")
            return headers


_rar_backend: Optional[RarBackend] = None


def get_rar_backend() -> RarBackend:
    global _rar_backend
    if _rar_backend is None:
        _rar_backend = RarBackend()
    return _rar_backend


def reset_rar_backend() -> None:
    global _rar_backend
    _rar_backend = None


def _zip_paths(data: bytes) -> List[str]:
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        # namelist() can repeat a name; the index is keyed by path
        return list(dict.fromkeys(zf.namelist()))


def _add_extension(exts: Dict[str, None], path: str) -> None:
    ext = get_extension(path)
    if ext:
        exts[ext] = None


class ArchiveInfoReader:
    """Reads summary metadata out of a single archive."""

    def __init__(self, archive: Archive) -> None:
        self._archive = archive

    @classmethod
    async def open(cls, archive: Archive) -> ArchiveInfo:
        return await cls(archive).read_archive_info()

    async def read_archive_info(self) -> ArchiveInfo:
        if self._archive.type == "zip":
            return await self.read_zipfile()
        elif self._archive.type == "rar":
            return await self.read_rarfile()
        else:
            return await self.read_folder()

    def _container(self) -> RawFileEntry:
        if not self._archive.files:
            raise ArchiveReadError(self._archive.name, "archive has no container file")
        return self._archive.files[0]

    def _info(self, exts: Dict[str, None], file_count: int, folder_count: int) -> ArchiveInfo:
        return ArchiveInfo(
            name=self._archive.name,
            size=self._archive.size,
            exts=tuple(exts),
            file_count=file_count,
            folder_count=folder_count,
        )

    async def read_zipfile(self) -> ArchiveInfo:
        """Count the entries of a zip's central directory.

        Every entry ending in `/` is one folder; zip lists directories
        explicitly, so no de-duplication is needed.
        """
        data = await read_entry_bytes(self._container())
        try:
            paths = await asyncio.to_thread(_zip_paths, data)
        except (zipfile.BadZipFile, EOFError, ValueError) as e:
            raise ArchiveReadError(self._archive.name, f"invalid zip archive: {e}") from e

        file_count = 0
        folder_count = 0
        exts: Dict[str, None] = {}
        for path in paths:
            if is_directory_path(path):
                folder_count += 1
            else:
                file_count += 1
                _add_extension(exts, path)

        return self._info(exts, file_count, folder_count)

    async def read_rarfile(self) -> ArchiveInfo:
        data = await read_entry_bytes(self._container())
        backend = get_rar_backend()
        try:
            headers = await asyncio.to_thread(backend.list_headers, data)
        except rarfile.Error as e:
            raise ArchiveReadError(self._archive.name, f"invalid rar archive: {e}") from e

        file_count = 0
        folder_count = 0
        exts: Dict[str, None] = {}
        for header in headers:
            if header.is_dir():
                folder_count += 1
            else:
                file_count += 1
                _add_extension(exts, header.filename)

        return self._info(exts, file_count, folder_count)

    async def read_folder(self) -> ArchiveInfo:
        """Summarise a dropped folder from its member paths.

        Paths look like `/root/sub/deeper/file.ext`: segment 0 is empty and
        segment 1 is the archive itself, so sub-folders live at depth 2 up to
        the segment before the file name. A folder is counted once per
        (depth, name) pair.
        """
        exts: Dict[str, None] = {}
        folder_tree: Dict[int, Set[str]] = defaultdict(set)
        for entry in self._archive.files:
            segments = split_path(entry.path or "")
            if len(segments) > 3:
                for depth in range(2, len(segments) - 1):
                    folder_tree[depth].add(segments[depth])
            _add_extension(exts, entry.name)

        folder_count = sum(len(names) for names in folder_tree.values())
        return self._info(exts, len(self._archive.files), folder_count)


async def read_archive_infos(
    archives: Sequence[Archive],
    *,
    concurrency: int = 4,
    skip_errors: bool = False,
) -> List[ArchiveInfo]:
    """Inspect many archives concurrently, keeping input order.

    Each archive is read independently. With `skip_errors`, archives that
    fail with `ArchiveReadError` are logged and left out of the result;
    otherwise the first such error is raised once every read has finished.
    """
    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def _read(archive: Archive) -> ArchiveInfo:
        async with semaphore:
            logger.debug("Reading %s archive %s", archive.type, archive.name)
            return await ArchiveInfoReader.open(archive)

    results = await asyncio.gather(*(_read(a) for a in archives), return_exceptions=True)

    infos: List[ArchiveInfo] = []
    for archive, result in zip(archives, results):
        if isinstance(result, ArchiveReadError):
            if not skip_errors:
                raise result
            logger.warning("Skipping %s", result, extra={"archive": archive.name})
            continue
        if isinstance(result, BaseException):
            raise result
        infos.append(result)
    return infos
