"""
Partition a flat file batch into archives.

Zip and rar files each become their own archive. Everything else is grouped
by the top-level folder it was dropped with; loose files that are neither
archives nor part of a folder tree are skipped.
"""

import logging
from typing import Dict, Iterable, List

from .models import Archive, RawFileEntry
from .paths import archive_type_for, top_level_folder

logger = logging.getLogger(__name__)


def group_entries(entries: Iterable[RawFileEntry]) -> List[Archive]:
    """Group raw entries into Archive descriptors.

    Container archives come first in input order, followed by one folder
    archive per distinct top-level folder in first-seen order.
    """
    archives: List[Archive] = []
    others: List[RawFileEntry] = []
    seen = 0
    for entry in entries:
        seen += 1
        kind = archive_type_for(entry.name)
        if kind is not None:
            archives.append(
                Archive(name=entry.name, size=entry.size, type=kind, files=(entry,))
            )
        else:
            others.append(entry)

    folders: Dict[str, List[RawFileEntry]] = {}
    for entry in others:
        folder = top_level_folder(entry.path)
        if folder is None:
            logger.debug("Skipping loose file %s (no folder to group under)", entry.name)
            continue
        folders.setdefault(folder, []).append(entry)

    for name, members in folders.items():
        total_size = sum(member.size for member in members)
        archives.append(
            Archive(name=name, size=total_size, type="folder", files=tuple(members))
        )

    logger.debug("Grouped %d entries into %d archives", seen, len(archives))
    return archives
