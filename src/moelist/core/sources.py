"""
Build a raw file batch from local paths.

A directory given on the command line behaves like a folder dropped into
the upload area: each file inside becomes an entry whose path starts with
`/<directory name>/`. A plain file behaves like an individually selected
file, with its bare name as the path.
"""

import logging
from pathlib import Path
from typing import Iterable, List

from .errors import MoelistError
from .models import RawFileEntry

logger = logging.getLogger(__name__)


def _tree_entries(root: Path) -> List[RawFileEntry]:
    entries = []
    for p in sorted(root.rglob("*")):
        if not p.is_file():
            continue
        rel = p.relative_to(root).as_posix()
        entries.append(
            RawFileEntry(
                name=p.name,
                size=p.stat().st_size,
                path=f"/{root.name}/{rel}",
                source=p,
            )
        )
    return entries


def collect_entries(paths: Iterable[Path]) -> List[RawFileEntry]:
    """Turn files and directories into RawFileEntry objects, in argument order."""
    entries: List[RawFileEntry] = []
    for raw in paths:
        path = Path(raw).expanduser()
        if path.is_dir():
            # "." and ".." have no usable folder name
            root = path.resolve() if path.name in ("", "..") else path
            tree = _tree_entries(root)
            logger.debug("Collected %d files under %s", len(tree), root)
            entries.extend(tree)
        elif path.is_file():
            entries.append(
                RawFileEntry(name=path.name, size=path.stat().st_size, path=path.name, source=path)
            )
        else:
            raise MoelistError(f"Path not found: {path}")
    return entries
