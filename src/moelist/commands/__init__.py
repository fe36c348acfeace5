"""Command modules for the moelist CLI.

Mounted by moelist.cli.
"""

from . import config as config  # noqa: F401
from . import report as report  # noqa: F401

__all__ = [
    "config",
    "report",
]
