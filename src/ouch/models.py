"""Dataclasses shared across ouch layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ArchiveFormat(str, Enum):
    ZIP = "zip"


@dataclass(frozen=True)
class InputFile:
    """A regular file or empty directory to compress and its archive entry name.

    Directory entry names end with a slash.
    """

    path_abs: Path
    entry_name: str
    is_directory: bool = False


@dataclass(frozen=True)
class CompressResult:
    archive_path: Path
    archive_format: ArchiveFormat
    file_count: int
    empty_directory_count: int = 0


@dataclass(frozen=True)
class DecompressResult:
    archive_path: Path
    target_dir: Path
    file_count: int
