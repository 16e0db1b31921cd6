"""Filesystem traversal helpers for compress inputs."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Iterable

from .conversions import from_os_error, from_walk_error
from .errors import CompressingRootFolderError, InvalidInputError
from .file_format import ensure_valid_unicode
from .models import InputFile

logger = logging.getLogger(__name__)


def collect_input_files(input_args: Iterable[str]) -> list[InputFile]:
    input_files: list[InputFile] = []
    for input_arg in input_args:
        input_path = Path(ensure_valid_unicode(input_arg))
        if is_filesystem_root(input_path):
            raise CompressingRootFolderError()

        try:
            input_path_abs = input_path.resolve(strict=True)
            input_mode = input_path_abs.stat().st_mode
        except OSError as exc:
            raise from_os_error(exc) from exc

        if stat.S_ISREG(input_mode):
            input_files.append(
                InputFile(path_abs=input_path_abs, entry_name=input_path_abs.name)
            )
        elif stat.S_ISDIR(input_mode):
            input_files.extend(_walk_directory(input_path_abs))
        else:
            logger.info("rejecting input that is neither file nor directory: %s", input_path)
            raise InvalidInputError()

    _assert_no_duplicate_entries([input_file.entry_name for input_file in input_files])
    return input_files


def is_filesystem_root(path: Path) -> bool:
    path_abs = path.resolve()
    return path_abs == Path(path_abs.anchor)


def _walk_directory(directory_abs: Path) -> list[InputFile]:
    base_abs = directory_abs.parent
    collected: list[InputFile] = []

    for current_dir, dir_names, file_names in os.walk(
        directory_abs, onerror=_raise_walk_error
    ):
        current_dir_abs = Path(current_dir)
        dir_names[:] = sorted(
            name for name in dir_names if not _skip_symlink(current_dir_abs / name)
        )

        has_entries = bool(dir_names)
        for file_name in sorted(file_names):
            file_abs = current_dir_abs / file_name
            if _skip_symlink(file_abs):
                continue
            collected.append(
                InputFile(
                    path_abs=file_abs,
                    entry_name=file_abs.relative_to(base_abs).as_posix(),
                )
            )
            has_entries = True

        if not has_entries:
            collected.append(
                InputFile(
                    path_abs=current_dir_abs,
                    entry_name=f"{current_dir_abs.relative_to(base_abs).as_posix()}/",
                    is_directory=True,
                )
            )

    logger.debug("collected %d entries under %s", len(collected), directory_abs)
    return collected


def _skip_symlink(path: Path) -> bool:
    if path.is_symlink():
        logger.info("skipping symlink: %s", path)
        return True
    return False


def _raise_walk_error(exc: OSError) -> None:
    raise from_walk_error(exc) from exc


def _assert_no_duplicate_entries(entry_names: list[str]) -> None:
    seen: set[str] = set()
    duplicates: set[str] = set()
    for entry_name in entry_names:
        if entry_name in seen:
            duplicates.add(entry_name)
        seen.add(entry_name)

    if duplicates:
        logger.info("duplicate archive entries: %s", ", ".join(sorted(duplicates)))
        raise InvalidInputError()
