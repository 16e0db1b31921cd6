"""Zip read/write helpers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from .conversions import from_zip_error, is_encrypted_member_error
from .errors import InvalidArchiveError
from .models import InputFile

logger = logging.getLogger(__name__)

# What zipfile raises for unreadable or unwritable containers. Encrypted members
# raise a bare RuntimeError, which is told apart by is_encrypted_member_error.
_ZIP_FAILURES = (
    OSError,
    EOFError,
    KeyError,
    NotImplementedError,
    zlib.error,
    zipfile.BadZipFile,
    zipfile.LargeZipFile,
)


def write_zip(
    *,
    zip_path: Path,
    input_files: Sequence[InputFile],
    overwrite: bool = False,
    on_file_archived: Callable[[int, int], None] | None = None,
) -> None:
    """Write ``input_files`` to ``zip_path``; directory entries end with ``/``.

    Files older than 1980 are stored with the 1980-01-01 timestamp, the
    earliest one the zip format can hold.
    """
    mode = "w" if overwrite else "x"
    created = False
    try:
        with zipfile.ZipFile(
            zip_path,
            mode=mode,
            compression=zipfile.ZIP_DEFLATED,
            strict_timestamps=False,
        ) as zf:
            created = True
            total_entries = len(input_files)
            for archived_count, input_file in enumerate(input_files, start=1):
                zf.write(input_file.path_abs, arcname=input_file.entry_name)
                if on_file_archived is not None:
                    on_file_archived(archived_count, total_entries)
    except Exception as exc:
        if created:
            _remove_partial_output(zip_path)
        if isinstance(exc, _ZIP_FAILURES):
            raise from_zip_error(exc) from exc
        raise


def extract_zip(
    *,
    zip_path: Path,
    target_dir: Path,
    member_names: Sequence[str] = (),
) -> int:
    """Extract ``zip_path`` into ``target_dir`` and return the file count.

    With ``member_names`` only those entries are extracted; a name that is not
    in the archive fails the whole extraction before anything is written.
    ``target_dir`` is only created once the archive has been checked.
    """
    try:
        with zipfile.ZipFile(zip_path, mode="r") as zf:
            if member_names:
                members = [zf.getinfo(name) for name in member_names]
            else:
                members = zf.infolist()
            _validate_members_safe_for_extract(members)

            corrupt_member = zf.testzip()
            if corrupt_member is not None:
                raise InvalidArchiveError(f"Bad CRC-32 for file {corrupt_member!r}")

            target_dir.mkdir(parents=True, exist_ok=True)
            zf.extractall(target_dir, members=members)
    except _ZIP_FAILURES as exc:
        raise from_zip_error(exc) from exc
    except RuntimeError as exc:
        if not is_encrypted_member_error(exc):
            raise
        raise from_zip_error(exc) from exc

    file_count = sum(1 for member in members if not member.is_dir())
    logger.info("extracted %d files from %s", file_count, zip_path)
    return file_count


def _validate_members_safe_for_extract(members: list[zipfile.ZipInfo]) -> None:
    for member in members:
        entry_name = member.filename
        if entry_name.startswith("/") or entry_name.startswith("\\"):
            raise InvalidArchiveError(f"Unsafe zip entry path: {entry_name}")

        normalised = entry_name.replace("\\", "/")
        if ".." in PurePosixPath(normalised).parts:
            raise InvalidArchiveError(f"Unsafe zip entry path: {entry_name}")


def _remove_partial_output(zip_path: Path) -> None:
    try:
        zip_path.unlink(missing_ok=True)
    except OSError:
        logger.warning("could not remove partial archive %s", zip_path, exc_info=True)
