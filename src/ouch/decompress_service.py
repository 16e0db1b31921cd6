"""Decompress workflow orchestration."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .errors import InvalidInputError
from .file_format import ensure_valid_unicode, infer_format
from .models import DecompressResult
from .zip_gateway import extract_zip


def decompress(
    *,
    archive_arg: str,
    output_dir_arg: str | None = None,
    member_names: Sequence[str] = (),
) -> DecompressResult:
    archive_path = Path(ensure_valid_unicode(archive_arg))
    if archive_path.is_dir():
        raise InvalidInputError()
    infer_format(archive_path)

    if output_dir_arg is None:
        target_dir = Path.cwd()
    else:
        target_dir = Path(ensure_valid_unicode(output_dir_arg))
    for member_name in member_names:
        ensure_valid_unicode(member_name)

    file_count = extract_zip(
        zip_path=archive_path,
        target_dir=target_dir,
        member_names=member_names,
    )
    return DecompressResult(
        archive_path=archive_path,
        target_dir=target_dir,
        file_count=file_count,
    )
