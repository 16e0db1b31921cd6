"""Compress workflow orchestration."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
from pathlib import Path

from .errors import InvalidInputError
from .file_format import ensure_valid_unicode, infer_format
from .fs_gateway import collect_input_files
from .models import CompressResult
from .zip_gateway import write_zip

logger = logging.getLogger(__name__)


def compress(
    *,
    input_args: Sequence[str],
    output_arg: str,
    overwrite: bool = False,
    on_file_archived: Callable[[int, int], None] | None = None,
) -> CompressResult:
    output_path = Path(ensure_valid_unicode(output_arg))
    archive_format = infer_format(output_path)

    input_files = collect_input_files(input_args)
    if not input_files:
        logger.info("nothing to compress in %s", ", ".join(input_args))
        raise InvalidInputError()

    write_zip(
        zip_path=output_path,
        input_files=input_files,
        overwrite=overwrite,
        on_file_archived=on_file_archived,
    )
    empty_directory_count = sum(1 for input_file in input_files if input_file.is_directory)
    file_count = len(input_files) - empty_directory_count
    logger.info(
        "wrote %d files and %d empty directories to %s",
        file_count,
        empty_directory_count,
        output_path,
    )

    return CompressResult(
        archive_path=output_path,
        archive_format=archive_format,
        file_count=file_count,
        empty_directory_count=empty_directory_count,
    )
