from __future__ import annotations

from pathlib import Path

import pytest

from ouch.errors import InvalidUnicodeError, MissingExtensionError, UnknownExtensionError
from ouch.file_format import ensure_valid_unicode, infer_format
from ouch.models import ArchiveFormat


@pytest.mark.parametrize("name", ["backup.zip", "BACKUP.ZIP", "dir/v1.2.zip"])
def test_infer_format_accepts_zip(name: str) -> None:
    assert infer_format(name) is ArchiveFormat.ZIP


def test_infer_format_without_extension_reports_the_path() -> None:
    with pytest.raises(MissingExtensionError) as exc_info:
        infer_format(Path("out") / "backup")

    assert exc_info.value.path == str(Path("out") / "backup")


def test_infer_format_with_unknown_extension_reports_the_suffix() -> None:
    with pytest.raises(UnknownExtensionError) as exc_info:
        infer_format("backup.tar")

    assert exc_info.value.extension == ".tar"


def test_ensure_valid_unicode_passes_text_through() -> None:
    assert ensure_valid_unicode("résumé.txt") == "résumé.txt"


def test_ensure_valid_unicode_rejects_undecodable_argument_bytes() -> None:
    with pytest.raises(InvalidUnicodeError):
        ensure_valid_unicode("broken\udcff.txt")
