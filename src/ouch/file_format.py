"""Archive format inference and argument text checks."""

from __future__ import annotations

import os
from pathlib import Path

from .constants import ZIP_SUFFIX
from .errors import InvalidUnicodeError, MissingExtensionError, UnknownExtensionError
from .models import ArchiveFormat

_FORMATS_BY_SUFFIX = {
    ZIP_SUFFIX: ArchiveFormat.ZIP,
}


def infer_format(path: str | os.PathLike[str]) -> ArchiveFormat:
    suffix = Path(path).suffix
    if not suffix:
        raise MissingExtensionError(path)

    archive_format = _FORMATS_BY_SUFFIX.get(suffix.lower())
    if archive_format is None:
        raise UnknownExtensionError(suffix)
    return archive_format


def ensure_valid_unicode(argument: str) -> str:
    """Reject arguments that carried undecodable bytes on the command line."""
    try:
        argument.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidUnicodeError() from exc
    return argument
