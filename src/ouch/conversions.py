"""Mapping of foreign failures onto ouch errors.

One function per foreign domain. Callers pick the function that matches the
collaborator they were talking to; nothing here guesses the domain.
"""

from __future__ import annotations

import argparse
import logging
import zipfile
import zlib

from .errors import (
    AlreadyExistsError,
    ArgumentParsingError,
    DirectoryTraversalError,
    InvalidArchiveError,
    IoFailureError,
    MissingFileError,
    OuchError,
    PermissionDeniedError,
    UnsupportedArchiveError,
)

logger = logging.getLogger(__name__)

# Errors raised by zipfile for truncated or garbled member data.
_CORRUPT_DATA_ERRORS = (EOFError, zlib.error)
# zipfile raises a bare RuntimeError for encrypted members opened without a password.
_ENCRYPTED_MEMBER_MARKER = "password required"


def from_os_error(exc: OSError) -> OuchError:
    if isinstance(exc, FileNotFoundError):
        converted: OuchError = MissingFileError(_filename_of(exc))
    elif isinstance(exc, PermissionError):
        converted = PermissionDeniedError()
    elif isinstance(exc, FileExistsError):
        converted = AlreadyExistsError()
    else:
        converted = IoFailureError(str(exc))

    _log_conversion("os", exc, converted)
    return converted


def from_zip_error(exc: BaseException) -> OuchError:
    """Map a failure raised while opening or reading a zip container."""
    if isinstance(exc, OSError):
        return from_os_error(exc)

    if isinstance(exc, zipfile.BadZipFile):
        converted: OuchError = InvalidArchiveError(str(exc))
    elif isinstance(exc, _CORRUPT_DATA_ERRORS):
        converted = InvalidArchiveError(str(exc))
    elif isinstance(exc, KeyError):
        # The member name is not carried across this boundary.
        converted = MissingFileError("")
    elif isinstance(exc, (zipfile.LargeZipFile, NotImplementedError)):
        converted = UnsupportedArchiveError(str(exc))
    elif is_encrypted_member_error(exc):
        converted = UnsupportedArchiveError(str(exc))
    else:
        raise TypeError(f"Not a zip container failure: {exc!r}") from exc

    _log_conversion("zip", exc, converted)
    return converted


def is_encrypted_member_error(exc: BaseException) -> bool:
    return type(exc) is RuntimeError and _ENCRYPTED_MEMBER_MARKER in str(exc)


def from_walk_error(exc: OSError) -> OuchError:
    converted = DirectoryTraversalError(str(exc))
    _log_conversion("walk", exc, converted)
    return converted


def from_argument_error(exc: argparse.ArgumentError) -> OuchError:
    converted = ArgumentParsingError(exc)
    _log_conversion("argparse", exc, converted)
    return converted


def _filename_of(exc: OSError) -> str:
    if exc.filename is None:
        return ""
    if isinstance(exc.filename, bytes):
        return exc.filename.decode("utf-8", errors="surrogateescape")
    return str(exc.filename)


def _log_conversion(domain: str, exc: BaseException, converted: OuchError) -> None:
    logger.debug(
        "converted %s failure %s to %s",
        domain,
        type(exc).__name__,
        type(converted).__name__,
    )
