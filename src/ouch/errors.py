"""Typed exceptions for ouch.

Every failure surfaced to the user is exactly one of the concrete classes
below. Foreign failures are mapped onto them by ``conversions``; the rest are
raised directly by the code that detects them.
"""

from __future__ import annotations

import argparse
import os


class OuchError(Exception):
    """Base exception for ouch failures."""


class UnknownExtensionError(OuchError):
    """Raised when the output extension matches no supported format."""

    def __init__(self, extension: str) -> None:
        super().__init__(extension)
        self.extension = extension


class MissingExtensionError(OuchError):
    """Raised when the output path has no extension to infer a format from."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        super().__init__(self.path)


class InvalidUnicodeError(OuchError):
    """Raised when a path or argument is not valid unicode."""


class InvalidInputError(OuchError):
    """Raised for malformed input that fits no narrower class."""


class IoFailureError(OuchError):
    """Raised for I/O failures that are not otherwise classified."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class MissingFileError(OuchError):
    """Raised when a referenced file does not exist.

    ``path`` is empty when the name of the missing file is not known, e.g. a
    member lookup inside an archive.
    """

    def __init__(self, path: str | os.PathLike[str] = "") -> None:
        self.path = os.fspath(path)
        super().__init__(self.path)


class AlreadyExistsError(OuchError):
    """Raised when the output target exists and overwriting is not allowed."""


class InvalidArchiveError(OuchError):
    """Raised when an archive container is structurally corrupt."""

    def __init__(self, diagnostic: str) -> None:
        super().__init__(diagnostic)
        self.diagnostic = diagnostic


class PermissionDeniedError(OuchError):
    """Raised when the OS denies a filesystem operation."""


class UnsupportedArchiveError(OuchError):
    """Raised when an archive uses a feature or variant ouch cannot handle."""

    def __init__(self, diagnostic: str) -> None:
        super().__init__(diagnostic)
        self.diagnostic = diagnostic


class InternalError(OuchError):
    """Raised when ouch reaches a state it should never reach."""


class ArgumentParsingError(OuchError):
    """Raised when command-line parsing fails.

    The parser's own error is kept as-is; rendering delegates to it.
    """

    def __init__(self, wrapped: argparse.ArgumentError) -> None:
        super().__init__(wrapped)
        self.wrapped = wrapped


class CompressingRootFolderError(OuchError):
    """Raised when the filesystem root is passed to compress."""


class MissingCompressionArgumentsError(OuchError):
    """Raised when compress gets fewer than an input and an output path."""


class CompressionTypoError(OuchError):
    """Raised when the first argument looks like a misspelled ``compress``."""


class DirectoryTraversalError(OuchError):
    """Raised when walking an input directory fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
