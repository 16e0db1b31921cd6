"""User-facing text rendering."""

from __future__ import annotations

from .colors import PLAIN, Palette
from .constants import (
    ERROR_CONTINUATION_INDENT,
    ERROR_TAG,
    ISSUE_TRACKER_URL,
    PROGRAM_NAME,
)
from .errors import (
    AlreadyExistsError,
    ArgumentParsingError,
    CompressingRootFolderError,
    CompressionTypoError,
    DirectoryTraversalError,
    InternalError,
    InvalidArchiveError,
    InvalidInputError,
    InvalidUnicodeError,
    IoFailureError,
    MissingCompressionArgumentsError,
    MissingExtensionError,
    MissingFileError,
    OuchError,
    PermissionDeniedError,
    UnknownExtensionError,
    UnsupportedArchiveError,
)
from .models import CompressResult, DecompressResult

_NAMED_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}
# Undecodable filename bytes come through os.fsdecode as lone surrogates.
_SURROGATE_ESCAPE_RANGE = range(0xDC80, 0xDD00)


def debug_quote(text: str) -> str:
    """Quote ``text`` so that unusual characters in file names stay visible."""
    parts = ['"']
    for char in text:
        code_point = ord(char)
        if char in _NAMED_ESCAPES:
            parts.append(_NAMED_ESCAPES[char])
        elif code_point in _SURROGATE_ESCAPE_RANGE:
            parts.append(f"\\x{code_point - 0xDC00:02X}")
        elif not char.isprintable():
            parts.append(f"\\u{{{code_point:x}}}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def render_error(error: OuchError, palette: Palette = PLAIN) -> str:
    if isinstance(error, CompressionTypoError):
        return (
            f"Did you mean {palette.magenta}{PROGRAM_NAME} compress{palette.reset}?"
        )

    return f"{palette.red}{ERROR_TAG}{palette.reset} {_error_body(error, palette)}"


def _error_body(error: OuchError, palette: Palette) -> str:
    if isinstance(error, MissingExtensionError):
        return (
            f"cannot compress to {debug_quote(error.path)}, likely because it has "
            "an unsupported (or missing) extension."
        )
    if isinstance(error, (DirectoryTraversalError, IoFailureError)):
        return error.reason
    if isinstance(error, MissingFileError):
        if not error.path:
            return "file not found!"
        return f"file {debug_quote(error.path)} not found!"
    if isinstance(error, CompressingRootFolderError):
        return "\n".join(
            (
                "It seems you're trying to compress the root folder.",
                f"{ERROR_CONTINUATION_INDENT}This is unadvisable since "
                f"{PROGRAM_NAME} does compressions in-memory.",
                f"{ERROR_CONTINUATION_INDENT}Use a more appropriate tool for this, "
                f"such as {palette.green}rsync{palette.reset}.",
            )
        )
    if isinstance(error, MissingCompressionArgumentsError):
        return "\n".join(
            (
                "The compress subcommands demands at least 2 arguments, "
                "an input file and an output file.",
                f"{ERROR_CONTINUATION_INDENT}Example: "
                f"`{PROGRAM_NAME} compress img.jpeg img.zip`",
                f"{ERROR_CONTINUATION_INDENT}For more information, "
                f"run `{PROGRAM_NAME} --help`",
            )
        )
    if isinstance(error, InternalError):
        return (
            "You've reached an internal error! This really should not have happened.\n"
            f"Please file an issue at {palette.green}{ISSUE_TRACKER_URL}{palette.reset}"
        )
    if isinstance(error, ArgumentParsingError):
        return str(error.wrapped)
    if isinstance(error, UnknownExtensionError):
        return f"{debug_quote(error.extension)} is not a supported extension."
    if isinstance(error, InvalidUnicodeError):
        return "a path or argument is not valid unicode."
    if isinstance(error, InvalidInputError):
        return "invalid input."
    if isinstance(error, AlreadyExistsError):
        return "output file already exists, refusing to overwrite it."
    if isinstance(error, InvalidArchiveError):
        return f"invalid archive: {error.diagnostic}"
    if isinstance(error, PermissionDeniedError):
        return "permission denied."
    if isinstance(error, UnsupportedArchiveError):
        return f"unsupported archive: {error.diagnostic}"

    raise TypeError(f"Unknown ouch error: {type(error).__name__}")


def render_compress_result(result: CompressResult) -> str:
    contents = _count_noun(result.file_count, "file", "files")
    if result.empty_directory_count:
        contents += " and " + _count_noun(
            result.empty_directory_count, "empty directory", "empty directories"
        )
    return f"Compressed {contents} into {result.archive_path}"


def render_decompress_result(result: DecompressResult) -> str:
    contents = _count_noun(result.file_count, "file", "files")
    return f"Decompressed {contents} into {result.target_dir}"


def _count_noun(count: int, singular: str, plural: str) -> str:
    return f"{count:,} {singular if count == 1 else plural}"
