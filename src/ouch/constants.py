"""Literal constants used by ouch."""

PROGRAM_NAME = "ouch"
VERSION = "0.1.6"
ISSUE_TRACKER_URL = "https://github.com/vrmiguel/ouch"

ZIP_SUFFIX = ".zip"

COMPRESS_COMMAND = "compress"
DECOMPRESS_COMMAND = "decompress"
# difflib ratio above which an unknown first word is treated as a typo of "compress".
COMPRESS_TYPO_RATIO = 0.75

ERROR_TAG = "[ERROR]"
# Continuation lines of multi-line errors line up under the text after "[ERROR] ".
ERROR_CONTINUATION_INDENT = " " * 8

NO_COLOR_ENV_VAR = "NO_COLOR"
COLOR_MODE_ENV_VAR = "OUCH_COLOR"
COLOR_MODE_ALWAYS = "always"
COLOR_MODE_NEVER = "never"
