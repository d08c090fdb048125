"""Parser for os-release style ``KEY=value`` files.

Format reference: https://www.freedesktop.org/software/systemd/man/os-release.html

Values may be wrapped in matching single or double quotes, and any character
may be escaped with a backslash. Malformed lines are logged and dropped; the
parser never raises on bad input.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable

logger = logging.getLogger(__name__)

# Bash variable names; POSIX only asks for upper case, digits and underscores.
_KEY_RX = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_ESCAPE_RX = re.compile(r"\\(.)")
_QUOTES = ("'", '"')


def parse_release_lines(lines: Iterable[str]) -> dict[str, str]:
    result: dict[str, str] = {}
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith("#") or not line.strip():
            continue

        key, _sep, value = line.partition("=")
        value = value.rstrip()

        if not _KEY_RX.fullmatch(key):
            logger.warning("Invalid key in input line: '%s'", line)
            continue

        # A lone quote character has no closing partner and is kept verbatim.
        if len(value) >= 2 and value[0] in _QUOTES:
            if value[0] != value[-1]:
                logger.warning("Quoting error in input line: '%s'", line)
                continue
            value = value[1:-1]

        result[key] = _ESCAPE_RX.sub(r"\1", value)
    return result


def parse_release_file(path: str | os.PathLike[str]) -> dict[str, str]:
    try:
        with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
            return parse_release_lines(f)
    except OSError as e:
        logger.debug("Release file %s not readable: %s", path, e)
        return {}


class ReleaseFileParser:
    """Reads one release file and looks up single keys from it.

    The file is re-read on every lookup so the answer follows the file.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path

    def parse(self) -> dict[str, str]:
        return parse_release_file(self.path)

    def __getitem__(self, key: str) -> str:
        return self.parse().get(key, "")
