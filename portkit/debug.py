"""Trace levels and hex dumps of byte arrays."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

_BYTES_PER_LINE = 16


class TraceLevel(IntEnum):
    """Severity of trace messages; higher values are more verbose."""

    OFF = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5
    VERBOSE = 6


def format_array(prepend: str, data: bytes | bytearray | memoryview) -> str:
    """Render ``data`` as hex, 16 bytes per line, each line led by ``prepend``."""
    raw = bytes(data)
    lines = []
    for start in range(0, len(raw), _BYTES_PER_LINE):
        chunk = raw[start:start + _BYTES_PER_LINE]
        lines.append(prepend + "".join(f"{byte:02X} " for byte in chunk) + "\r\n")
    return "".join(lines)


def display_array(
    stream: TextIO | None,
    prepend: str,
    data: bytes | bytearray | memoryview,
) -> None:
    """Write the hex dump of ``data`` to ``stream`` (standard error if None)."""
    target = sys.stderr if stream is None else stream
    target.write(format_array(prepend, data))