"""
Output mode selection.

The flags are not mutually exclusive; the first row of OUTPUT_PRIORITY whose
flag is set decides what is printed, and PLAIN is used when none is set.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from bwd.core.output_record import OutputRecord


class OutputMode(Enum):
    JSON = "json"
    RELATIVE = "relative"
    SHORT = "short"
    PLAIN = "plain"

    @property
    def needs_root(self) -> bool:
        return self in (OutputMode.JSON, OutputMode.RELATIVE)


@dataclass(frozen=True)
class OutputRequest:
    """Output flags taken from the command line."""

    json: bool = False
    relative: bool = False
    short: bool = False
    forward_slashes: bool = False
    copy: bool = False


# (flag on OutputRequest, mode), highest priority first
OUTPUT_PRIORITY: Tuple[Tuple[str, OutputMode], ...] = (
    ("json", OutputMode.JSON),
    ("relative", OutputMode.RELATIVE),
    ("short", OutputMode.SHORT),
)


def select_output_mode(request: OutputRequest) -> OutputMode:
    for flag, mode in OUTPUT_PRIORITY:
        if getattr(request, flag):
            return mode
    return OutputMode.PLAIN


def render_output(record: OutputRecord, mode: OutputMode) -> str:
    """Render the single output line (without the trailing newline)."""
    if mode is OutputMode.JSON:
        return record.to_json()
    if mode is OutputMode.RELATIVE:
        return record.root
    if mode is OutputMode.SHORT:
        return record.short
    return record.path
