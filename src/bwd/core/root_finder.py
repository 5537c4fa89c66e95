"""
Project root discovery.

Walks from a start directory up through its parents and stops at the first
directory containing one of the root markers. A marker probe that fails with
an OS error (permission denied, I/O error, ...) counts as "marker absent" for
that level, but the directory is recorded in ``RootSearchResult.skipped`` so
an unreadable ancestor can be told apart from a plain miss.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from itertools import chain, islice
from pathlib import Path
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

VCS_MARKER = ".git"
ROOT_MARKER_FILE = ".bwdroot"
# Checked in this order at every level
ROOT_MARKERS: Tuple[str, ...] = (VCS_MARKER, ROOT_MARKER_FILE)

ROOT_PLACEHOLDER = "."
MAX_ANCESTOR_DEPTH = 4096


class MarkerCheck(Enum):
    PRESENT = "present"
    ABSENT = "absent"
    ERROR = "error"


class SearchOutcome(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class RootSearchResult:
    """Result of one ancestor walk."""

    root: Optional[Path] = None
    # Directories whose marker probe raised and were treated as marker-free
    skipped: Tuple[Path, ...] = ()

    @property
    def outcome(self) -> SearchOutcome:
        return SearchOutcome.FOUND if self.root is not None else SearchOutcome.NOT_FOUND

    @property
    def found(self) -> bool:
        return self.root is not None


def probe_marker(directory: Path, name: str) -> MarkerCheck:
    """Check whether ``directory/name`` exists, without raising."""
    try:
        os.stat(directory / name)
    except (FileNotFoundError, NotADirectoryError):
        return MarkerCheck.ABSENT
    except OSError as e:
        logger.debug("Could not check %s in %s: %s", name, directory, e)
        return MarkerCheck.ERROR
    return MarkerCheck.PRESENT


def has_root_marker(directory: Path, markers: Sequence[str] = ROOT_MARKERS) -> MarkerCheck:
    """
    Check all markers in order, stopping at the first one present.

    Returns ERROR only when no marker is present and at least one probe failed.
    """
    errored = False
    for name in markers:
        check = probe_marker(directory, name)
        if check is MarkerCheck.PRESENT:
            return check
        if check is MarkerCheck.ERROR:
            errored = True
    return MarkerCheck.ERROR if errored else MarkerCheck.ABSENT


def find_project_root(
    start: Path,
    markers: Sequence[str] = ROOT_MARKERS,
    max_depth: int = MAX_ANCESTOR_DEPTH,
) -> RootSearchResult:
    """
    Find the nearest directory at or above ``start`` that contains a marker.

    Args:
        start: absolute directory to start from (inclusive)
        markers: marker names, checked in order at each level
        max_depth: maximum number of levels to inspect

    Returns:
        RootSearchResult with ``root`` set on success. The result is NOT_FOUND
        when the filesystem root is passed without a match or ``max_depth``
        levels were inspected.
    """
    skipped = []
    levels = chain([start], start.parents)
    for directory in islice(levels, max_depth):
        check = has_root_marker(directory, markers)
        if check is MarkerCheck.PRESENT:
            logger.debug("Project root found at %s", directory)
            return RootSearchResult(root=directory, skipped=tuple(skipped))
        if check is MarkerCheck.ERROR:
            skipped.append(directory)

    if len(start.parents) + 1 > max_depth:
        logger.warning("Stopped looking for a project root after %d levels", max_depth)
    logger.debug("No project root above %s", start)
    return RootSearchResult(root=None, skipped=tuple(skipped))


def relative_to_root(path: Path, root: Optional[Path]) -> str:
    """
    Express ``path`` relative to ``root``.

    Returns ROOT_PLACEHOLDER when there is no root or ``path`` is not below it.
    """
    if root is None:
        return ROOT_PLACEHOLDER
    try:
        return str(path.relative_to(root))
    except ValueError:
        logger.debug("%s is not under %s", path, root)
        return ROOT_PLACEHOLDER
