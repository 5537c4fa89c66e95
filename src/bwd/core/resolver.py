"""
Path resolution against the current working directory.

Resolution is lexical: a relative target is joined onto the working directory
and normalized without touching the filesystem. Only ``existing=True`` asks
the OS to canonicalize the result, which is also the only mode in which a
missing target is an error.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bwd.core.errors import HostEnvironmentError, InvalidPathError
from bwd.core.formatter import strip_extended_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionRequest:
    """An optional target plus the directory it is resolved against."""

    target: Optional[str]
    current_directory: Path

    @property
    def has_target(self) -> bool:
        return bool(self.target)


def current_directory() -> Path:
    """
    Return the process working directory.

    Raises:
        HostEnvironmentError: if the OS cannot report it (e.g. it was deleted)
    """
    try:
        return Path(os.getcwd())
    except OSError as e:
        raise HostEnvironmentError("current working directory", e) from e


def collapse_leading_slashes(path: str) -> str:
    """
    Turn a POSIX leading ``//`` into ``/``.

    normpath keeps exactly two leading slashes (implementation-defined on
    POSIX). On Windows they start a UNC path and are left alone.
    """
    if os.name != "nt" and path.startswith("//"):
        return "/" + path.lstrip("/")
    return path


def resolve_target(request: ResolutionRequest, existing: bool = False) -> Path:
    """
    Resolve the request to an absolute, normalized path.

    Args:
        request: target and working directory
        existing: require the target to exist and resolve symlinks

    Returns:
        The working directory itself for an empty target, otherwise the
        normalized join of the working directory and the target (an absolute
        target replaces the working directory).

    Raises:
        InvalidPathError: if ``existing`` is set and the target does not exist
    """
    if not request.has_target:
        return request.current_directory

    joined = collapse_leading_slashes(
        os.path.normpath(os.path.join(request.current_directory, request.target))
    )
    logger.debug("Resolved %r against %s -> %s", request.target, request.current_directory, joined)

    if not existing:
        return Path(joined)

    if not os.path.exists(joined):
        raise InvalidPathError(request.target)
    canonical = strip_extended_prefix(os.path.realpath(joined))
    logger.debug("Canonicalized %s -> %s", joined, canonical)
    return Path(canonical)
