"""
Text transformations applied to resolved paths.

Home shortening works on path components, so ``/home/alice2`` is never treated
as being under ``/home/alice``. Forward-slash substitution is purely textual
and is applied last, to the final strings.
"""

import os
from pathlib import Path, PurePath, PureWindowsPath
from typing import Optional

from bwd.core.errors import HostEnvironmentError

POSIX_HOME_TOKEN = "$HOME"
WINDOWS_HOME_TOKEN = "%USERPROFILE%"
EXTENDED_LENGTH_PREFIX = "\\\\?\\"


def home_directory() -> Path:
    """
    Return the user's home directory.

    Raises:
        HostEnvironmentError: if neither the environment nor the password
            database can provide it
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise HostEnvironmentError("home directory", e) from e
    # expanduser falls back to "~" unchanged when nothing is known
    if not home.is_absolute():
        raise HostEnvironmentError("home directory")
    return home


def home_token(path: PurePath) -> str:
    """Pick the home token matching the flavour of ``path``."""
    if isinstance(path, PureWindowsPath):
        return WINDOWS_HOME_TOKEN
    return POSIX_HOME_TOKEN


def shorten_path(path: PurePath, home: PurePath, token: Optional[str] = None) -> str:
    """
    Replace a leading home directory in ``path`` with a home token.

    Args:
        path: absolute path to shorten
        home: the user's home directory, same flavour as ``path``
        token: override for the platform token

    Returns:
        ``$HOME/rest`` (or ``%USERPROFILE%\\rest``), the bare token when
        ``path`` is the home directory, and ``str(path)`` unchanged when
        ``path`` is outside it.
    """
    try:
        rest = path.relative_to(home)
    except ValueError:
        return str(path)
    token = token or home_token(path)
    return str(type(path)(token, rest))


def to_forward_slashes(text: str) -> str:
    return text.replace("\\", "/")


def strip_extended_prefix(text: str) -> str:
    """Drop the ``\\\\?\\`` prefix Windows adds to canonicalized paths."""
    if text.startswith(EXTENDED_LENGTH_PREFIX):
        return text[len(EXTENDED_LENGTH_PREFIX):]
    return text


def lossy_text(text: str) -> str:
    """
    Replace undecodable filename bytes with U+FFFD.

    ``os.getcwd()`` keeps non-UTF-8 bytes as lone surrogates, which cannot be
    written to a UTF-8 stream or serialized as JSON.
    """
    return os.fsencode(text).decode("utf-8", "replace")
