"""Error types raised by bwd."""

from typing import List, Optional


class BwdError(Exception):
    """Base class for all errors reported to the user as ``[bwd error] ...``."""


class HostEnvironmentError(BwdError):
    """The working directory or home directory could not be determined."""

    def __init__(self, what: str, cause: Optional[Exception] = None):
        self.what = what
        self.cause = cause
        message = f"Could not determine the {what}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class InvalidPathError(BwdError):
    """A target that was required to exist does not."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"Invalid path: '{target}'")


class ClipboardError(BwdError):
    """The clipboard is unavailable or the write failed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Clipboard Error: {reason}")


class ConfigurationError(BwdError):
    """A ``BWD_*`` setting (environment or ``.env``) has an invalid value."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__(f"Invalid configuration: {'; '.join(problems)}")
