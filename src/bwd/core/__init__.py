"""Core path resolution, root discovery and output formatting."""

from .errors import (
    BwdError,
    ClipboardError,
    ConfigurationError,
    HostEnvironmentError,
    InvalidPathError,
)
from .output_record import OutputRecord, build_output_record
from .resolver import ResolutionRequest, current_directory, resolve_target
from .root_finder import (
    ROOT_MARKERS,
    ROOT_PLACEHOLDER,
    MarkerCheck,
    RootSearchResult,
    SearchOutcome,
    find_project_root,
    relative_to_root,
)
from .selector import OutputMode, OutputRequest, render_output, select_output_mode

__all__ = [
    "BwdError",
    "ClipboardError",
    "ConfigurationError",
    "HostEnvironmentError",
    "InvalidPathError",
    "OutputRecord",
    "build_output_record",
    "ResolutionRequest",
    "current_directory",
    "resolve_target",
    "ROOT_MARKERS",
    "ROOT_PLACEHOLDER",
    "MarkerCheck",
    "RootSearchResult",
    "SearchOutcome",
    "find_project_root",
    "relative_to_root",
    "OutputMode",
    "OutputRequest",
    "render_output",
    "select_output_mode",
]
