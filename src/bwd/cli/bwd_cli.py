"""
CLI entry point for bwd.

Prints the current working directory, or a target resolved against it, as a
single line on stdout. Diagnostics and log messages go to stderr.

Examples:
    bwd                 # /home/alice/projects/demo
    bwd -H              # $HOME/projects/demo
    bwd -r src          # src (relative to the nearest .git / .bwdroot)
    bwd -j              # {"path":"...","short":"...","root":"..."}
    bwd -c -s ..        # forward-slash parent path, also copied to the clipboard
    bwd -- -odd-name    # a target that starts with '-'

Clipboard failures are not fatal: the path is still printed and the command
exits 0, with a warning on stderr.
"""

import argparse
import logging
import sys
from typing import List, Optional

import coloredlogs

from bwd import __version__
from bwd.clipboard import copy_to_clipboard
from bwd.config import BwdSettings, settings_provider
from bwd.core.errors import BwdError, ClipboardError, ConfigurationError
from bwd.core.formatter import home_directory
from bwd.core.output_record import build_output_record
from bwd.core.resolver import ResolutionRequest, current_directory, resolve_target
from bwd.core.root_finder import (
    ROOT_MARKERS,
    ROOT_PLACEHOLDER,
    find_project_root,
    relative_to_root,
)
from bwd.core.selector import OutputRequest, render_output, select_output_mode

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    coloredlogs.install(level=level, logger=logging.getLogger("bwd"), fmt=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bwd",
        description="bwd - Better Working Directory",
        epilog="Use '--' before a target that starts with '-'. "
        f"Project roots are marked by {' or '.join(ROOT_MARKERS)}.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Path to resolve against the current directory (default: the current directory)",
    )
    parser.add_argument("-c", "--copy", action="store_true", help="Copy to clipboard")
    parser.add_argument(
        "-s",
        "--slashes",
        action="store_true",
        help="Use forward slashes (/) instead of backslashes (\\)",
    )
    parser.add_argument(
        "-r",
        "--root",
        action="store_true",
        help="Print the path relative to the project root ('.' if there is none)",
    )
    parser.add_argument(
        "-j", "--json", action="store_true", help="Print path, short and root as JSON"
    )
    parser.add_argument(
        "-H",
        "--short",
        action="store_true",
        help="Replace the home directory with $HOME (%%USERPROFILE%% on Windows)",
    )
    parser.add_argument(
        "-e",
        "--existing",
        action="store_true",
        help="Fail if the target does not exist, and resolve symlinks",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug messages to stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def output_request_from_args(args: argparse.Namespace) -> OutputRequest:
    return OutputRequest(
        json=args.json,
        relative=args.root,
        short=args.short,
        forward_slashes=args.slashes,
        copy=args.copy,
    )


def compute_output(
    target: Optional[str],
    request: OutputRequest,
    settings: BwdSettings,
    existing: bool = False,
) -> str:
    """
    Resolve ``target`` and render the line to print.

    Raises:
        HostEnvironmentError: working or home directory unavailable
        InvalidPathError: ``existing`` is set and the target is missing
    """
    resolution = ResolutionRequest(target=target, current_directory=current_directory())
    home = home_directory()
    path = resolve_target(resolution, existing=existing)

    mode = select_output_mode(request)
    logger.debug("Output mode: %s", mode.value)

    root = ROOT_PLACEHOLDER
    if mode.needs_root:
        search = find_project_root(path, max_depth=settings.max_ancestor_depth)
        for skipped in search.skipped:
            logger.debug("Treated %s as having no marker (check failed)", skipped)
        root = relative_to_root(path, search.root)

    record = build_output_record(path, home, root, forward_slashes=request.forward_slashes)
    return render_output(record, mode)


def report_error(error: BwdError) -> int:
    logger.debug("Aborting", exc_info=error)
    print(f"[bwd error] {error}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = settings_provider.get_settings()
    except ConfigurationError as e:
        configure_logging("DEBUG" if args.verbose else "WARNING")
        return report_error(e)
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    request = output_request_from_args(args)
    try:
        line = compute_output(args.target, request, settings, existing=args.existing)
    except BwdError as e:
        return report_error(e)

    print(line)
    sys.stdout.flush()

    if request.copy:
        try:
            copy_to_clipboard(line)
        except ClipboardError as e:
            logger.warning("%s (output was not copied)", e)
    return 0


if __name__ == "__main__":
    sys.exit(main())
