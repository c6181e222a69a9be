"""Command-line entry point for tripane.

The steps performed on start-up:

1. Read the command line and the configuration file.
2. Decide which directory to open and check that it really exists.
3. Launch the interactive three-pane browser.
4. Save where the user ended up, or log any crash information.
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from datetime import datetime
from pathlib import Path

from tripane import MillerBrowser, MillerBrowserError, __version__
from tripane.config import (
    create_default_config,
    get_browser_settings,
    get_last_directory,
    get_logging_settings,
    save_last_directory,
    should_restore_session,
)
from tripane.listing import DirectoryLister
from tripane.logs import configure_logging

logger = logging.getLogger(__name__)

# Crash dump file location
CRASH_LOG_FILE = Path.home() / "tripane.crash.txt"


def validate_directory(path: Path, name: str) -> Path:
    """Check that a path exists and points to a directory the program can use.

    When the path is unusable (a typo, or a file instead of a folder) the
    browser falls back to the current working directory and prints a warning.

    Args:
        path: Candidate path supplied by the user or the saved session.
        name: Human-readable description used in warning messages, e.g.
            ``"start"`` or ``"start (from session)"``.

    Returns:
        The resolved path when it checks out; otherwise ``Path.cwd()``.
    """
    try:
        resolved = path.resolve()
        if not resolved.exists():
            print(f"Warning: {name} directory does not exist: {path}", file=sys.stderr)
            print("   Using current directory instead", file=sys.stderr)
            return Path.cwd()
        if not resolved.is_dir():
            print(f"Warning: {name} path is not a directory: {path}", file=sys.stderr)
            print("   Using current directory instead", file=sys.stderr)
            return Path.cwd()
        return resolved
    except (OSError, RuntimeError) as e:
        print(f"Warning: Cannot access {name} directory: {path}", file=sys.stderr)
        print(f"   Error: {e}", file=sys.stderr)
        print("   Using current directory instead", file=sys.stderr)
        return Path.cwd()


def write_crash_log(exception: BaseException) -> None:
    """Append a detailed crash report to :data:`CRASH_LOG_FILE`."""
    try:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        crash_info = f"""
================================================================================
tripane Crash Report
================================================================================
Timestamp: {timestamp}
Version: {__version__}
Python: {sys.version}
Platform: {sys.platform}

Exception Type: {type(exception).__name__}
Exception Message: {str(exception)}

Traceback:
{"".join(traceback.format_exception(type(exception), exception, exception.__traceback__))}
================================================================================
"""
        with open(CRASH_LOG_FILE, "a") as f:
            f.write(crash_info)

        print("\ntripane crashed unexpectedly!", file=sys.stderr)
        print(f"   Crash details saved to: {CRASH_LOG_FILE}", file=sys.stderr)
        print("   Please report this issue with the crash log.", file=sys.stderr)
    except OSError:
        # If we can't even write the crash log, just print to stderr
        print("\ntripane crashed and could not write crash log!", file=sys.stderr)
        traceback.print_exception(type(exception), exception, exception.__traceback__)


def parse_args(argv=None) -> argparse.Namespace:
    """Turn the command-line text into structured information."""
    parser = argparse.ArgumentParser(
        prog="tripane",
        description="Browse the filesystem in parent / current / preview columns.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show version number and exit.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to start in (default: current directory, or the last session when enabled).",
    )
    return parser.parse_args(argv)


def resolve_start_directory(directory) -> Path:
    """Pick the starting directory from the argument or the saved session."""
    if directory is not None:
        return validate_directory(Path(directory).expanduser(), "start")
    if should_restore_session():
        saved = Path(get_last_directory()).expanduser()
        return validate_directory(saved, "start (from session)")
    return Path.cwd()


def main(argv=None) -> int:
    """Launch the browser and manage session persistence."""
    try:
        args = parse_args(argv)

        # curses cannot draw when stdout is redirected to a file or a pipe.
        if not sys.stdout.isatty():
            print("The three-pane browser requires an interactive terminal.")
            return 1

        # First run: write the defaults so there is a file to edit.
        create_default_config()
        log_settings = get_logging_settings()
        configure_logging(log_settings["level"], log_settings["file"])

        settings = get_browser_settings()
        start = resolve_start_directory(args.directory)
        logger.info("Starting in %s", start)

        lister = DirectoryLister(
            show_hidden=settings["show_hidden"],
            max_entries=settings["max_entries"],
        )
        browser = MillerBrowser(start, lister, poll_interval_ms=settings["poll_interval_ms"])
        final_dir = browser.browse()

        save_last_directory(str(final_dir))
        print(f"Final directory: {final_dir}")
        return 0

    except MillerBrowserError as err:
        logger.error("Browser failed: %s", err)
        print(f"Could not run browser: {err}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.exception("Unexpected failure")
        write_crash_log(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
