"""Command-line argument parsing for git-recent."""

import argparse
from git_recent.__version__ import __version__
from git_recent.constants import DEFAULT_PAGE_SIZE, DEFAULT_TICK_RATE_MS


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-recent",
        description="Switch between local git branches, most recently changed first",
        epilog="Keys: enter switch, / filter, D delete (asks to confirm), q quit",
    )
    parser.add_argument(
        "path", nargs="?", default=".", help="Path to the git repository (default: .)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-recent {__version__}")
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print branches ordered by recency and exit (no interactive mode)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        metavar="N",
        help=f"Rows moved by page up/page down (default: {DEFAULT_PAGE_SIZE})",
    )
    # Redraw interval in milliseconds; tuning only, so hidden from --help
    parser.add_argument(
        "--tick-rate", type=int, default=DEFAULT_TICK_RATE_MS, help=argparse.SUPPRESS
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
