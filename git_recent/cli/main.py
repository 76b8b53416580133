"""Command-line interface for git-recent"""

import sys
from typing import Optional, Sequence

from rich.console import Console

from git_recent.cli.args import parse_args
from git_recent.config import Config
from git_recent.core import BranchController
from git_recent.services import DisplayService, GitService
from git_recent.utils.logging import get_logger, setup_logging

console = Console()
error_console = Console(stderr=True)
logger = get_logger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application.

    Returns 0 after quitting or switching, 1 if the repository could not be
    opened or read, or the run was interrupted.
    """
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        config = Config(
            repo_path=parsed_args.path,
            tick_rate_ms=parsed_args.tick_rate,
            page_size=parsed_args.page_size,
            list_only=parsed_args.list,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        # The TUI owns the terminal, so interactive runs log to file only
        log_file = setup_logging(
            verbose=config.verbose, debug=config.debug, tui_mode=not config.list_only
        )
        if log_file:
            logger.debug(f"Logging to {log_file}")
        logger.debug(f"Configuration: {config.to_dict()}")

        git_service = GitService(config.repo_path)
        branches = git_service.list_branches()

        if config.list_only:
            DisplayService(console).display_branch_table(branches)
            return 0

        controller = BranchController(git_service, branches, page_size=config.page_size)

        from git_recent.tui import BranchSwitcherApp
        app = BranchSwitcherApp(controller, tick_interval=config.tick_interval)
        outcome = app.run()

        if app.return_code:
            return app.return_code
        if outcome is not None and outcome.switched_to:
            console.print(f"Switched to branch '[green]{outcome.switched_to}[/green]'")
        return 0
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        logger.debug("Startup failed", exc_info=True)
        error_console.print(f"[red]Error: {e}[/red]")
        if parsed_args is not None and parsed_args.debug:
            error_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
