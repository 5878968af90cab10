"""Command-line interface for git-sync-keeper"""

import sys
from rich.console import Console

from git_sync_keeper.cli.args import parse_args
from git_sync_keeper.config import Config
from git_sync_keeper.constants import (
    EXIT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_NOTHING_TO_COMMIT,
    EXIT_OK,
)
from git_sync_keeper.exceptions import GitSyncKeeperError, NothingToCommitError
from git_sync_keeper.logging_config import setup_logging
from git_sync_keeper.services.display_service import DisplayService
from git_sync_keeper.services.git_service import GitService

console = Console()


def run_command(args, service: GitService, display: DisplayService) -> int:
    """Dispatch a parsed subcommand; return the process exit code."""
    if args.command == "status":
        snapshot = service.get_status()
        display.display_status(snapshot)
        return EXIT_OK if snapshot.ok else EXIT_ERROR

    if args.command == "divergence":
        remote_ref = args.remote_ref or service.default_remote_ref()
        display.display_divergence(remote_ref, service.remote_status(remote_ref))
        return EXIT_OK

    if args.command == "branches":
        names = service.remote_branches() if args.remote_branches else service.branches()
        for name in names:
            console.print(name, markup=False, highlight=False)
        return EXIT_OK

    if args.command == "current-branch":
        console.print(service.get_current_branch(), markup=False, highlight=False)
        return EXIT_OK

    if args.command == "commit":
        committed = service.commit(args.message, fail_if_nothing_to_commit=args.strict)
        if not committed:
            console.print("[yellow]Nothing to commit[/yellow]")
        return EXIT_OK

    if args.command == "push":
        service.push()
        return EXIT_OK

    if args.command == "add":
        return EXIT_OK if service.add(args.paths) == 0 else EXIT_ERROR

    if args.command == "remote-url":
        name = args.name or service.config.remote_name
        url = service.remote_url(name)
        if url is None:
            console.print(f"[yellow]Remote '{name}' is not defined[/yellow]")
            return EXIT_ERROR
        console.print(url, markup=False, highlight=False)
        return EXIT_OK

    if args.command == "ensure-remote":
        service.ensure_remote_is(args.name, args.url)
        return EXIT_OK

    if args.command == "init":
        service.ensure_repo_exist(args.path)
        return EXIT_OK

    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            remote_name=parsed_args.remote,
            default_branch=parsed_args.default_branch,
            command_timeout=parsed_args.timeout,
            echo_commands=not parsed_args.quiet_commands,
            fail_if_nothing_to_commit=getattr(parsed_args, "strict", False),
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        service = GitService(parsed_args.repo_path, config, output=console)
        return run_command(parsed_args, service, DisplayService(console))
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return EXIT_INTERRUPTED
    except NothingToCommitError as e:
        console.print(f"[yellow]{e}[/yellow]")
        return EXIT_NOTHING_TO_COMMIT
    except (GitSyncKeeperError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]", highlight=False)
        if parsed_args.debug:
            console.print_exception()
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
