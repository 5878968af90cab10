"""Command-line argument parsing for git-sync-keeper."""

import argparse
from git_sync_keeper.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="git-sync-keeper",
        description="Inspect and drive a git working copy: status, divergence, remotes",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Log every git invocation (also to a log file)"
    )
    parser.add_argument("--version", action="version", version=f"git-sync-keeper {__version__}")
    parser.add_argument(
        "-C", dest="repo_path", default=".", metavar="PATH", help="Repository path (default: .)"
    )
    parser.add_argument("--remote", default="origin", help="Remote name (default: origin)")
    parser.add_argument(
        "--default-branch",
        default="master",
        help="Branch name reported for an unborn HEAD git cannot name (default: master)",
    )
    parser.add_argument(
        "--timeout", type=float, metavar="SECONDS", help="Kill git commands running longer than this"
    )
    parser.add_argument(
        "--quiet-commands", action="store_true", help="Do not echo git commands to the console"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("status", help="Show staged and unstaged changes")

    divergence = subparsers.add_parser("divergence", help="Compare HEAD with a remote branch")
    divergence.add_argument(
        "remote_ref", nargs="?", help="Remote branch (default: <remote>/<current branch>)"
    )

    branches = subparsers.add_parser("branches", help="List branches")
    branches.add_argument("-r", "--remote-branches", action="store_true", help="List remote branches")

    subparsers.add_parser("current-branch", help="Print the current branch")

    commit = subparsers.add_parser("commit", help="Commit staged changes")
    commit.add_argument("-m", "--message", required=True, help="Commit message")
    commit.add_argument(
        "--strict", action="store_true", help="Fail when there is nothing to commit"
    )

    subparsers.add_parser("push", help="Push latest commits")

    add = subparsers.add_parser("add", help="Stage files")
    add.add_argument("paths", nargs="+", help="Paths to stage")

    remote_url = subparsers.add_parser("remote-url", help="Print the URL of a remote")
    remote_url.add_argument("name", nargs="?", help="Remote name (default: --remote)")

    ensure_remote = subparsers.add_parser("ensure-remote", help="Add or update a remote")
    ensure_remote.add_argument("name", help="Remote name")
    ensure_remote.add_argument("url", help="Remote URL")

    init = subparsers.add_parser("init", help="Create the repository if it does not exist")
    init.add_argument("path", nargs="?", help="Repository path (default: -C path)")

    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
