"""The ``bk`` command line."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from hbackup import commands
from hbackup.application import MAX_JOB_ID

VERSION = "0.1.4"


def _job_id(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid job id: {text!r}") from None
    if not 0 <= value <= MAX_JOB_ID:
        raise argparse.ArgumentTypeError(f"job id out of range: {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bk", description="A simple, cross-platform backup tool."
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    sub = parser.add_subparsers(dest="command")

    add = sub.add_parser("add", help="Add a new backup job to the configuration.")
    add.add_argument("-s", "--source", required=True, help="Source file path.")
    add.add_argument("-t", "--target", required=True, help="Target file or directory path.")

    run = sub.add_parser(
        "run",
        help="Run backup jobs.",
        description="Run all jobs, one job by --id, or a one-time backup of SOURCE to TARGET.",
    )
    run.add_argument("source", nargs="?", help="Source file; must be used with target.")
    run.add_argument("target", nargs="?", help="Target file or directory; must be used with source.")
    run.add_argument("--id", type=_job_id, help="Run a specific job by id.")

    sub.add_parser("list", help="List all backup jobs.")

    delete = sub.add_parser("delete", help="Delete backup jobs by id or delete all jobs.")
    group = delete.add_mutually_exclusive_group()
    group.add_argument("--id", type=_job_id, help="Delete job by id.")
    group.add_argument("--all", action="store_true", help="Delete all jobs.")

    edit = sub.add_parser("edit", help="Edit a backup job by id.")
    edit.add_argument("--id", type=_job_id, required=True, help="Edit job by id.")
    edit.add_argument("-s", "--source", help="New source file or directory path.")
    edit.add_argument("-t", "--target", help="New target file or directory path.")

    config = sub.add_parser(
        "config", help="Display the absolute path of the configuration file."
    )
    config.add_argument("--copy", action="store_true", help="Back up the configuration file.")
    config.add_argument(
        "--reset",
        action="store_true",
        help="Reset the configuration file, backing it up first.",
    )

    parser.set_defaults(_subparsers={"run": run, "edit": edit})
    return parser


def _dispatch(args: argparse.Namespace) -> None:
    if args.command == "add":
        commands.add(args.source, args.target)
    elif args.command == "run":
        if args.id is not None:
            commands.run_by_id(args.id)
        elif args.source is not None and args.target is not None:
            commands.run_one_time(args.source, args.target)
        else:
            commands.run()
    elif args.command == "list":
        commands.list_jobs()
    elif args.command == "delete":
        commands.delete(args.id, args.all)
    elif args.command == "edit":
        commands.edit(args.id, args.source, args.target)
    elif args.command == "config":
        if args.copy and args.reset:
            raise commands.CommandError(
                "Cannot specify both --copy and --reset at the same time"
            )
        if args.copy:
            commands.backup_config()
        elif args.reset:
            commands.reset_config()
        else:
            commands.show_config()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen command; return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        print(
            "bk requires at least one command to execute. See 'bk --help' for usage.",
            file=sys.stderr,
        )
        return 1

    if args.command == "run":
        run_parser = args._subparsers["run"]
        if args.id is not None and (args.source is not None or args.target is not None):
            run_parser.error("--id cannot be used with source/target")
        if args.source is not None and args.target is None:
            run_parser.error("source must be used with target")
    elif args.command == "edit" and args.source is None and args.target is None:
        args._subparsers["edit"].error("at least one of --source/--target is required")

    try:
        _dispatch(args)
    except (commands.CommandError, ValueError, OSError, OverflowError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())