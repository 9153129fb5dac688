"""Command-line entry point."""

from __future__ import annotations

import sys
import zlib
from collections.abc import Sequence

from .branches import (
    checkout_branch,
    create_branch,
    delete_branch,
    list_branches,
    rename_branch,
)
from .commits import commit
from .diff import diff
from .repo import AlreadyInitializedError, NotInitializedError, RitzError, init_repository
from .staging import add
from .status import status

PROG = "./my_cli"


def _usage(text: str) -> int:
    print(f"Usage: {PROG} {text}")
    return 1


def _init() -> int:
    try:
        path = init_repository()
    except AlreadyInitializedError as exc:
        print(exc)
        return 0
    except OSError as exc:
        print("Failed to initialize ritz directory:", exc)
        return 0
    print("Initialized empty ritz directory in", path)
    return 0


def _add(paths: Sequence[str]) -> int:
    try:
        failures = add(list(paths))
    except NotInitializedError as exc:
        print(exc)
        return 0
    except OSError as exc:
        print("Error saving index:", exc)
        return 0
    for path, error in failures:
        print("Error adding path:", path, error)
    return 0


def _commit(message: str) -> int:
    try:
        result = commit(message)
    except NotInitializedError as exc:
        print(exc)
        return 0
    except OSError as exc:
        print("Error writing commit object:", exc)
        return 0
    print(result.summary())
    return 0


def _status() -> int:
    try:
        report = status()
    except NotInitializedError as exc:
        print(exc)
        return 0
    except OSError as exc:
        print("Error getting untracked files:", exc)
        return 0
    print(report.render(), end="")
    return 0


def _diff(file_path: str) -> int:
    try:
        result = diff(file_path)
    except NotInitializedError:
        print("Ritz repository not initialized", file=sys.stderr)
        return 1
    except (OSError, zlib.error) as exc:
        print(f"Error reading current file: {exc}", file=sys.stderr)
        return 1
    print(result.render(), end="")
    return 0


def _branch(args: Sequence[str]) -> int:
    if not args:
        try:
            for name, current in list_branches():
                print(f"* {name}" if current else name)
        except (RitzError, OSError) as exc:
            print("Error listing branches:", exc)
        return 0
    if args[0] == "-d":
        if len(args) != 2:
            _usage("ritz branch -d <branch>")
            return 0
        action, label = (lambda: delete_branch(args[1])), "deleting"
    elif args[0] == "-m":
        if len(args) != 3:
            _usage("ritz branch -m <old> <new>")
            return 0
        action, label = (lambda: rename_branch(args[1], args[2])), "renaming"
    else:
        action, label = (lambda: create_branch(args[0])), "creating"
    try:
        action()
    except (RitzError, OSError) as exc:
        print(f"Error {label} branch:", exc)
    return 0


def _checkout(args: Sequence[str]) -> int:
    if len(args) != 1:
        _usage("ritz checkout <branch>")
        return 0
    try:
        if not checkout_branch(args[0]):
            print(f"Already on '{args[0]}'")
    except (RitzError, OSError) as exc:
        print("Error checking out branch:", exc)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line with ``argv`` (defaults to ``sys.argv[1:]``)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _usage("<command>")
    command = args[0]
    if command != "ritz":
        print("Invalid command:", command)
        return 1
    if len(args) < 2:
        return _usage("ritz <subcommand>")
    subcommand, rest = args[1], args[2:]
    if subcommand == "init":
        return _init()
    if subcommand == "add":
        if not rest:
            return _usage("ritz add <file>")
        return _add(rest)
    if subcommand == "commit":
        if len(rest) < 2 or rest[0] != "-m":
            return _usage("ritz commit -m <message>")
        return _commit(rest[1])
    if subcommand == "status":
        return _status()
    if subcommand == "diff":
        if not rest:
            return _usage("ritz diff <file>")
        return _diff(rest[0])
    if subcommand == "branch":
        return _branch(rest)
    if subcommand == "checkout":
        return _checkout(rest)
    print("Invalid ritz subcommand:", subcommand)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())