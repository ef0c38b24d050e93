"""Command-line entry point for managing and running solutions."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Sequence

from aoc2022 import commands
from aoc2022.day import Day

_U8_TEXT = re.compile(r"\+?[0-9]+")


class _ArgList:
    """Consumes flags, options and free arguments from a list of strings."""

    def __init__(self, args: Sequence[str]) -> None:
        self._args = list(args)

    def subcommand(self) -> str | None:
        if self._args and not self._args[0].startswith("-"):
            return self._args.pop(0)
        return None

    def contains(self, flag: str) -> bool:
        if flag in self._args:
            self._args.remove(flag)
            return True
        return False

    def opt_u8(self, option: str) -> int | None:
        for index, arg in enumerate(self._args):
            if arg == option:
                if index + 1 >= len(self._args):
                    raise ValueError(f"the '{option}' option doesn't have an associated value")
                value = self._args[index + 1]
                del self._args[index : index + 2]
                return _parse_u8(value)
            if arg.startswith(option + "="):
                del self._args[index]
                return _parse_u8(arg[len(option) + 1 :])
        return None

    def free_day(self) -> Day:
        day = self.opt_free_day()
        if day is None:
            raise ValueError("the required free-standing argument is missing")
        return day

    def opt_free_day(self) -> Day | None:
        if not self._args:
            return None
        return Day.parse(self._args.pop(0))

    def finish(self) -> list[str]:
        remaining, self._args = self._args, []
        return remaining


def _parse_u8(value: str) -> int:
    if not _U8_TEXT.fullmatch(value) or int(value) > 255:
        raise ValueError(f"failed to parse '{value}': invalid number")
    return int(value)


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """Parse command-line arguments into a namespace with a ``command`` field.

    Raises ValueError for malformed arguments and SystemExit for a missing
    or unknown command.
    """
    args = _ArgList(argv)
    command = args.subcommand()

    if command == "all":
        parsed = argparse.Namespace(command="all", release=args.contains("--release"))
    elif command == "time":
        run_all = args.contains("--all")
        store = args.contains("--store")
        parsed = argparse.Namespace(
            command="time", all=run_all, day=args.opt_free_day(), store=store
        )
    elif command in ("download", "read"):
        parsed = argparse.Namespace(command=command, day=args.free_day())
    elif command == "scaffold":
        download = args.contains("--download")
        parsed = argparse.Namespace(command="scaffold", day=args.free_day(), download=download)
    elif command == "solve":
        release = args.contains("--release")
        dhat = args.contains("--dhat")
        submit = args.opt_u8("--submit")
        parsed = argparse.Namespace(
            command="solve", day=args.free_day(), release=release, dhat=dhat, submit=submit
        )
    elif command == "today":
        parsed = argparse.Namespace(command="today")
    elif command is None:
        _fail("No command specified.")
    else:
        _fail(f"Unknown command: {command}")

    remaining = args.finish()
    if remaining:
        print(f"Warning: unknown argument(s): {remaining!r}.", file=sys.stderr)
    return parsed


def _run_today() -> None:
    day = Day.today()
    if day is None:
        _fail(
            "`today` command can only be run between the 1st and the 25th of december. "
            "Please use `scaffold` with a specific day."
        )
    commands.handle_scaffold(day)
    commands.handle_download(day)
    commands.handle_read(day)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and run the requested command."""
    argv = sys.argv[1:] if argv is None else argv
    try:
        args = parse_args(argv)
    except ValueError as exc:
        _fail(f"Error: {exc}")

    if args.command == "all":
        commands.handle_all(args.release)
    elif args.command == "time":
        commands.handle_time(args.day, args.all, args.store)
    elif args.command == "download":
        commands.handle_download(args.day)
    elif args.command == "read":
        commands.handle_read(args.day)
    elif args.command == "scaffold":
        commands.handle_scaffold(args.day)
        if args.download:
            commands.handle_download(args.day)
    elif args.command == "solve":
        commands.handle_solve(args.day, args.release, args.dhat, args.submit)
    elif args.command == "today":
        _run_today()


if __name__ == "__main__":
    main()