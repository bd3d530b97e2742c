"""Command line entry point for the stock exchange simulator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .checker import TraceError, check_log
from .graph import build_graph
from .output import build_output, write_output
from .parse import ConfigError, parse_file
from .schedule import Deadline, schedule

USAGE = "usage: stock <file> [<waiting_time>] | stock -checker <file> <log_file>"
DEFAULT_WAIT = 1.0


class _ArgumentError(ValueError):
    """Bad command line arguments."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


def check_args(args: Sequence[str], checker: bool) -> float:
    """Validate positional arguments and return the waiting time in seconds."""
    if len(args) > 2:
        raise _ArgumentError("too many arguments")
    if len(args) < 1:
        raise _ArgumentError("not enough arguments")
    if len(args) == 2 and not checker:
        try:
            return float(args[1])
        except ValueError:
            raise _ArgumentError(
                f"error parsing wait time: invalid number {args[1]!r}",
                hint="Did you mean to run the checker?",
            ) from None
    return DEFAULT_WAIT


def _run_checker(resources, processes, log_path) -> int:
    try:
        check_log(resources, processes, log_path)
    except OSError as err:
        print(f"error parsing log file: {err}", file=sys.stderr)
        return 1
    except TraceError as err:
        if err.detected:
            print("Error detected")
        print(err)
        print("Exiting...")
        return 1
    print("Trace completed, no error detected.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Schedule the processes of a configuration, or check a log against it."""
    parser = argparse.ArgumentParser(prog="stock", usage=USAGE)
    parser.add_argument("-checker", "--checker", action="store_true", help="run the checker")
    parser.add_argument("args", nargs="*")
    options = parser.parse_args(argv)
    args = options.args

    try:
        wait = check_args(args, options.checker)
    except _ArgumentError as err:
        print(err, file=sys.stderr)
        if err.hint:
            print(err.hint, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1
    deadline = Deadline(wait)

    try:
        resources, processes, goal = parse_file(args[0])
    except (ConfigError, OSError) as err:
        print(f"Error while parsing: {err}")
        print("Exiting...")
        return 1

    finite, ubik = build_graph(resources, processes, goal)
    stock = {resource.name: resource.quantity for resource in resources}

    if options.checker:
        if len(args) < 2:
            print("error parsing log file: no log file given", file=sys.stderr)
            return 1
        return _run_checker(stock, processes, args[1])

    end, trace = schedule(stock, processes, finite, ubik, deadline)
    text = build_output(stock, processes, end, finite, trace)
    try:
        write_output(args[0], text)
    except OSError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())