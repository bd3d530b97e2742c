"""Verification of a schedule trace against the configured processes."""

from __future__ import annotations

import re
from collections.abc import Iterable, MutableMapping, Sequence

from .models import Process

_CYCLE_RE = re.compile(r"[+-]?[0-9]+")


class TraceError(Exception):
    """Raised when a trace cannot be replayed.

    ``detected`` is true for a trace that is well formed but wrong, and
    false when a line could not be parsed.
    """

    def __init__(self, message: str, detected: bool = True) -> None:
        super().__init__(message)
        self.detected = detected


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def check_trace(
    resources: MutableMapping[str, int],
    processes: Sequence[Process],
    lines: Iterable[str],
) -> MutableMapping[str, int]:
    """Replay trace lines on ``resources``; the first line is a header.

    Replay stops at the first line that is not ``cycle:name``. Returns the
    updated resources and raises TraceError on the first faulty entry.
    """
    by_name = {process.name: process for process in processes}
    iterator = iter(lines)
    next(iterator, None)

    for raw in iterator:
        line = _strip_line_ending(raw)
        fields = line.split(":")
        if len(fields) != 2:
            break
        cycle, name = fields[0].strip(), fields[1]
        print("Evaluating:", line)

        if not _CYCLE_RE.fullmatch(cycle):
            raise TraceError(f"Error while parsing: invalid cycle {cycle!r}", detected=False)

        process = by_name.get(name)
        if process is None:
            raise TraceError(f"process {name} not found")

        for ingredient in process.ingredients:
            if resources.get(ingredient.name, 0) < ingredient.quantity:
                raise TraceError(f"at {line} stock insufficient")
            resources[ingredient.name] = resources.get(ingredient.name, 0) - ingredient.quantity
        for product in process.products:
            resources[product.name] = resources.get(product.name, 0) + product.quantity

    return resources


def check_log(
    resources: MutableMapping[str, int],
    processes: Sequence[Process],
    path,
) -> MutableMapping[str, int]:
    """Replay the trace stored in a log file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return check_trace(resources, processes, handle)