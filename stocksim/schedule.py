"""Scheduling of processes over the precedence graph, bounded by a deadline."""

from __future__ import annotations

import time
from collections.abc import Callable, MutableMapping, Sequence

from .models import Process, Rational, lcm


class Deadline:
    """A point in time after which scheduling must stop.

    ``seconds=None`` never expires. A zero or negative delay is already
    expired.
    """

    def __init__(
        self,
        seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._expires_at = None if seconds is None else clock() + seconds

    def expired(self) -> bool:
        """Whether the deadline has passed."""
        return self._expires_at is not None and self._clock() >= self._expires_at


def max_time(processes: Sequence[Process]) -> int:
    """Longest duration among the processes, or 0."""
    return max((process.time for process in processes if process.time > 0), default=0)


def _has_stock(resources: MutableMapping[str, int], process: Process) -> bool:
    for ingredient in process.ingredients:
        available = resources.get(ingredient.name, 0)
        if available < ingredient.quantity * process.count or available == 0:
            return False
    return True


def _run(resources: MutableMapping[str, int], process: Process, ubik: str) -> None:
    process.iterations += process.count
    for ingredient in process.ingredients:
        if ingredient.name != ubik:
            resources[ingredient.name] = (
                resources.get(ingredient.name, 0) - ingredient.quantity * process.count
            )
    for product in process.products:
        if product.name != ubik:
            resources[product.name] = (
                resources.get(product.name, 0) + product.quantity * process.count
            )


def schedule(
    resources: MutableMapping[str, int],
    processes: Sequence[Process],
    finite: bool,
    ubik: str,
    deadline: Deadline | None = None,
) -> tuple[int, str]:
    """Run processes until no initial process is doable or the deadline passes.

    Mutates ``resources`` and the processes. Returns the cycle at which the
    work finished and, for non-finite graphs, the trace of runs.
    """
    if deadline is None:
        deadline = Deadline()
    finished_at = 0
    trace: list[str] = []

    for process in processes:
        process.count = process.min_count.numerator
        if process.initial:
            process.start = 0
            process.doable = True

    max_count = lcm(process.min_count.denominator for process in processes)
    for process in processes:
        process.count = process.min_count.times(Rational(max_count, 1)).numerator

    while True:
        current: list[Process] = []
        for process in processes:
            if not (process.initial and process.doable):
                continue
            if not _has_stock(resources, process):
                process.doable = False
                continue
            current.append(process)

        if not current:
            break

        restart = False
        while current:
            if deadline.expired():
                return finished_at, "".join(trace)
            following: list[Process] = []
            queued: set[str] = set()

            for process in current:
                if not _has_stock(resources, process):
                    continue
                _run(resources, process, ubik)

                successor = process.successor
                if successor is not None:
                    end = process.start + process.time
                    if end > successor.start:
                        successor.start = end
                    trace.append(f" {process.start}:{process.name}\n")
                    if not finite and successor.initial:
                        restart = True
                        break
                    if successor.name not in queued:
                        queued.add(successor.name)
                        following.append(successor)

                if finite and process.final:
                    finished_at = process.start + process.time
                if not finite:
                    finished_at = process.start + max_time(current)

            if restart:
                break
            current = following

    return finished_at, "".join(trace)