"""Rendering and writing of the schedule report."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .models import Process


def build_output(
    resources: Mapping[str, int],
    processes: Sequence[Process],
    end: int,
    finite: bool,
    trace: str,
) -> str:
    """Render the scheduled processes and the remaining stock."""
    parts = ["Processes scheduled:\n"]
    some_scheduled = False
    if finite:
        for process in processes:
            if 0 <= process.start <= end:
                for _ in range(process.iterations):
                    some_scheduled = True
                    parts.append(f" {process.start}:{process.name}\n")
    else:
        parts.append(trace)
        some_scheduled = bool(trace)
    if not some_scheduled:
        parts.append(" none\n")
    parts.append(f"No more process doable at cycle {end + 1}.\n")
    parts.append("Stock left:\n")
    parts.extend(f" {name}:{quantity}\n" for name, quantity in resources.items())
    return "".join(parts)


def log_path_for(config_path) -> str:
    """The log file name: the config path with its extension replaced by .log."""
    name = str(config_path)
    dot = name.rfind(".")
    if dot > name.rfind("/"):
        name = name[:dot]
    return name + ".log"


def write_output(config_path, text: str) -> str:
    """Write the report next to the configuration and return its path."""
    log_path = log_path_for(config_path)
    with open(log_path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)
    print("Output written to", log_path)
    return log_path