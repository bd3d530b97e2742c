"""Parsing of stock exchange configuration files."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .models import Goal, Process, Resource

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_RESOURCE_RE = re.compile(r"([^:;()]+):([0-9]+)")
_GOAL_RE = re.compile(r"(optimize:\()(time;)?([^:;()]+)\)")
_ITEM = r"([^:]+):([0-9]+)"
_ITEM_LIST = r"(" + _ITEM + r";)*(" + _ITEM + r")"
_PROCESS_RE = re.compile(r"([^:]+):\(" + _ITEM_LIST + r"\):\(" + _ITEM_LIST + r"\):([0-9]+)")


class ConfigError(ValueError):
    """Raised when a configuration cannot be parsed."""


def _atoi(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_resource(text: str) -> Resource:
    """Parse a ``name:quantity`` entry."""
    if not _RESOURCE_RE.search(text):
        raise ConfigError(f"invalid resource: {text}")
    parts = text.split(":")
    try:
        quantity = _atoi(parts[1])
    except ValueError:
        raise ConfigError(f"invalid resource: {text}") from None
    return Resource(parts[0], quantity, True)


def parse_goal(text: str) -> Goal:
    """Parse an ``optimize:(...)`` line."""
    if not _GOAL_RE.fullmatch(text):
        raise ConfigError(f"invalid goal: {text}")
    product = ""
    if "time" in text:
        semicolon = text.find(";")
        closing = text.find(")")
        if semicolon != -1 and closing != -1 and closing > semicolon:
            product = text[semicolon + 1 : closing]
        return Goal(product, True)
    closing = text.find(")")
    if closing != -1:
        product = text[10:closing]
    return Goal(product, False)


def split_process(line: str) -> list[str]:
    """Split a process line into name, ingredients, products and time."""
    head, sep, rest = line.partition(":(")
    if not sep:
        raise ConfigError(f"invalid line: {line}")
    ingredients, sep, rest = rest.partition("):(")
    if not sep:
        raise ConfigError(f"invalid line: {line}")
    products, sep, time = rest.partition("):")
    if not sep:
        raise ConfigError(f"invalid line: {line}")
    return [head, ingredients, products, time]


def _parse_items(text: str, line: str) -> list[Resource]:
    try:
        return [parse_resource(item) for item in text.split(";")]
    except ConfigError:
        raise ConfigError(f"invalid process: {line}") from None


def parse_process(text: str) -> Process:
    """Parse a ``name:(ingredients):(products):time`` line."""
    if not _PROCESS_RE.fullmatch(text):
        raise ConfigError(f"invalid process: {text}")
    name, ingredients, products, time = split_process(text)
    ingredient_list = _parse_items(ingredients, text)
    product_list = _parse_items(products, text)
    try:
        duration = _atoi(time)
    except ValueError:
        raise ConfigError(f"invalid process: {text}") from None
    return Process(name=name, ingredients=ingredient_list, products=product_list, time=duration)


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_lines(lines: Iterable[str]) -> tuple[list[Resource], list[Process], Goal]:
    """Parse configuration lines into resources, processes and the goal."""
    resources: list[Resource] = []
    processes: list[Process] = []
    goal = Goal()
    found_goal = False

    for raw in lines:
        line = _strip_line_ending(raw)
        if line.startswith("#") or not line.strip():
            continue

        try:
            resources.append(parse_resource(line))
            continue
        except ConfigError:
            pass

        try:
            parsed_goal = parse_goal(line)
        except ConfigError:
            # A line that is not a goal clears any goal read so far.
            goal = Goal()
        else:
            if found_goal:
                raise ConfigError("multiple goals found")
            goal = parsed_goal
            found_goal = True
            continue

        try:
            processes.append(parse_process(line))
            continue
        except ConfigError:
            pass

        raise ConfigError(f"invalid line: `{line}`")

    if not resources:
        raise ConfigError("no resources found")
    if not processes:
        raise ConfigError("no processes found")
    if not found_goal:
        raise ConfigError("no goal found")
    return resources, processes, goal


def parse_file(path) -> tuple[list[Resource], list[Process], Goal]:
    """Read and parse a configuration file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_lines(handle)