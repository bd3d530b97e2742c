"""Construction of the precedence graph between processes."""

from __future__ import annotations

from collections.abc import Sequence

from .models import Goal, Process, Rational, Resource


def find_ubik(resources: Sequence[Resource], processes: Sequence[Process]) -> str:
    """Name of the first resource produced by every process, or ''."""
    for resource in resources:
        if all(
            any(product.name == resource.name for product in process.products)
            for process in processes
        ):
            return resource.name
    return ""


def _is_initial(process: Process, resources: Sequence[Resource], ubik: str) -> bool:
    if not process.ingredients:
        return False
    for ingredient in process.ingredients:
        if ingredient.name == ubik:
            continue
        if not any(
            ingredient.name == r.name and r.quantity > 0 and r.quantity >= ingredient.quantity
            for r in resources
        ):
            return False
    return True


def build_graph(
    resources: Sequence[Resource], processes: Sequence[Process], goal: Goal
) -> tuple[bool, str]:
    """Link processes backwards from the goal.

    Mutates the processes in place. Returns whether the graph is finite
    and the name of the resource every process produces ('' if none).
    """
    ubik = find_ubik(resources, processes)
    current: list[Process] = []

    for process in processes:
        process.predecessors = []
        process.start = -1
        process.min_count = Rational(1, 1)
        for product in process.products:
            if product.name == goal.product:
                process.added = 1
                process.final = True
                current.append(process)
        process.initial = _is_initial(process, resources, ubik)

    while current:
        following: list[Process] = []
        for target in current:
            for ingredient in target.ingredients:
                for process in processes:
                    for product in process.products:
                        if ingredient.name != product.name:
                            continue
                        if process.name == target.name or ingredient.name == ubik:
                            continue
                        if process.added > 1:
                            return False, ubik
                        process.added += 1
                        process.successor = target
                        ratio = Rational(ingredient.quantity, 1).times(target.min_count)
                        process.min_count = ratio.times(Rational(1, product.quantity))
                        if not target.predecessors or target.predecessors[0].name != process.name:
                            target.predecessors.append(process)
                        following.append(process)
                        break
        current = following
    return True, ubik