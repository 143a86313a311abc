"""Obstacle-aware routes between cells."""

from __future__ import annotations

import heapq
import logging
from typing import Any, Callable, Hashable, Iterable

from .coords import Cell

logger = logging.getLogger(__name__)


def astar(
    start: Hashable,
    goal: Hashable,
    neighbors: Callable[[Any], Iterable[Any]],
    heuristic: Callable[[Any, Any], float],
    *,
    cost: Callable[[Any, Any], float] = lambda a, b: 1.0,
    passable: Callable[[Any], bool] = lambda x: True,
) -> tuple[list[Any] | None, float]:
    """Cheapest path between two hashable nodes.

    ``cost`` is charged for entering each node and ``heuristic`` must not
    overestimate the remaining cost. Returns the node list from ``start`` to
    ``goal`` with its total cost, or ``(None, inf)`` when ``goal`` cannot be
    reached.
    """

    g = {start: 0.0}
    closed: set[Hashable] = set()
    open_heap: list[tuple[float, int, Hashable]] = []
    push_id = 0
    heapq.heappush(open_heap, (heuristic(start, goal), push_id, start))
    came_from: dict[Hashable, Hashable] = {}

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current in closed:
            continue
        closed.add(current)
        if current == goal:
            rev = [current]
            while current in came_from:
                current = came_from[current]
                rev.append(current)
            rev.reverse()
            return rev, g[rev[-1]]

        for nxt in neighbors(current):
            if not passable(nxt):
                continue
            tentative = g[current] + float(cost(current, nxt))
            if tentative < g.get(nxt, float("inf")):
                came_from[nxt] = current
                g[nxt] = tentative
                push_id += 1
                heapq.heappush(open_heap, (tentative + float(heuristic(nxt, goal)), push_id, nxt))

    return None, float("inf")


def route(
    start: Cell,
    goal: Cell,
    *,
    passable: Callable[[Cell], bool] = lambda cell: True,
    cost: Callable[[Cell, Cell], float] = lambda a, b: 1.0,
    radius: int | None = None,
) -> tuple[list[Cell] | None, float]:
    """Shortest route of adjacent cells from ``start`` to ``goal``.

    Hex distance is the heuristic, so step costs below 1 may yield a
    non-optimal route. Impassable cells are never entered; ``start`` itself
    is always allowed. The grid is unbounded, so the search is confined to
    cells within ``radius`` of ``start`` (default: straight distance plus 8).
    """

    if radius is None:
        radius = start.distance_to(goal) + 8

    def within(cell: Cell) -> bool:
        return start.distance_to(cell) <= radius and passable(cell)

    path, total = astar(
        start,
        goal,
        Cell.neighbors,
        Cell.distance_to,
        cost=cost,
        passable=within,
    )
    if path is None:
        logger.debug("no route from %s to %s", start, goal)
    return path, total
