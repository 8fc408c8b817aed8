"""Catan move derivation.

Pure functions over a Game that compute longest road, the intersections a
player may build on, and the paths a player may extend a road along.
Nothing here mutates the game; every call recomputes from the current state.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..models.board import IntersectionId, Path, PathId, Player
from ..models.game_state import Game

RoadGraph = dict[IntersectionId, list[IntersectionId]]

# Intersection the longest-road search starts from unless told otherwise.
LONGEST_ROAD_ROOT = IntersectionId(6)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def road_graph(game: Game, player: Player) -> RoadGraph:
    """Return the adjacency map of the paths *player* has built roads on.

    Vertices are the intersections touched by at least one such road.
    Degenerate boundary paths are skipped so the graph has no self-loops.
    """
    graph: RoadGraph = {}
    for road in game.state.roads_of(player):
        path = game.board.paths[road.path_id]
        if path.is_degenerate:
            continue
        graph.setdefault(path.a, []).append(path.b)
        graph.setdefault(path.b, []).append(path.a)
    return graph


def longest_road(
    game: Game,
    player: Player,
    root: IntersectionId | None = LONGEST_ROAD_ROOT,
) -> int:
    """Return the length, in roads, of *player*'s longest contiguous road.

    The road network is measured as a tree: the answer is the largest sum of
    the two tallest branch heights found at any intersection.  Only the
    component containing *root* is measured, so a network that does not touch
    *root* reports 0.  Pass ``root=None`` to measure every component and take
    the longest.  Cycles are not detected.
    """
    graph = road_graph(game, player)
    visited: set[IntersectionId] = set()
    if root is not None:
        if root not in graph:
            return 0
        return _tree_diameter(graph, root, visited)

    longest = 0
    for start in graph:
        if start not in visited:
            longest = max(longest, _tree_diameter(graph, start, visited))
    return longest


def too_close_intersections(game: Game) -> set[IntersectionId]:
    """Return intersections where the distance rule forbids a new building.

    That is every built intersection plus the far end of each path touching it,
    whoever owns the building.
    """
    blocked: set[IntersectionId] = set()
    for building in game.state.buildings:
        intersection = game.board.intersections[building.intersection_id]
        for path_id in intersection.path_ids:
            blocked.update(game.board.paths[path_id].endpoints)
    return blocked


def possible_building_intersections(game: Game, player: Player) -> set[IntersectionId]:
    """Return intersections reached by *player*'s roads that are not too close."""
    blocked = too_close_intersections(game)
    possible: set[IntersectionId] = set()
    for road in game.state.roads_of(player):
        for intersection_id in game.board.paths[road.path_id].endpoints:
            if intersection_id not in blocked:
                possible.add(intersection_id)
    return possible


def possible_road_paths(game: Game, player: Player) -> set[Path]:
    """Return paths that extend *player*'s road network from one of its ends.

    An end is an intersection with exactly one of the player's roads.  Every
    path touching an end is a candidate unless it leads back along the road
    already built there.  Paths already holding a road, or passing an
    opponent's building, are not filtered out; see :func:`occupied_path_ids`.
    """
    graph = road_graph(game, player)
    possible: set[Path] = set()
    for end, built_to in _road_ends(graph):
        for path_id in game.board.paths_at(end):
            path = game.board.paths[path_id]
            if path.other(end) not in built_to:
                possible.add(path)
    return possible


def occupied_path_ids(game: Game) -> set[PathId]:
    """Return ids of every path holding a road of any player."""
    return {road.path_id for road in game.state.roads}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _road_ends(
    graph: RoadGraph,
) -> Iterator[tuple[IntersectionId, list[IntersectionId]]]:
    for vertex, neighbours in graph.items():
        if len(neighbours) == 1:
            yield vertex, neighbours


def _tree_diameter(
    graph: RoadGraph, root: IntersectionId, visited: set[IntersectionId]
) -> int:
    """Longest path in the tree reachable from *root*, walked post-order.

    ``tallest[v]`` keeps the two largest child heights seen at ``v``; a
    vertex's own height is one more than its tallest child.
    """
    longest = 0
    tallest: dict[IntersectionId, list[int]] = {root: [0, 0]}
    visited.add(root)
    stack: list[tuple[IntersectionId, Iterator[IntersectionId]]] = [
        (root, iter(graph[root]))
    ]
    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour not in visited:
                visited.add(neighbour)
                tallest[neighbour] = [0, 0]
                stack.append((neighbour, iter(graph[neighbour])))
                break
        else:
            stack.pop()
            first, second = tallest.pop(vertex)
            longest = max(longest, first + second)
            if stack:
                parent = tallest[stack[-1][0]]
                height = first + 1
                if height > parent[0]:
                    parent[0], parent[1] = height, parent[0]
                elif height > parent[1]:
                    parent[1] = height
    return longest
