"""Explicit edge color assignment from a compact color sequence."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from .geometry import EdgeColor

_ALLOWED = frozenset(" ?,cmwyCMWY")

_COLORS = {
    "c": EdgeColor.CYAN,
    "m": EdgeColor.MAGENTA,
    "y": EdgeColor.YELLOW,
    "w": EdgeColor.WHITE,
}


def validate_edge_colors(assignment: str) -> str:
    """Check that a color sequence holds only allowed characters and return it.

    Raises ValueError for any character other than C, M, Y, W (either case),
    ``?``, ``,`` and space.
    """
    for char in assignment:
        if char not in _ALLOWED:
            raise ValueError(
                "Invalid edge coloring sequence. Use -edgecolors <color sequence> with only "
                "the colors C, M, Y, and W. Separate contours by commas and use ? to keep "
                "the default assigment for a contour."
            )
    return assignment


def _edges_of(contour: Any) -> Sequence[Any]:
    return getattr(contour, "edges", contour)


def apply_edge_colors(contours: Iterable[Any], assignment: str) -> None:
    """Assign edge colors to contours from a color sequence, in place.

    Each contour is either an object with an ``edges`` sequence or a sequence
    of edges; every edge must have a writable ``color`` attribute. Letters set
    consecutive edges of the current contour, a comma moves to the next contour.
    Unless ``?`` appeared, the remaining edges of a contour left by a comma are
    set to white. Surplus letters and contours are ignored.
    """
    contour_list = list(contours)
    if not contour_list:
        return
    index = 0
    edges = _edges_of(contour_list[index])
    edge = 0
    change = False
    clear = True
    for char in assignment:
        if char == ",":
            if change:
                edge += 1
            if clear:
                for remaining in edges[edge:]:
                    remaining.color = EdgeColor.WHITE
            index += 1
            edge = 0
            if index >= len(contour_list):
                return
            edges = _edges_of(contour_list[index])
            change = False
            clear = True
        elif char == "?":
            clear = False
        else:
            color = _COLORS.get(char.lower())
            if color is None:
                continue
            if change:
                edge += 1
                change = False
            if edge < len(edges):
                edges[edge].color = color
                change = True