"""Population-balanced box splitting (the "median cut")."""

from __future__ import annotations

import logging

from chromacut.quantize.histogram import Histogram
from chromacut.quantize.vbox import VBox

logger = logging.getLogger(__name__)


def _widest_axis(vbox: VBox) -> str:
    rw = vbox.r2 - vbox.r1 + 1
    gw = vbox.g2 - vbox.g1 + 1
    bw = vbox.b2 - vbox.b1 + 1
    maxw = max(rw, gw, bw)
    if maxw == rw:
        return "r"
    if maxw == gw:
        return "g"
    return "b"


def _slice_population(histogram: Histogram, vbox: VBox, axis: str, coord: int) -> int:
    """Sum the histogram over the plane ``axis == coord`` clipped to ``vbox``."""

    at = histogram.at
    if axis == "r":
        return sum(
            at(coord, g, b)
            for g in range(vbox.g1, vbox.g2 + 1)
            for b in range(vbox.b1, vbox.b2 + 1)
        )
    if axis == "g":
        return sum(
            at(r, coord, b)
            for r in range(vbox.r1, vbox.r2 + 1)
            for b in range(vbox.b1, vbox.b2 + 1)
        )
    return sum(
        at(r, g, coord)
        for r in range(vbox.r1, vbox.r2 + 1)
        for g in range(vbox.g1, vbox.g2 + 1)
    )


def partial_sums(histogram: Histogram, vbox: VBox, axis: str) -> tuple[dict[int, int], int]:
    """Return cumulative populations along ``axis`` keyed by coordinate, and the total."""

    low, high = vbox.axis_bounds(axis)
    total = 0
    partial: dict[int, int] = {}
    for coord in range(low, high + 1):
        total += _slice_population(histogram, vbox, axis, coord)
        partial[coord] = total
    return partial, total


def median_cut_apply(histogram: Histogram, vbox: VBox) -> list[VBox]:
    """Split ``vbox`` along its widest axis at the population midpoint.

    Returns no boxes when the box is empty or every cut would leave the upper
    half without cells, a single copy for a lone pixel, and otherwise the two
    halves.
    """

    count = vbox.count()
    if not count:
        return []
    if count == 1:
        return [vbox.copy()]

    axis = _widest_axis(vbox)
    low, high = vbox.axis_bounds(axis)
    partial, total = partial_sums(histogram, vbox, axis)
    lookahead = {coord: total - value for coord, value in partial.items()}

    for i in range(low, high + 1):
        if partial[i] <= total / 2:
            continue

        left = i - low
        right = high - i
        if left <= right:
            d2 = min(high - 1, int(i + right / 2))
        else:
            d2 = max(low, int(i - 1 - left / 2))

        # first child must hold population, then pull back if the second would be empty
        while not partial.get(d2, 0):
            d2 += 1
        count2 = lookahead[d2]
        while not count2 and partial.get(d2 - 1, 0):
            d2 -= 1
            count2 = lookahead[d2]

        if d2 >= high:
            # Every cut would leave the upper half without cells.
            return []

        logger.debug("Cutting %r on %s at %d", vbox, axis, d2)
        return [vbox.with_bounds(axis, low, d2), vbox.with_bounds(axis, d2 + 1, high)]

    return []
