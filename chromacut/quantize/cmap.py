"""Final colour map produced by the quantizer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from chromacut.quantize.histogram import RGB
from chromacut.quantize.pqueue import PriorityQueue
from chromacut.quantize.vbox import VBox


@dataclass(slots=True)
class ColorMapEntry:
    """A surviving box together with its representative colour."""

    vbox: VBox
    color: RGB


def _weight(entry: ColorMapEntry) -> int:
    return entry.vbox.count() * entry.vbox.volume()


class ColorMap:
    """Boxes and average colours kept ascending by ``count * volume``.

    The palette is reported in that ascending order; the first colour is not
    guaranteed to be the most dominant one.
    """

    def __init__(self) -> None:
        self.vboxes: PriorityQueue[ColorMapEntry] = PriorityQueue(key=_weight)

    def push(self, vbox: VBox) -> None:
        self.vboxes.push(ColorMapEntry(vbox=vbox, color=vbox.average()))

    def palette(self) -> list[RGB]:
        return self.vboxes.map(lambda entry: entry.color)

    def size(self) -> int:
        return self.vboxes.size()

    def __len__(self) -> int:
        return self.vboxes.size()

    def map_to_palette(self, color: Iterable[int]) -> RGB | None:
        """Return the colour of the first box containing ``color``.

        Falls back to :meth:`nearest` when no box covers it.
        """

        color = tuple(color)
        for entry in self.vboxes:
            if entry.vbox.contains(color):
                return entry.color
        return self.nearest(color)

    def nearest(self, color: Iterable[int]) -> RGB | None:
        """Return the palette colour closest to ``color`` in Euclidean RGB."""

        color = tuple(color)
        best: RGB | None = None
        best_distance: float | None = None
        for entry in self.vboxes:
            distance = math.dist(color, entry.color)
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best = entry.color
        return best
