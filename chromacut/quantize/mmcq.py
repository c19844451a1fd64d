"""Modified median-cut quantization (MMCQ).

The occupied part of the quantized RGB cube is grown into a set of boxes in
two phases. The first phase always splits the most populated box until three
quarters of the requested colours exist; the second re-ranks the boxes by
``count * volume`` so that large, sparsely populated regions also get cut.
Each surviving box contributes its average colour to the palette.

The result is not guaranteed to hold exactly ``max_colors`` entries; it can be
off by a couple of colours either way.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from chromacut.quantize.cmap import ColorMap
from chromacut.quantize.histogram import SIGBITS, Histogram, build_histogram
from chromacut.quantize.median_cut import median_cut_apply
from chromacut.quantize.pqueue import PriorityQueue
from chromacut.quantize.vbox import VBox

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 1000
FRACT_BY_POPULATIONS = 0.75
MIN_COLORS = 2
MAX_COLORS = 256


def _by_count(vbox: VBox) -> int:
    return vbox.count()


def _by_count_and_volume(vbox: VBox) -> int:
    return vbox.count() * vbox.volume()


def iterate(
    queue: PriorityQueue[VBox],
    histogram: Histogram,
    target: int,
    max_iterations: int = MAX_ITERATIONS,
) -> int:
    """Split boxes off ``queue`` until ``target`` boxes were produced.

    Returns the number of boxes produced, counting the one the queue started
    with. Stops early when a box yields no children, leaving that box on the
    queue, and never runs more than ``max_iterations`` rounds.
    """

    ncolors = 1
    niters = 0
    while niters < max_iterations:
        vbox = queue.pop()
        if not vbox.count():
            # nothing to cut; put it back and burn an iteration
            queue.push(vbox)
            niters += 1
            continue

        children = median_cut_apply(histogram, vbox)
        if not children:
            queue.push(vbox)
            return ncolors

        queue.push(children[0])
        if len(children) > 1:
            queue.push(children[1])
            ncolors += 1
        if ncolors >= target:
            return ncolors

        niters += 1
    return ncolors


def quantize(
    pixels: Sequence[Sequence[int]],
    max_colors: int,
    *,
    sigbits: int = SIGBITS,
    max_iterations: int = MAX_ITERATIONS,
) -> ColorMap | None:
    """Reduce ``pixels`` to at most roughly ``max_colors`` representative colours.

    Returns ``None`` when there is nothing to quantize or ``max_colors`` lies
    outside ``[2, 256]``.
    """

    if not pixels or max_colors < MIN_COLORS or max_colors > MAX_COLORS:
        return None

    histogram = build_histogram(pixels, sigbits)
    logger.debug("Histogram holds %d occupied cells for %d pixels", len(histogram), len(pixels))

    pq: PriorityQueue[VBox] = PriorityQueue(key=_by_count)
    pq.push(VBox.from_histogram(histogram))

    produced = iterate(pq, histogram, math.floor(FRACT_BY_POPULATIONS * max_colors), max_iterations)
    logger.debug("Population phase produced %d boxes", produced)

    pq2: PriorityQueue[VBox] = PriorityQueue(key=_by_count_and_volume)
    while pq.size():
        pq2.push(pq.pop())

    produced = iterate(pq2, histogram, max_colors - pq2.size(), max_iterations)
    logger.debug("Volume phase produced %d boxes", produced)

    cmap = ColorMap()
    while pq2.size():
        cmap.push(pq2.pop())
    return cmap
