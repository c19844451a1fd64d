"""Median-cut colour quantization engine."""

from .cmap import ColorMap, ColorMapEntry
from .histogram import Histogram, InvalidInputError, build_histogram, color_index
from .median_cut import median_cut_apply
from .mmcq import iterate, quantize
from .pqueue import PriorityQueue
from .vbox import VBox

__all__ = [
    "ColorMap",
    "ColorMapEntry",
    "Histogram",
    "InvalidInputError",
    "PriorityQueue",
    "VBox",
    "build_histogram",
    "color_index",
    "iterate",
    "median_cut_apply",
    "quantize",
]
