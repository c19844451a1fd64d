"""Reduced-precision colour histogram used by the median-cut quantizer."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

RGB = tuple[int, int, int]

SIGBITS = 5


class InvalidInputError(ValueError):
    """Raised when the quantizer is handed no pixels to work with."""


def color_index(r: int, g: int, b: int, sigbits: int = SIGBITS) -> int:
    """Interleave quantized channel values into a single histogram key."""

    return (r << (2 * sigbits)) + (g << sigbits) + b


class Histogram(Mapping[int, int]):
    """Read-only mapping of cell index to pixel count.

    Cells that were never hit are absent and read as zero through :meth:`at`.
    Instances are produced by :func:`build_histogram` and never change
    afterwards; every box cut from one quantization run shares the same one.
    """

    __slots__ = ("_counts", "sigbits", "rshift", "_bounds", "_total")

    def __init__(
        self,
        counts: Mapping[int, int],
        bounds: tuple[int, int, int, int, int, int],
        sigbits: int = SIGBITS,
    ) -> None:
        self._counts = dict(counts)
        self._total = sum(self._counts.values())
        self._bounds = bounds
        self.sigbits = sigbits
        self.rshift = 8 - sigbits

    def __getitem__(self, index: int) -> int:
        return self._counts[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def at(self, r: int, g: int, b: int) -> int:
        """Return the population of the quantized cell ``(r, g, b)``."""

        return self._counts.get(color_index(r, g, b, self.sigbits), 0)

    def quantize(self, pixel: Iterable[int]) -> RGB:
        """Map an 8-bit colour onto quantized coordinates."""

        r, g, b = pixel
        shift = self.rshift
        return r >> shift, g >> shift, b >> shift

    def bounds(self) -> tuple[int, int, int, int, int, int]:
        """Return ``(rmin, rmax, gmin, gmax, bmin, bmax)`` of the occupied cells."""

        return self._bounds

    @property
    def total(self) -> int:
        return self._total


def build_histogram(pixels: Iterable[Iterable[int]], sigbits: int = SIGBITS) -> Histogram:
    """Bin RGB triples into a ``2**sigbits`` cube.

    Raises:
        InvalidInputError: if ``pixels`` yields nothing.
    """

    shift = 8 - sigbits
    counts: dict[int, int] = {}
    rmin = gmin = bmin = 1 << sigbits
    rmax = gmax = bmax = -1
    for pixel in pixels:
        r, g, b = pixel
        rval, gval, bval = r >> shift, g >> shift, b >> shift
        index = color_index(rval, gval, bval, sigbits)
        counts[index] = counts.get(index, 0) + 1
        rmin, rmax = min(rmin, rval), max(rmax, rval)
        gmin, gmax = min(gmin, gval), max(gmax, gval)
        bmin, bmax = min(bmin, bval), max(bmax, bval)

    if not counts:
        raise InvalidInputError("Cannot build a histogram from an empty pixel sequence.")

    return Histogram(counts, (rmin, rmax, gmin, gmax, bmin, bmax), sigbits)
