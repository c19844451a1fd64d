"""Axis-aligned boxes in quantized RGB space."""

from __future__ import annotations

from typing import Iterable

from chromacut.quantize.histogram import RGB, Histogram

AXES = ("r", "g", "b")


class VBox:
    """A ``[r1, r2] x [g1, g2] x [b1, b2]`` region of the quantized colour cube.

    ``count``, ``volume`` and ``average`` are computed on first access and
    memoized; pass ``force=True`` to recompute them.
    """

    __slots__ = ("r1", "r2", "g1", "g2", "b1", "b2", "histogram", "_volume", "_count", "_average")

    def __init__(
        self,
        r1: int,
        r2: int,
        g1: int,
        g2: int,
        b1: int,
        b2: int,
        histogram: Histogram,
    ) -> None:
        if r1 > r2 or g1 > g2 or b1 > b2:
            raise ValueError(f"Inverted box bounds: r[{r1},{r2}] g[{g1},{g2}] b[{b1},{b2}]")
        self.r1, self.r2 = r1, r2
        self.g1, self.g2 = g1, g2
        self.b1, self.b2 = b1, b2
        self.histogram = histogram
        self._volume: int | None = None
        self._count: int | None = None
        self._average: RGB | None = None

    @classmethod
    def from_histogram(cls, histogram: Histogram) -> VBox:
        """Build the root box spanning every occupied cell of ``histogram``."""

        return cls(*histogram.bounds(), histogram)

    def __repr__(self) -> str:
        return (
            f"VBox(r=[{self.r1},{self.r2}], g=[{self.g1},{self.g2}], "
            f"b=[{self.b1},{self.b2}])"
        )

    def _cells(self) -> Iterable[tuple[int, int, int]]:
        for r in range(self.r1, self.r2 + 1):
            for g in range(self.g1, self.g2 + 1):
                for b in range(self.b1, self.b2 + 1):
                    yield r, g, b

    def volume(self, force: bool = False) -> int:
        if self._volume is None or force:
            self._volume = (
                (self.r2 - self.r1 + 1)
                * (self.g2 - self.g1 + 1)
                * (self.b2 - self.b1 + 1)
            )
        return self._volume

    def count(self, force: bool = False) -> int:
        if self._count is None or force:
            at = self.histogram.at
            self._count = sum(at(r, g, b) for r, g, b in self._cells())
        return self._count

    def average(self, force: bool = False) -> RGB:
        """Return the population-weighted mean colour scaled back to 8 bits.

        An empty box has no population to weigh, so its geometric midpoint is
        returned instead.
        """

        if self._average is None or force:
            mult = 1 << self.histogram.rshift
            total = rsum = gsum = bsum = 0.0
            at = self.histogram.at
            for r, g, b in self._cells():
                hval = at(r, g, b)
                if not hval:
                    continue
                total += hval
                rsum += hval * (r + 0.5) * mult
                gsum += hval * (g + 0.5) * mult
                bsum += hval * (b + 0.5) * mult

            if total:
                self._average = (int(rsum / total), int(gsum / total), int(bsum / total))
            else:
                self._average = (
                    int(mult * (self.r1 + self.r2 + 1) / 2),
                    int(mult * (self.g1 + self.g2 + 1) / 2),
                    int(mult * (self.b1 + self.b2 + 1) / 2),
                )
        return self._average

    def copy(self) -> VBox:
        """Return an independent box with the same bounds and histogram."""

        clone = VBox(self.r1, self.r2, self.g1, self.g2, self.b1, self.b2, self.histogram)
        clone._volume = self._volume
        clone._count = self._count
        clone._average = self._average
        return clone

    def axis_bounds(self, axis: str) -> tuple[int, int]:
        return getattr(self, f"{axis}1"), getattr(self, f"{axis}2")

    def with_bounds(self, axis: str, low: int, high: int) -> VBox:
        """Return a fresh box whose range along ``axis`` is ``[low, high]``."""

        if axis not in AXES:
            raise ValueError(f"Unknown axis {axis!r}")
        bounds = {
            "r1": self.r1, "r2": self.r2,
            "g1": self.g1, "g2": self.g2,
            "b1": self.b1, "b2": self.b2,
        }
        bounds[f"{axis}1"] = low
        bounds[f"{axis}2"] = high
        return VBox(histogram=self.histogram, **bounds)

    def contains(self, pixel: Iterable[int]) -> bool:
        """Return ``True`` when the 8-bit ``pixel`` falls inside this box."""

        rval, gval, bval = self.histogram.quantize(pixel)
        return (
            self.r1 <= rval <= self.r2
            and self.g1 <= gval <= self.g2
            and self.b1 <= bval <= self.b2
        )
