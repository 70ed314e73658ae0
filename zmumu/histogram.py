"""Fixed-bin histograms and profiles with under/overflow bins."""

from __future__ import annotations

import math

import numpy as np


class _Axis:
    def __init__(self, nbins: int, low: float, high: float) -> None:
        if nbins <= 0:
            raise ValueError("number of bins must be positive")
        if not high > low:
            raise ValueError("upper edge must exceed lower edge")
        self.nbins = int(nbins)
        self.low = float(low)
        self.high = float(high)
        self.width = (self.high - self.low) / self.nbins

    def find_bin(self, x: float) -> int:
        """Bin index; 0 is underflow, nbins + 1 is overflow."""
        if x < self.low:
            return 0
        if x >= self.high:
            return self.nbins + 1
        return min(int((x - self.low) / self.width) + 1, self.nbins)

    def center(self, index: int) -> float:
        return self.low + (index - 0.5) * self.width


class Hist1D:
    """One-dimensional histogram with weighted filling and summary statistics."""

    def __init__(self, nbins, low, high):
        self.axis = _Axis(nbins, low, high)
        n = self.axis.nbins + 2
        self._sumw = np.zeros(n)
        self._sumw2 = np.zeros(n)
        self._tsumw = 0.0
        self._tsumw2 = 0.0
        self._tsumwx = 0.0
        self._tsumwx2 = 0.0
        self.entries = 0
        self._range = (1, self.axis.nbins)

    @property
    def nbins(self) -> int:
        return self.axis.nbins

    def fill(self, x, weight=1.0):
        """Add one entry; returns the bin it fell into."""
        index = self.axis.find_bin(x)
        self._sumw[index] += weight
        self._sumw2[index] += weight * weight
        self.entries += 1
        if 1 <= index <= self.nbins:
            self._tsumw += weight
            self._tsumw2 += weight * weight
            self._tsumwx += weight * x
            self._tsumwx2 += weight * x * x
        return index

    def find_bin(self, x):
        return self.axis.find_bin(x)

    def bin_center(self, index):
        return self.axis.center(index)

    def bin_width(self, index):
        return self.axis.width

    def bin_content(self, index):
        return float(self._sumw[index])

    def bin_error(self, index):
        return math.sqrt(self._sumw2[index])

    def integral_and_error(self, first=1, last=None):
        """Sum of bin contents from first to last inclusive, and its error."""
        if last is None:
            last = self.nbins
        first = max(first, 0)
        last = min(last, self.nbins + 1)
        if last < first:
            return 0.0, 0.0
        total = float(self._sumw[first:last + 1].sum())
        error = math.sqrt(float(self._sumw2[first:last + 1].sum()))
        return total, error

    def set_range(self, low, high):
        """Restrict the bins used for statistics to those covering [low, high]."""
        first = max(self.find_bin(low), 1)
        last = min(self.find_bin(high), self.nbins)
        if last < first:
            first, last = 1, self.nbins
        self._range = (first, last)

    def _full_range(self) -> bool:
        return self._range == (1, self.nbins)

    def _moments(self):
        if self._full_range():
            return self._tsumw, self._tsumw2, self._tsumwx, self._tsumwx2
        first, last = self._range
        idx = np.arange(first, last + 1)
        w = self._sumw[idx]
        x = np.array([self.bin_center(i) for i in idx])
        return (float(w.sum()), float(self._sumw2[idx].sum()),
                float((w * x).sum()), float((w * x * x).sum()))

    def mean(self):
        sw, _, swx, _ = self._moments()
        return swx / sw if sw else 0.0

    def std_dev(self):
        sw, _, swx, swx2 = self._moments()
        if not sw:
            return 0.0
        m = swx / sw
        return math.sqrt(max(swx2 / sw - m * m, 0.0))

    def _effective_entries(self) -> float:
        sw, sw2, _, _ = self._moments()
        return sw * sw / sw2 if sw2 else 0.0

    def mean_error(self):
        neff = self._effective_entries()
        return self.std_dev() / math.sqrt(neff) if neff else 0.0

    def std_dev_error(self):
        neff = self._effective_entries()
        return self.std_dev() / math.sqrt(2.0 * neff) if neff else 0.0

    def _visible(self):
        first, last = self._range
        return self._sumw[first:last + 1], first

    def maximum_bin(self):
        values, first = self._visible()
        return int(np.argmax(values)) + first

    def maximum(self):
        values, _ = self._visible()
        return float(values.max())

    def minimum(self):
        values, _ = self._visible()
        return float(values.min())

    def scale(self, factor):
        """Multiply contents and errors by factor; shape statistics are kept."""
        self._sumw *= factor
        self._sumw2 *= factor * factor
        self._tsumw *= factor
        self._tsumw2 *= factor * factor
        self._tsumwx *= factor
        self._tsumwx2 *= factor

    @property
    def contents(self) -> np.ndarray:
        """Contents of the regular bins."""
        return self._sumw[1:self.nbins + 1].copy()

    @property
    def edges(self) -> np.ndarray:
        return np.linspace(self.axis.low, self.axis.high, self.nbins + 1)


class Hist2D:
    """Two-dimensional histogram."""

    def __init__(self, nx, xlow, xhigh, ny, ylow, yhigh):
        self.xaxis = _Axis(nx, xlow, xhigh)
        self.yaxis = _Axis(ny, ylow, yhigh)
        self._sumw = np.zeros((nx + 2, ny + 2))
        self._sumw2 = np.zeros((nx + 2, ny + 2))
        self._points: list[tuple[float, float, float]] = []
        self.entries = 0

    def fill(self, x, y, weight=1.0):
        ix = self.xaxis.find_bin(x)
        iy = self.yaxis.find_bin(y)
        self._sumw[ix, iy] += weight
        self._sumw2[ix, iy] += weight * weight
        self._points.append((x, y, weight))
        self.entries += 1
        return ix, iy

    def bin_content(self, ix, iy):
        return float(self._sumw[ix, iy])

    def _project(self, axis: _Axis, coord: int, other: _Axis) -> Hist1D:
        hist = Hist1D(axis.nbins, axis.low, axis.high)
        for point in self._points:
            if 1 <= other.find_bin(point[1 - coord]) <= other.nbins:
                hist.fill(point[coord], point[2])
        return hist

    def projection_x(self):
        """Projection onto x using all in-range y bins."""
        return self._project(self.xaxis, 0, self.yaxis)

    def projection_y(self):
        """Projection onto y using all in-range x bins."""
        return self._project(self.yaxis, 1, self.xaxis)

    @property
    def contents(self) -> np.ndarray:
        return self._sumw[1:self.xaxis.nbins + 1, 1:self.yaxis.nbins + 1].copy()


class Profile:
    """Mean of y in bins of x, with the error on the mean."""

    def __init__(self, nbins, low, high):
        self.axis = _Axis(nbins, low, high)
        n = self.axis.nbins + 2
        self._sumw = np.zeros(n)
        self._sumwy = np.zeros(n)
        self._sumwy2 = np.zeros(n)
        self._sumw2 = np.zeros(n)
        self._count = np.zeros(n, dtype=int)

    def fill(self, x, y, weight=1.0):
        index = self.axis.find_bin(x)
        self._sumw[index] += weight
        self._sumw2[index] += weight * weight
        self._sumwy[index] += weight * y
        self._sumwy2[index] += weight * y * y
        self._count[index] += 1
        return index

    def bin_entries(self, index):
        return float(self._sumw[index])

    def bin_mean(self, index):
        sw = self._sumw[index]
        return float(self._sumwy[index] / sw) if sw else 0.0

    def bin_error(self, index):
        sw = self._sumw[index]
        if not sw:
            return 0.0
        m = self._sumwy[index] / sw
        spread = math.sqrt(max(self._sumwy2[index] / sw - m * m, 0.0))
        neff = sw * sw / self._sumw2[index]
        return spread / math.sqrt(neff)

    @property
    def nbins(self) -> int:
        return self.axis.nbins