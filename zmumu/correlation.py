"""Correlation of the transverse momenta of the two muons in Z candidates."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import numpy as np

from zmumu.events import Event
from zmumu.histogram import Hist1D, Hist2D, Profile
from zmumu.style import draw_hist1d, draw_text, format_axes, latex_to_mathtext, new_canvas

DEFAULT_WINDOW = (85.0, 95.0)


@dataclass(frozen=True)
class Peak:
    """Location and height of the most populated bin."""

    bin: int
    position: float
    height: float
    error: float


def _in_window(mass: float, window) -> bool:
    if window is None:
        return True
    low, high = window
    return low < mass < high


def _pairs(events: Iterable[Event], mass_window):
    for event in events:
        for dimuon in event.dimuons:
            if _in_window(dimuon.m, mass_window):
                plus, minus = event.muon_pair(dimuon)
                yield plus.pt, minus.pt


def fill_pt_correlation(events, nbins=100, high=100.0, mass_window=DEFAULT_WINDOW):
    """Histogram pt(mu+) against pt(mu-) for candidates inside the mass window (None: no cut)."""
    hist = Hist2D(nbins, 0.0, high, nbins, 0.0, high)
    for pt_plus, pt_minus in _pairs(events, mass_window):
        hist.fill(pt_plus, pt_minus)
    return hist


def pt_correlation_profile(events, nbins=100, high=100.0, mass_window=DEFAULT_WINDOW):
    """Return the 2D correlation histogram and the profile of pt(mu-) in bins of pt(mu+)."""
    hist = Hist2D(nbins, 0.0, high, nbins, 0.0, high)
    profile = Profile(nbins, 0.0, high)
    for pt_plus, pt_minus in _pairs(events, mass_window):
        hist.fill(pt_plus, pt_minus)
        profile.fill(pt_plus, pt_minus)
    return hist, profile


def peak_summary(hist: Hist1D) -> Peak:
    index = hist.maximum_bin()
    return Peak(index, hist.bin_center(index), hist.maximum(), hist.bin_error(index))


def _format_2d(fig, ax, high):
    fig.set_size_inches(9.0, 7.0)
    fig.subplots_adjust(left=0.11, right=0.9, bottom=0.11, top=0.92)
    format_axes(ax)
    ax.set_xlabel(latex_to_mathtext("p_{T}(#mu^{+}) [GeV]"))
    ax.set_ylabel(latex_to_mathtext("p_{T}(#mu^{-}) [GeV]"))
    ax.set_xlim(10.0, high)
    ax.set_ylim(10.0, high)


def plot_pt_correlation(hist: Hist2D, profile: Profile | None = None, output="output.png"):
    """Draw the correlation as a colour map, with the profile overlaid if given."""
    import matplotlib.pyplot as plt

    fig, ax = new_canvas(900, 700)
    xedges = np.linspace(hist.xaxis.low, hist.xaxis.high, hist.xaxis.nbins + 1)
    yedges = np.linspace(hist.yaxis.low, hist.yaxis.high, hist.yaxis.nbins + 1)
    contents = np.ma.masked_equal(hist.contents.T, 0.0)
    mesh = ax.pcolormesh(xedges, yedges, contents, cmap="viridis")
    bar = fig.colorbar(mesh, ax=ax)
    bar.set_label("Entries")
    if profile is not None:
        filled = [i for i in range(1, profile.nbins + 1) if profile.bin_entries(i) > 0]
        ax.errorbar([profile.axis.center(i) for i in filled],
                    [profile.bin_mean(i) for i in filled],
                    yerr=[profile.bin_error(i) for i in filled],
                    fmt="o", color="black", markersize=3)
    _format_2d(fig, ax, hist.xaxis.high)
    path = Path(output)
    fig.savefig(path)
    plt.close(fig)
    return path


def plot_pt_projections(hist: Hist2D, output="output3.png"):
    """Draw the pt(mu+) and pt(mu-) projections with their peaks; returns both peaks."""
    import matplotlib.pyplot as plt

    hist_plus = hist.projection_x()
    hist_minus = hist.projection_y()
    peak_plus = peak_summary(hist_plus)
    peak_minus = peak_summary(hist_minus)

    fig, ax = new_canvas(900, 700)
    fig.subplots_adjust(left=0.11, right=0.96, bottom=0.11, top=0.92)
    format_axes(ax)
    plus_art = draw_hist1d(ax, hist_plus, color="red", errors=True)
    minus_art = draw_hist1d(ax, hist_minus, color="blue", errors=True)
    for peak, color in ((peak_plus, "red"), (peak_minus, "blue")):
        ax.plot([peak.position, peak.position], [0.0, peak.height],
                color=color, linewidth=2, linestyle="--")
    ax.set_xlabel(latex_to_mathtext("p_{T} [GeV]"))
    ax.set_ylabel(latex_to_mathtext("Reco Z^{0} candidates"))
    ax.set_xlim(hist_plus.axis.low, hist_plus.axis.high)
    ax.set_ylim(bottom=0.0)
    ax.legend(
        handles=[plus_art[0], minus_art[0]],
        labels=[
            latex_to_mathtext(f"#mu^{{+}} peak = {peak_plus.position:.1f} #pm {peak_plus.error:.1f}"),
            latex_to_mathtext(f"#mu^{{-}} peak = {peak_minus.position:.1f} #pm {peak_minus.error:.1f}"),
        ],
        frameon=False, loc="upper right",
    )
    draw_text(fig, "#bf{CMS} #it{Internal}", 0.12, 0.93, 0.04)
    draw_text(fig, "85 < m_{#mu^{+}#mu^{-}} < 95 GeV", 0.62, 0.55, 0.04)
    draw_text(fig, "Partial PbPb 2024", 0.7, 0.93, 0.04)
    fig.savefig(Path(output))
    plt.close(fig)
    return peak_plus, peak_minus