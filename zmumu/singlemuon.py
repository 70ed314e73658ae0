"""Single-muon pt spectra of dimuon candidates in a mass window, without event cuts."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable

from zmumu.events import Event
from zmumu.histogram import Hist1D
from zmumu.spectra import PtSummary, summarize_pt
from zmumu.style import draw_hist1d, draw_text, format_axes, new_canvas

DEFAULT_MASS_LOW = 85.0
DEFAULT_MASS_HIGH = 95.0
_LABEL = "#it{partial} PbPb 2024 (5.36 TeV)"


def single_muon_spectra(events: Iterable[Event], mass_low=DEFAULT_MASS_LOW,
                        mass_high=DEFAULT_MASS_HIGH):
    """Histogram pt of mu+ and mu- for candidates with mass strictly inside (mass_low, mass_high)."""
    hist_plus = Hist1D(100, 0.0, 100.0)
    hist_minus = Hist1D(100, 0.0, 100.0)
    for event in events:
        for dimuon in event.dimuons:
            if mass_low < dimuon.m < mass_high:
                plus, minus = event.muon_pair(dimuon)
                hist_plus.fill(plus.pt)
                hist_minus.fill(minus.pt)
    return hist_plus, hist_minus


def _nint(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _text(fig, text, x, y, size):
    height_pt = fig.get_figheight() * 72
    return fig.text(x, y, text, fontsize=size * height_pt, ha="left", va="bottom",
                    transform=fig.transFigure)


def plot_single_muon(hist_plus: Hist1D, hist_minus: Hist1D, output="singleMuonTests.pdf",
                     mass_low=DEFAULT_MASS_LOW, mass_high=DEFAULT_MASS_HIGH
                     ) -> tuple[PtSummary, PtSummary]:
    """Overlay the filled mu+ and mu- pt spectra with peak lines; returns both summaries."""
    import matplotlib.pyplot as plt

    plus = summarize_pt(hist_plus)
    minus = summarize_pt(hist_minus)

    fig, ax = new_canvas(700, 600)
    fig.subplots_adjust(left=0.14, right=0.965, bottom=0.14, top=0.92)
    format_axes(ax, title_size=14)
    plus_art = draw_hist1d(ax, hist_plus, color="darkred", hatch="////")
    minus_art = draw_hist1d(ax, hist_minus, color="darkblue", hatch="\\\\\\\\")
    peak_art = []
    for summary, color in ((plus, "red"), (minus, "blue")):
        (line,) = ax.plot([summary.peak_position] * 2, [0.0, summary.peak_height],
                          color=color, linewidth=2, linestyle="--")
        peak_art.append(line)
    ax.set_xlabel(r"$p_{T}$ (GeV)")
    ax.set_ylabel(r"Number of Z$^{0}$ candidates (GeV)$^{-1}$")
    ax.set_xlim(10.0, 100.0)
    ax.set_ylim(bottom=0.0)

    draw_text(fig, "#bf{CMS}", 0.16, 0.93, 0.05)
    draw_text(fig, "#it{Internal}", 0.25, 0.93, 0.042)
    draw_text(fig, _LABEL, 0.55, 0.93, 0.042)
    _text(fig, rf"{_nint(mass_low)} < $m_{{\mu^{{+}}\mu^{{-}}}}$ < {_nint(mass_high)} GeV",
          0.54, 0.8, 0.042)

    ax.legend(
        handles=[plus_art[0], minus_art[0], peak_art[0], peak_art[1]],
        labels=[
            rf"$\langle p_{{T}}(\mu^{{+}}) \rangle$ = {plus.mean:.2f} $\pm$ {plus.mean_error:.2f}",
            rf"$\langle p_{{T}}(\mu^{{-}}) \rangle$ = {minus.mean:.2f} $\pm$ {minus.mean_error:.2f}",
            rf"$\mu^{{+}}$ peak = {plus.peak_position:.1f}",
            rf"$\mu^{{-}}$ peak = {minus.peak_position:.1f}",
        ],
        frameon=False, loc="center right", fontsize=0.042 * fig.get_figheight() * 72,
    )
    fig.savefig(Path(output))
    plt.close(fig)
    return plus, minus