"""Z candidate selection, dimuon invariant-mass spectrum and single-muon pt spectra."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from zmumu.events import Dimuon, Event, Muon
from zmumu.histogram import Hist1D
from zmumu.style import draw_hist1d, draw_text, format_axes, new_canvas

DEFAULT_LABEL = "PbPb 2024 (5.36 TeV)"
_ORANGE = "#ff6600"


@dataclass(frozen=True)
class Selection:
    """Event and candidate cuts for Z -> mu+ mu- candidates.

    Centrality is in half-percent units and must lie in (centrality_low, centrality_high].
    Unless ``tight_both`` is set, only the positive muon's tight flag is checked.
    """

    max_abs_z: float = 15.0
    centrality_low: int = 60
    centrality_high: int = 140
    mass_low: float = 80.0
    mass_high: float = 100.0
    min_pt: float = 20.0
    max_abs_eta: float = 2.4
    require_tight: bool = True
    tight_both: bool = False

    def good_event(self, event: Event) -> bool:
        return (abs(event.z_vertex) < self.max_abs_z
                and self.centrality_low < event.centrality <= self.centrality_high)

    def _good_muon(self, muon: Muon, tight: bool) -> bool:
        return (muon.pt >= self.min_pt
                and abs(muon.eta) < self.max_abs_eta
                and (tight or not self.require_tight))

    def good_pair(self, event: Event, dimuon: Dimuon) -> bool:
        """Whether a candidate passes the mass window and both muon cuts."""
        if not self.mass_low <= dimuon.m <= self.mass_high:
            return False
        plus, minus = event.muon_pair(dimuon)
        minus_tight = minus.tight if self.tight_both else plus.tight
        return self._good_muon(plus, plus.tight) and self._good_muon(minus, minus_tight)


def selected_pairs(events: Iterable[Event], selection: Selection | None = None
                   ) -> Iterator[tuple[Event, Dimuon, Muon, Muon]]:
    """Yield (event, candidate, mu+, mu-) for every candidate passing the selection."""
    selection = selection if selection is not None else Selection()
    for event in events:
        if not selection.good_event(event):
            continue
        for dimuon in event.dimuons:
            if selection.good_pair(event, dimuon):
                plus, minus = event.muon_pair(dimuon)
                yield event, dimuon, plus, minus


def inv_mass_histogram(events, selection=None, nbins=40, low=70, high=110):
    """Histogram the invariant mass of selected candidates."""
    hist = Hist1D(nbins, low, high)
    for _, dimuon, _, _ in selected_pairs(events, selection):
        hist.fill(dimuon.m)
    return hist


@dataclass(frozen=True)
class MassSummary:
    z_yield: float
    yield_error: float
    mean: float
    mean_error: float
    std_dev: float
    std_dev_error: float
    window_low: float
    window_high: float


def summarize_mass(hist: Hist1D, window_low=80.0, window_high=100.0, delta=1e-5):
    """Yield, mean and width of the spectrum inside the mass window."""
    hist.set_range(window_low, window_high)
    try:
        first = hist.find_bin(window_low + delta)
        last = hist.find_bin(window_high - delta)
        z_yield, yield_error = hist.integral_and_error(first, last)
        return MassSummary(
            z_yield=z_yield,
            yield_error=yield_error,
            mean=hist.mean(),
            mean_error=hist.mean_error(),
            std_dev=hist.std_dev(),
            std_dev_error=hist.std_dev_error(),
            window_low=float(window_low),
            window_high=float(window_high),
        )
    finally:
        hist.set_range(hist.axis.low, hist.axis.high)


def _nint(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _text(fig, text, x, y, size):
    height_pt = fig.get_figheight() * 72
    return fig.text(x, y, text, fontsize=size * height_pt, ha="left", va="bottom",
                    transform=fig.transFigure)


def _header(fig, label):
    draw_text(fig)
    draw_text(fig, "#it{Internal}", 0.25, 0.93, 0.042)
    draw_text(fig, label, 0.65, 0.93, 0.042)


def plot_inv_mass(hist: Hist1D, summary: MassSummary, output="invMassSpectrum.pdf",
                  label=DEFAULT_LABEL):
    """Draw the mass spectrum in thousands of candidates with its summary; the input is not changed."""
    import matplotlib.pyplot as plt

    scaled = copy.deepcopy(hist)
    scaled.scale(1e-3)
    fig, ax = new_canvas(700, 600)
    format_axes(ax)
    draw_hist1d(ax, scaled, color=_ORANGE, hatch="\\\\\\\\", errors=True)
    ax.set_xlim(hist.axis.low, hist.axis.high)
    ax.set_ylim(bottom=0.0)
    ax.set_xlabel(r"$m_{\mu^{+}\mu^{-}}$ [GeV]")
    ax.set_ylabel(r"Dimuon candidates [GeV$^{-1}$]")

    _header(fig, label)
    draw_text(fig, "#times 10^{3}", 0.08, 0.93, 0.042)
    _text(fig, rf"Z yield = {_nint(summary.z_yield)} $\pm$ {_nint(summary.yield_error)}",
          0.17, 0.8, 0.04)
    _text(fig, rf"$m_{{\mu^{{+}}\mu^{{-}}}}$ = ({summary.mean:.2f} $\pm$ "
               rf"{summary.mean_error:.2f}) GeV", 0.17, 0.74, 0.04)
    _text(fig, rf"$\sigma_{{m_{{\mu^{{+}}\mu^{{-}}}}}}$ = ({summary.std_dev:.2f} $\pm$ "
               rf"{summary.std_dev_error:.2f}) GeV", 0.17, 0.68, 0.04)
    _text(fig, rf"{_nint(summary.window_low)} < $m_{{\mu^{{+}}\mu^{{-}}}}$ < "
               rf"{_nint(summary.window_high)} GeV", 0.62, 0.78, 0.04)
    _text(fig, "Cent. 30-70%", 0.2, 0.3, 0.044)

    path = Path(output)
    fig.savefig(path)
    plt.close(fig)
    return path


def pt_spectra(events, selection=None):
    """Histogram pt of the positive and negative muon of selected candidates."""
    if selection is None:
        selection = Selection(centrality_high=180)
    hist_plus = Hist1D(100, 0.0, 100.0)
    hist_minus = Hist1D(100, 0.0, 100.0)
    for _, _, plus, minus in selected_pairs(events, selection):
        hist_plus.fill(plus.pt)
        hist_minus.fill(minus.pt)
    return hist_plus, hist_minus


@dataclass(frozen=True)
class PtSummary:
    muon_yield: float
    yield_error: float
    mean: float
    mean_error: float
    std_dev: float
    std_dev_error: float
    peak_bin: int
    peak_position: float
    peak_half_width: float
    peak_height: float


def summarize_pt(hist: Hist1D) -> PtSummary:
    muon_yield, yield_error = hist.integral_and_error(1, hist.nbins)
    peak = hist.maximum_bin()
    return PtSummary(
        muon_yield=muon_yield,
        yield_error=yield_error,
        mean=hist.mean(),
        mean_error=hist.mean_error(),
        std_dev=hist.std_dev(),
        std_dev_error=hist.std_dev_error(),
        peak_bin=peak,
        peak_position=hist.bin_center(peak),
        peak_half_width=hist.bin_width(peak) / 2.0,
        peak_height=hist.maximum(),
    )


def plot_pt_spectra(hist_plus: Hist1D, hist_minus: Hist1D,
                    output="pt_spectrum_muPLmuMI.pdf", label=DEFAULT_LABEL):
    """Overlay the mu+ and mu- pt spectra with their peaks; returns both summaries."""
    import matplotlib.pyplot as plt

    plus = summarize_pt(hist_plus)
    minus = summarize_pt(hist_minus)

    fig, ax = new_canvas(700, 600)
    format_axes(ax)
    plus_art = draw_hist1d(ax, hist_plus, color="darkred")
    minus_art = draw_hist1d(ax, hist_minus, color="darkblue")
    peak_art = []
    for summary, color in ((plus, "red"), (minus, "blue")):
        (line,) = ax.plot([summary.peak_position] * 2, [0.0, summary.peak_height],
                          color=color, linewidth=2, linestyle="--")
        peak_art.append(line)
    ax.set_xlabel(r"$p_{T}$ [GeV]")
    ax.set_ylabel(r"Number of Z$^{0}$ candidates [GeV$^{-1}$]")
    ax.set_xlim(10.0, 100.0)
    ax.set_ylim(0.0, plus.peak_height + 60.0)

    _header(fig, label)
    draw_text(fig, "Cent. 30-90%", 0.65, 0.35, 0.044)
    ax.legend(
        handles=[plus_art[0], minus_art[0], peak_art[0], peak_art[1]],
        labels=[
            rf"$\langle p_{{T}}(\mu^{{+}}) \rangle$ = ({plus.mean:.2f} $\pm$ "
            rf"{plus.mean_error:.2f}) GeV",
            rf"$\langle p_{{T}}(\mu^{{-}}) \rangle$ = ({minus.mean:.2f} $\pm$ "
            rf"{minus.mean_error:.2f}) GeV",
            rf"$p_{{T}}(\mu^{{+}})$ peak = ({plus.peak_position:.1f} $\pm$ "
            rf"{plus.peak_half_width:.1f}) GeV",
            rf"$p_{{T}}(\mu^{{-}})$ peak = ({minus.peak_position:.1f} $\pm$ "
            rf"{minus.peak_half_width:.1f}) GeV",
        ],
        frameon=False, loc="upper right", fontsize=0.038 * fig.get_figheight() * 72,
    )
    fig.savefig(Path(output))
    plt.close(fig)
    return plus, minus