"""Transverse-momentum asymmetry between the two muons of Z candidates."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from zmumu.histogram import Hist1D
from zmumu.spectra import Selection, selected_pairs
from zmumu.style import draw_hist1d, draw_text, format_axes, new_canvas

ASYMMETRY_SELECTION = Selection(centrality_low=20, centrality_high=60)
DEFAULT_LABEL = "PbPb 2024 (5.36 TeV)"
_AZURE = "#3366ff"


def pt_asymmetry_value(pt_plus, pt_minus):
    """(pt+ - pt-) / (pt+ + pt-)."""
    total = pt_plus + pt_minus
    if total == 0:
        raise ValueError("asymmetry undefined when both transverse momenta sum to zero")
    return (pt_plus - pt_minus) / total


def asymmetry_histogram(events, selection=None):
    """Histogram the pt asymmetry of selected candidates in 100 bins over [-1, 1]."""
    if selection is None:
        selection = ASYMMETRY_SELECTION
    hist = Hist1D(100, -1.0, 1.0)
    for _, _, plus, minus in selected_pairs(events, selection):
        hist.fill(pt_asymmetry_value(plus.pt, minus.pt))
    return hist


@dataclass(frozen=True)
class AsymmetrySummary:
    """Mean of the asymmetry distribution and its error."""

    mean: float
    mean_error: float
    entries: int

    @property
    def mean_thousandths(self) -> float:
        return self.mean * 1e3

    @property
    def mean_error_thousandths(self) -> float:
        return self.mean_error * 1e3


def summarize_asymmetry(hist: Hist1D) -> AsymmetrySummary:
    return AsymmetrySummary(mean=hist.mean(), mean_error=hist.mean_error(),
                            entries=hist.entries)


def plot_asymmetry(hist: Hist1D, summary: AsymmetrySummary, output="pt_asymmetry.pdf"):
    """Draw the asymmetry distribution with a dashed line at zero; returns the output path."""
    import matplotlib.pyplot as plt

    fig, ax = new_canvas(700, 600)
    format_axes(ax)
    draw_hist1d(ax, hist, color=_AZURE, fill=True)
    ax.plot([0.0, 0.0], [hist.minimum(), hist.maximum()],
            color="red", linestyle="--", linewidth=1)
    ax.set_xlim(hist.axis.low, hist.axis.high)
    ax.set_ylim(bottom=0.0)
    ax.set_xlabel(r"$(p_{T}(\mu^{+}) - p_{T}(\mu^{-}))/(p_{T}(\mu^{+}) + p_{T}(\mu^{-}))$",
                  fontsize=0.04 * fig.get_figheight() * 72)
    ax.set_ylabel(r"Dimuon candidates [GeV$^{-1}$]")

    draw_text(fig)
    draw_text(fig, "#it{Internal}", 0.25, 0.93, 0.042)
    draw_text(fig, DEFAULT_LABEL, 0.65, 0.93, 0.042)
    draw_text(fig,
              f"Mean = ({summary.mean_thousandths:.2f} #pm "
              f"{summary.mean_error_thousandths:.2f}) #times 10^{{3}} GeV",
              0.16, 0.8, 0.036)
    draw_text(fig, "Cent. 10-30%", 0.2, 0.3, 0.044)

    path = Path(output)
    fig.savefig(path)
    plt.close(fig)
    return path