"""Plot styling shared by the analysis figures."""

from __future__ import annotations

import re

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

_SYMBOLS = {
    "mu": r"\mu", "sigma": r"\sigma", "eta": r"\eta", "pm": r"\pm",
    "times": r"\times", "LT": r"\langle", "GT": r"\rangle",
}


def latex_to_mathtext(text):
    """Convert ROOT-style #-markup into matplotlib mathtext."""
    if "#" not in text and "_{" not in text and "^{" not in text:
        return text
    text = re.sub(r"#bf\{([^}]*)\}", r"$\\mathbf{\1}$", text)
    text = re.sub(r"#it\{([^}]*)\}", r"$\\mathit{\1}$", text)

    def symbol(match):
        name = match.group(1)
        return "$" + _SYMBOLS.get(name, "\\" + name) + "$"

    text = re.sub(r"#([A-Za-z]+)", symbol, text)
    text = re.sub(r"([A-Za-z0-9]+)?([_^])\{((?:[^{}]|\{[^{}]*\})*)\}",
                  lambda m: "$" + (m.group(1) or "") + m.group(2) + "{" + m.group(3) + "}$",
                  text)
    # merge adjacent math segments
    while "$$" in text:
        text = text.replace("$$", "")
    return text


def new_canvas(width=700, height=600):
    """A figure with the standard margins, ticks on all sides."""
    dpi = 100
    fig, ax = plt.subplots(figsize=(width / dpi, height / dpi), dpi=dpi)
    fig.subplots_adjust(left=0.12, right=0.965, bottom=0.12, top=0.92)
    ax.tick_params(which="both", direction="in", top=True, right=True)
    for spine in ax.spines.values():
        spine.set_linewidth(2)
    return fig, ax


def format_axes(ax, title_size=13, label_size=10):
    ax.xaxis.label.set_size(title_size)
    ax.yaxis.label.set_size(title_size)
    ax.tick_params(labelsize=label_size)
    ax.set_title("")
    return ax


def draw_text(fig, text="#bf{CMS}", x=0.15, y=0.93, size=0.05):
    """Place text at figure-normalised coordinates; size is a fraction of height."""
    height_pt = fig.get_figheight() * 72
    return fig.text(x, y, latex_to_mathtext(text), fontsize=size * height_pt,
                    ha="left", va="bottom", transform=fig.transFigure)


def draw_hist1d(ax, hist, color="C0", fill=False, hatch=None, errors=False):
    """Draw a Hist1D as a step outline, optionally filled and with error bars."""
    edges = hist.edges
    contents = hist.contents
    artists = [ax.stairs(contents, edges, color=color, linewidth=2)]
    if fill or hatch:
        artists.append(ax.stairs(contents, edges, fill=True, alpha=0.35,
                                 color=color, hatch=hatch))
    if errors:
        centers = [hist.bin_center(i) for i in range(1, hist.nbins + 1)]
        errs = [hist.bin_error(i) for i in range(1, hist.nbins + 1)]
        artists.append(ax.errorbar(centers, contents, yerr=errs, fmt="o",
                                   color=color, markersize=3))
    return artists