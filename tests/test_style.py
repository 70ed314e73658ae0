import matplotlib.pyplot as plt
import pytest

from zmumu.histogram import Hist1D
from zmumu.style import draw_hist1d, draw_text, format_axes, latex_to_mathtext, new_canvas


def test_plain_text_unchanged():
    assert latex_to_mathtext("PbPb 2024 (5.36 TeV)") == "PbPb 2024 (5.36 TeV)"


def test_bold_markup():
    assert latex_to_mathtext("#bf{CMS}") == r"$\mathbf{CMS}$"


def test_symbols_converted():
    out = latex_to_mathtext("Z yield = 3 #pm 1")
    assert r"\pm" in out and "#" not in out


def test_canvas_size():
    fig, ax = new_canvas(700, 600)
    assert tuple(fig.get_size_inches()) == pytest.approx((7.0, 6.0))
    plt.close(fig)


def test_draw_text_position():
    fig, ax = new_canvas()
    t = draw_text(fig, "#it{Internal}", 0.25, 0.93, 0.042)
    assert t.get_position() == (0.25, 0.93)
    assert "#" not in t.get_text()
    plt.close(fig)


def test_format_and_draw_hist(tmp_path):
    fig, ax = new_canvas()
    format_axes(ax, 14, 9)
    assert ax.xaxis.label.get_size() == 14
    h = Hist1D(4, 0, 4)
    h.fill(1.5)
    artists = draw_hist1d(ax, h, fill=True, errors=True)
    assert len(artists) == 3
    out = tmp_path / "h.png"
    fig.savefig(out)
    assert out.stat().st_size > 0
    plt.close(fig)