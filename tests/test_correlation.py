import pytest

from zmumu.correlation import (
    Peak,
    fill_pt_correlation,
    peak_summary,
    plot_pt_correlation,
    plot_pt_projections,
    pt_correlation_profile,
)
from zmumu.events import Dimuon, Event, Muon
from zmumu.histogram import Hist1D


def _event(pt_plus, pt_minus, mass):
    muons = [Muon(pt_plus, 0.1, 0.0, 0.105, 1, True), Muon(pt_minus, -0.1, 3.1, 0.105, -1, True)]
    return Event(0.0, 50, muons, [Dimuon(10.0, 0.0, 0.0, mass, 0, 1)])


@pytest.fixture
def events():
    return [
        _event(40.5, 45.5, 91.0),
        _event(40.5, 45.5, 90.0),
        _event(30.5, 35.5, 92.0),
        _event(60.5, 20.5, 80.0),
        _event(50.5, 50.5, 95.0),
    ]


def test_mass_window_is_exclusive(events):
    hist = fill_pt_correlation(events)
    assert hist.entries == 3
    ix, iy = hist.xaxis.find_bin(40.5), hist.yaxis.find_bin(45.5)
    assert hist.bin_content(ix, iy) == 2.0
    assert hist.bin_content(hist.xaxis.find_bin(60.5), hist.yaxis.find_bin(20.5)) == 0.0


def test_no_window_takes_every_candidate(events):
    hist = fill_pt_correlation(events, nbins=100, high=200.0, mass_window=None)
    assert hist.entries == len(events)
    assert hist.contents.sum() == len(events)


def test_profile_means_follow_minus_pt(events):
    hist, profile = pt_correlation_profile(events)
    assert hist.entries == 3
    index = profile.axis.find_bin(40.5)
    assert profile.bin_entries(index) == 2.0
    assert profile.bin_mean(index) == pytest.approx(45.5)
    assert profile.bin_error(index) == pytest.approx(0.0)


def test_bad_muon_index_raises():
    event = Event(0.0, 50, [Muon(30.0, 0.0, 0.0, 0.1)], [Dimuon(5.0, 0.0, 0.0, 90.0, 0, 3)])
    with pytest.raises(IndexError):
        fill_pt_correlation([event])


def test_peak_summary_matches_histogram():
    hist = Hist1D(10, 0.0, 10.0)
    for x in (1.5, 3.5, 3.5, 3.5, 7.5):
        hist.fill(x)
    peak = peak_summary(hist)
    assert peak == Peak(hist.find_bin(3.5), hist.bin_center(hist.find_bin(3.5)),
                        hist.maximum(), hist.bin_error(hist.find_bin(3.5)))
    assert peak.height == 3.0


def test_plot_correlation_writes_file(events, tmp_path):
    hist, profile = pt_correlation_profile(events)
    path = plot_pt_correlation(hist, profile, tmp_path / "corr.png")
    assert path.exists() and path.stat().st_size > 0


def test_plot_projections_returns_peaks(events, tmp_path):
    hist = fill_pt_correlation(events)
    output = tmp_path / "proj.png"
    peak_plus, peak_minus = plot_pt_projections(hist, output)
    assert output.stat().st_size > 0
    assert peak_plus == peak_summary(hist.projection_x())
    assert peak_minus == peak_summary(hist.projection_y())
    assert peak_plus.height == 2.0