import pytest

from zmumu.asymmetry import (
    AsymmetrySummary,
    asymmetry_histogram,
    plot_asymmetry,
    pt_asymmetry_value,
    summarize_asymmetry,
)
from zmumu.events import Dimuon, Event, Muon
from zmumu.spectra import Selection


def _event(pt_plus, pt_minus, centrality=40, z=0.0, mass=91.0, tight=True):
    muons = [Muon(pt_plus, 0.1, 0.0, 0.105, 1, tight),
             Muon(pt_minus, -0.2, 1.0, 0.105, -1, tight)]
    dimuons = [Dimuon(10.0, 0.0, 0.0, mass, 0, 1)]
    return Event(z, centrality, muons, dimuons)


def test_value_pinned():
    assert pt_asymmetry_value(30.0, 10.0) == pytest.approx(0.5)


def test_value_antisymmetric():
    assert pt_asymmetry_value(42.0, 17.0) == pytest.approx(-pt_asymmetry_value(17.0, 42.0))


def test_value_equal_is_zero():
    assert pt_asymmetry_value(25.0, 25.0) == 0.0


def test_value_zero_sum_raises():
    with pytest.raises(ValueError):
        pt_asymmetry_value(0.0, 0.0)


def test_histogram_fills_selected():
    hist = asymmetry_histogram([_event(30.0, 10.0)])
    assert hist.entries == 1
    assert hist.bin_content(hist.find_bin(0.5)) == 1.0


def test_histogram_rejects_centrality_outside():
    events = [_event(30.0, 10.0, centrality=70), _event(30.0, 10.0, centrality=20)]
    hist = asymmetry_histogram(events)
    assert hist.entries == 0


def test_histogram_rejects_vertex_and_mass():
    events = [_event(30.0, 25.0, z=20.0), _event(30.0, 25.0, mass=75.0),
              _event(30.0, 25.0, tight=False)]
    assert asymmetry_histogram(events).entries == 0


def test_histogram_custom_selection():
    events = [_event(30.0, 25.0, centrality=100)]
    hist = asymmetry_histogram(events, Selection(centrality_low=60, centrality_high=140))
    assert hist.entries == 1


def test_summary_matches_histogram():
    events = [_event(30.0, 20.0), _event(20.0, 30.0), _event(40.0, 30.0)]
    hist = asymmetry_histogram(events)
    summary = summarize_asymmetry(hist)
    assert summary.entries == 3
    assert summary.mean == pytest.approx(hist.mean())
    assert summary.mean_error == pytest.approx(hist.mean_error())
    assert summary.mean_thousandths == pytest.approx(summary.mean * 1e3)


def test_symmetric_sample_has_zero_mean():
    events = [_event(30.0, 20.0), _event(20.0, 30.0)]
    summary = summarize_asymmetry(asymmetry_histogram(events))
    assert summary.mean == pytest.approx(0.0, abs=1e-12)


def test_plot_writes_file(tmp_path):
    hist = asymmetry_histogram([_event(30.0, 20.0), _event(25.0, 30.0)])
    summary = summarize_asymmetry(hist)
    out = plot_asymmetry(hist, summary, tmp_path / "asym.png")
    assert out == tmp_path / "asym.png"
    assert out.stat().st_size > 0


def test_summary_error_scaling():
    summary = AsymmetrySummary(mean=0.002, mean_error=0.0005, entries=4)
    assert summary.mean_error_thousandths == pytest.approx(summary.mean_error * 1e3)