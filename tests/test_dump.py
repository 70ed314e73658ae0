import io

from zmumu.dump import BRANCHES, print_candidates, print_tree_contents, show_event
from zmumu.events import Dimuon, Event, Muon


def _event(mass=91.5, pts=(30.5, 40.0)):
    muons = [Muon(45.0, 0.5, 0.1, 0.105, 1, True), Muon(44.0, -0.5, 3.0, 0.105, -1, True)]
    dimuons = [Dimuon(pt, 0.0, 0.0, mass, 0, 1) for pt in pts]
    return Event(z_vertex=2.5, centrality=42, muons=muons, dimuons=dimuons)


def test_tree_contents_counts_entries_and_lists_branches():
    out = io.StringIO()
    events = [_event(), Event(), _event()]
    assert print_tree_contents(iter(events), out) == len(events)
    text = out.getvalue()
    assert f"*Entries : {len(events)}" in text
    for name in BRANCHES:
        assert name in text


def test_show_event_prints_values():
    out = io.StringIO()
    show_event(_event(), out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "======> EVENT"
    assert len(lines) == 1 + len(BRANCHES)
    text = out.getvalue()
    assert "Centrality" in text and "= 42" in text
    assert "[45, 44]" in text


def test_candidates_listing_format():
    out = io.StringIO()
    count = print_candidates([_event()], out)
    lines = out.getvalue().splitlines()
    assert count == 2
    assert len(lines) == 3 * count
    assert lines[0] == "Event 0 Reco_QQ_4mom_m content-> 91.5"
    assert lines[1] == "Event 0 Reco_QQ_4mom_pt content-> 30.5 40 "
    assert lines[2] == "Event 0 Reco_QQ_4mom_pt size-> 2"


def test_candidates_skips_events_without_dimuons():
    out = io.StringIO()
    count = print_candidates([Event(), _event(pts=(12.0,))], out)
    lines = out.getvalue().splitlines()
    assert count == 1
    assert all(line.startswith("Event 1 ") for line in lines)