import pytest

from zmumu.events import (DataFile, Dimuon, Event, Muon, event_from_dict,
                          event_to_dict, read_events, write_events)


def _event():
    mu = [Muon(40.0, 0.5, 0.1, 0.105, 1, True), Muon(38.0, -0.3, 3.0, 0.105, -1, True)]
    return Event(2.0, 50, mu, [Dimuon(5.0, 0.1, 1.0, 91.0, 0, 1)])


def test_muon_pair():
    ev = _event()
    plus, minus = ev.muon_pair(ev.dimuons[0])
    assert plus.charge == 1 and minus.charge == -1


def test_muon_pair_bad_index():
    ev = _event()
    with pytest.raises(IndexError):
        ev.muon_pair(Dimuon(1, 0, 0, 90, 0, 7))


def test_dict_round_trip():
    ev = _event()
    assert event_from_dict(event_to_dict(ev)) == ev


def test_malformed_record():
    with pytest.raises(ValueError):
        event_from_dict({"muons": [{"pt": 1}]})


def test_file_round_trip(tmp_path):
    path = tmp_path / "ev.jsonl"
    events = [_event(), Event()]
    assert write_events(events, path) == 2
    assert list(read_events(path)) == events


def test_bad_json(tmp_path):
    path = tmp_path / "bad.jsonl"
    path.write_text("{nope\n")
    with pytest.raises(ValueError):
        list(read_events(path))


def test_datafile_fields():
    d = DataFile("../data/x.root", "x.root", "PbPb_5TeV_2024")
    assert d.suffix == ""
    assert d.label == "PbPb_5TeV_2024"