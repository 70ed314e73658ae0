import pytest

from zmumu.cli import main
from zmumu.events import Dimuon, Event, Muon, write_events


def _events():
    good = Event(1.0, 100,
                 [Muon(45.5, 0.3, 0.0, 0.105, 1, True), Muon(42.5, -0.4, 3.1, 0.105, -1, True)],
                 [Dimuon(5.0, 0.0, 0.0, 91.0, 0, 1)])
    empty = Event(2.0, 20, [], [])
    return [good, empty]


@pytest.fixture
def events_file(tmp_path):
    path = tmp_path / "events.jsonl"
    write_events(_events(), path)
    return path


def test_tree_prints_entry_count(events_file, capsys):
    assert main(["tree", str(events_file)]) == 0
    out = capsys.readouterr().out
    assert "*Entries : 2" in out
    assert "*Br      :Reco_QQ_4mom_m" in out


def test_tree_show_missing_event_fails(events_file, capsys):
    assert main(["tree", str(events_file), "--show", "5"]) == 1
    assert "Error in tree" in capsys.readouterr().err


def test_dump_lists_candidates(events_file, capsys):
    assert main(["dump", str(events_file)]) == 0
    out = capsys.readouterr().out
    assert "Event 0 Reco_QQ_4mom_m content-> 91" in out
    assert "Event 1" not in out


def test_missing_input_returns_error(tmp_path, capsys):
    assert main(["tree", str(tmp_path / "absent.jsonl")]) == 1
    assert "Error in tree" in capsys.readouterr().err


def test_mass_writes_plot(events_file, tmp_path, capsys):
    output = tmp_path / "mass.pdf"
    assert main(["mass", str(events_file), "--output", str(output)]) == 0
    assert output.exists()
    assert "Z yield = 1 +- 1" in capsys.readouterr().out


def test_singlemuon_writes_plot(events_file, tmp_path, capsys):
    output = tmp_path / "single.pdf"
    assert main(["singlemuon", str(events_file), "--output", str(output)]) == 0
    assert output.exists()
    assert "mu+ peak = 45.5" in capsys.readouterr().out


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])