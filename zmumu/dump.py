"""Plain-text inspection of event records: tree summary, single event and candidate listing."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from zmumu.events import Event

_EVENT_BRANCHES = ("zVtx", "Centrality")
_MUON_BRANCHES = (
    "Reco_mu_size", "Reco_mu_charge", "Reco_mu_isTightCutBased",
    "Reco_mu_4mom_pt", "Reco_mu_4mom_eta", "Reco_mu_4mom_phi", "Reco_mu_4mom_m",
)
_DIMUON_BRANCHES = (
    "Reco_QQ_size", "Reco_QQ_mupl_idx", "Reco_QQ_mumi_idx",
    "Reco_QQ_4mom_pt", "Reco_QQ_4mom_eta", "Reco_QQ_4mom_phi", "Reco_QQ_4mom_m",
)
BRANCHES = _EVENT_BRANCHES + _MUON_BRANCHES + _DIMUON_BRANCHES


def _fmt(value) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _fmt_list(values) -> str:
    return "[" + ", ".join(_fmt(v) for v in values) + "]"


def _branch_values(event: Event) -> dict[str, str]:
    muons, dimuons = event.muons, event.dimuons
    return {
        "zVtx": _fmt(float(event.z_vertex)),
        "Centrality": _fmt(event.centrality),
        "Reco_mu_size": _fmt(len(muons)),
        "Reco_mu_charge": _fmt_list(m.charge for m in muons),
        "Reco_mu_isTightCutBased": _fmt_list(m.tight for m in muons),
        "Reco_mu_4mom_pt": _fmt_list(m.pt for m in muons),
        "Reco_mu_4mom_eta": _fmt_list(m.eta for m in muons),
        "Reco_mu_4mom_phi": _fmt_list(m.phi for m in muons),
        "Reco_mu_4mom_m": _fmt_list(m.m for m in muons),
        "Reco_QQ_size": _fmt(len(dimuons)),
        "Reco_QQ_mupl_idx": _fmt_list(d.plus_index for d in dimuons),
        "Reco_QQ_mumi_idx": _fmt_list(d.minus_index for d in dimuons),
        "Reco_QQ_4mom_pt": _fmt_list(d.pt for d in dimuons),
        "Reco_QQ_4mom_eta": _fmt_list(d.eta for d in dimuons),
        "Reco_QQ_4mom_phi": _fmt_list(d.phi for d in dimuons),
        "Reco_QQ_4mom_m": _fmt_list(d.m for d in dimuons),
    }


def print_tree_contents(events: Iterable[Event], stream: TextIO | None = None) -> int:
    """Print the number of entries and the available branches; returns the entry count."""
    out = stream if stream is not None else sys.stdout
    count = sum(1 for _ in events)
    print("*Tree    :myTree", file=out)
    print(f"*Entries : {count}", file=out)
    for name in BRANCHES:
        print(f"*Br      :{name}", file=out)
    return count


def show_event(event: Event, stream: TextIO | None = None) -> None:
    """Print every branch value of one event."""
    out = stream if stream is not None else sys.stdout
    print("======> EVENT", file=out)
    for name, value in _branch_values(event).items():
        print(f" {name:<24}= {value}", file=out)


def print_candidates(events: Iterable[Event], stream: TextIO | None = None) -> int:
    """List the mass and the candidate pt values for every dimuon; returns the candidate count."""
    out = stream if stream is not None else sys.stdout
    count = 0
    for number, event in enumerate(events):
        pts = [d.pt for d in event.dimuons]
        for dimuon in event.dimuons:
            print(f"Event {number} Reco_QQ_4mom_m content-> {dimuon.m:g}", file=out)
            print(f"Event {number} Reco_QQ_4mom_pt content-> "
                  + "".join(f"{pt:g} " for pt in pts), file=out)
            print(f"Event {number} Reco_QQ_4mom_pt size-> {len(pts)}", file=out)
            count += 1
    return count