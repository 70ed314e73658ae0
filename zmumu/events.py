"""Event records for reconstructed muons and dimuon candidates, stored as JSON lines."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator


@dataclass(frozen=True)
class DataFile:
    """A named input sample."""

    path: str
    name: str
    label: str
    suffix: str = ""


@dataclass
class Muon:
    pt: float
    eta: float
    phi: float
    m: float
    charge: int = 0
    tight: bool = False


@dataclass
class Dimuon:
    pt: float
    eta: float
    phi: float
    m: float
    plus_index: int
    minus_index: int


@dataclass
class Event:
    z_vertex: float = 0.0
    centrality: int = 0
    muons: list[Muon] = field(default_factory=list)
    dimuons: list[Dimuon] = field(default_factory=list)

    def muon_pair(self, dimuon):
        """Return the (positive, negative) muons of a candidate."""
        try:
            return self.muons[dimuon.plus_index], self.muons[dimuon.minus_index]
        except IndexError:
            raise IndexError("dimuon refers to a muon not in the event") from None


def event_from_dict(data):
    """Build an Event from its plain mapping form."""
    try:
        muons = [Muon(float(m["pt"]), float(m["eta"]), float(m["phi"]), float(m["m"]),
                      int(m.get("charge", 0)), bool(m.get("tight", False)))
                 for m in data.get("muons", [])]
        dimuons = [Dimuon(float(d["pt"]), float(d["eta"]), float(d["phi"]), float(d["m"]),
                          int(d["plus_index"]), int(d["minus_index"]))
                   for d in data.get("dimuons", [])]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed event record: {exc}") from exc
    return Event(float(data.get("z_vertex", 0.0)), int(data.get("centrality", 0)),
                 muons, dimuons)


def event_to_dict(event):
    return {
        "z_vertex": event.z_vertex,
        "centrality": event.centrality,
        "muons": [vars(m).copy() for m in event.muons],
        "dimuons": [vars(d).copy() for d in event.dimuons],
    }


def read_events(path) -> Iterator[Event]:
    """Yield events from a JSON-lines file."""
    with Path(path).open(encoding="utf-8") as fh:
        for number, line in enumerate(fh, 1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as exc:
                raise ValueError(f"line {number}: {exc}") from exc
            yield event_from_dict(record)


def write_events(events: Iterable[Event], path):
    """Write events as JSON lines; returns the number written."""
    count = 0
    with Path(path).open("w", encoding="utf-8") as fh:
        for event in events:
            fh.write(json.dumps(event_to_dict(event)) + "\n")
            count += 1
    return count