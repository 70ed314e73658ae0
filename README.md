# zmumu

Control plots for Z → μ⁺μ⁻ candidates in heavy-ion collision data.

The package reads events that hold reconstructed muons and dimuon
candidates, applies event and muon selections (vertex position, centrality,
mass window, muon pT, |η| and tight identification), fills histograms and
draws figures with matplotlib:

- dimuon invariant-mass spectrum with Z yield, mean and width in a mass window
- μ⁺ and μ⁻ transverse-momentum spectra with means and peak positions
- pT(μ⁺) against pT(μ⁻): the 2D correlation, its profile and its projections
- the pT asymmetry (pT⁺ − pT⁻)/(pT⁺ + pT⁻)
- single-muon pT spectra in a mass window without event cuts
- a plain-text listing of the event contents

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Input format

Events are stored as JSON lines, one event per line. Blank lines are skipped.

```json
{"z_vertex": 1.2, "centrality": 80,
 "muons": [{"pt": 42.0, "eta": 0.3, "phi": 1.0, "m": 0.106, "charge": 1, "tight": true},
           {"pt": 40.0, "eta": -0.5, "phi": -2.1, "m": 0.106, "charge": -1, "tight": true}],
 "dimuons": [{"pt": 5.0, "eta": 0.1, "phi": 0.2, "m": 91.0, "plus_index": 0, "minus_index": 1}]}
```

`centrality` is in half-percent units (0–200). `plus_index` and
`minus_index` point into the event's `muons` list. A malformed line raises
`ValueError`.

## Command line

Installing the package provides the `zmumu` command. Every subcommand takes
the events file as its first argument:

```
zmumu tree events.jsonl [--show N]
zmumu dump events.jsonl
zmumu mass events.jsonl [--bins 40] [--low 70] [--high 110] [--window-low 80] [--window-high 100] [--output invMassSpectrum.pdf]
zmumu pt events.jsonl [--output pt_spectrum_muPLmuMI.pdf]
zmumu asymmetry events.jsonl [--output pt_asymmetry.pdf]
zmumu singlemuon events.jsonl [--mass-low 85] [--mass-high 95] [--output singleMuonTests.pdf]
zmumu correlation events.jsonl [--output output2.png] [--projections output3.png]
```

- `tree` prints the entry count and the branch names; `--show N` also prints
  every value of event N.
- `dump` prints the mass and the candidate pT values of every dimuon.
- `mass`, `pt`, `asymmetry`, `singlemuon` and `correlation` write their
  figures and print the main numbers (yield, means, peaks).

The command returns 1 and prints a message on standard error when the input
cannot be read or is malformed.

## Selection

`zmumu.spectra.Selection` holds the cuts. Its defaults:

- |z vertex| < 15
- 60 < centrality ≤ 140
- 80 ≤ m(μ⁺μ⁻) ≤ 100 GeV
- pT ≥ 20 GeV and |η| < 2.4 for both muons
- tight identification required; unless `tight_both=True`, only the positive
  muon's tight flag is checked, for both muons

`pt_spectra` uses 60 < centrality ≤ 180 by default, and `asymmetry_histogram`
uses 20 < centrality ≤ 60.

## Library use

```python
from zmumu.events import read_events
from zmumu.spectra import Selection, inv_mass_histogram, summarize_mass, plot_inv_mass

events = read_events("events.jsonl")
hist = inv_mass_histogram(events, Selection(), 40, 70.0, 110.0)
summary = summarize_mass(hist, 80.0, 100.0, 1e-5)
plot_inv_mass(hist, summary, "invMassSpectrum.pdf", "PbPb 2024 (5.36 TeV)")
print(summary.z_yield, summary.mean, summary.std_dev)
```

Modules:

- `zmumu.events` — `DataFile`, `Muon`, `Dimuon`, `Event` (with
  `Event.muon_pair`), `event_from_dict`, `event_to_dict`, `read_events`,
  `write_events`
- `zmumu.histogram` — `Hist1D`, `Hist2D` and `Profile`: fixed-bin histograms
  with under/overflow bins, integrals with errors, mean, standard deviation
  and their errors, projections
- `zmumu.spectra` — `Selection`, `selected_pairs`, `inv_mass_histogram`,
  `summarize_mass`, `MassSummary`, `plot_inv_mass`, `pt_spectra`,
  `summarize_pt`, `PtSummary`, `plot_pt_spectra`
- `zmumu.correlation` — `fill_pt_correlation`, `pt_correlation_profile`,
  `Peak`, `peak_summary`, `plot_pt_correlation`, `plot_pt_projections`
- `zmumu.asymmetry` — `pt_asymmetry_value`, `asymmetry_histogram`,
  `AsymmetrySummary`, `summarize_asymmetry`, `plot_asymmetry`
- `zmumu.singlemuon` — `single_muon_spectra`, `plot_single_muon`
- `zmumu.dump` — `print_tree_contents`, `show_event`, `print_candidates`
- `zmumu.style` — shared figure styling and `latex_to_mathtext` for
  `#mu^{+}`-style labels
- `zmumu.cli` — `main`, the `zmumu` command

## What it does not do

zmumu does not read ROOT files or any other detector data format. Events
must first be converted into the JSON-lines format above, for example with
`write_events`. It does not fit the mass peak; yields, means and widths are
taken from the binned histograms.