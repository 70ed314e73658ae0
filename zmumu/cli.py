"""Command-line entry point for the dimuon analysis."""

from __future__ import annotations

import argparse
import sys

from zmumu.asymmetry import asymmetry_histogram, plot_asymmetry, summarize_asymmetry
from zmumu.correlation import plot_pt_correlation, plot_pt_projections, pt_correlation_profile
from zmumu.dump import print_candidates, print_tree_contents, show_event
from zmumu.events import read_events
from zmumu.singlemuon import plot_single_muon, single_muon_spectra
from zmumu.spectra import (inv_mass_histogram, plot_inv_mass, plot_pt_spectra, pt_spectra,
                           summarize_mass)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zmumu",
                                     description="Z -> mu+ mu- control plots from event files.")
    sub = parser.add_subparsers(dest="command", required=True)

    tree = sub.add_parser("tree", help="print entry count and branches")
    tree.add_argument("input")
    tree.add_argument("--show", type=int, default=None, metavar="N",
                      help="also print every value of event N")

    dump = sub.add_parser("dump", help="list the dimuon candidates of every event")
    dump.add_argument("input")

    mass = sub.add_parser("mass", help="dimuon invariant-mass spectrum")
    mass.add_argument("input")
    mass.add_argument("--bins", type=int, default=40)
    mass.add_argument("--low", type=float, default=70.0)
    mass.add_argument("--high", type=float, default=110.0)
    mass.add_argument("--window-low", type=float, default=80.0)
    mass.add_argument("--window-high", type=float, default=100.0)
    mass.add_argument("--output", default="invMassSpectrum.pdf")

    pt = sub.add_parser("pt", help="mu+ and mu- pt spectra of selected candidates")
    pt.add_argument("input")
    pt.add_argument("--output", default="pt_spectrum_muPLmuMI.pdf")

    asym = sub.add_parser("asymmetry", help="pt asymmetry of selected candidates")
    asym.add_argument("input")
    asym.add_argument("--output", default="pt_asymmetry.pdf")

    single = sub.add_parser("singlemuon", help="single-muon pt spectra in a mass window")
    single.add_argument("input")
    single.add_argument("--mass-low", type=float, default=85.0)
    single.add_argument("--mass-high", type=float, default=95.0)
    single.add_argument("--output", default="singleMuonTests.pdf")

    corr = sub.add_parser("correlation", help="pt(mu+) against pt(mu-)")
    corr.add_argument("input")
    corr.add_argument("--output", default="output2.png")
    corr.add_argument("--projections", default="output3.png")
    return parser


def _run(args) -> None:
    events = list(read_events(args.input))
    out = sys.stdout
    if args.command == "tree":
        print_tree_contents(events, out)
        if args.show is not None:
            try:
                show_event(events[args.show], out)
            except IndexError:
                raise ValueError(f"no event {args.show}") from None
    elif args.command == "dump":
        print_candidates(events, out)
    elif args.command == "mass":
        hist = inv_mass_histogram(events, None, args.bins, args.low, args.high)
        summary = summarize_mass(hist, args.window_low, args.window_high)
        plot_inv_mass(hist, summary, args.output)
        print(f"Z yield = {summary.z_yield:.0f} +- {summary.yield_error:.0f}", file=out)
        print(f"mean = {summary.mean:.2f} +- {summary.mean_error:.2f} GeV", file=out)
        print(f"sigma = {summary.std_dev:.2f} +- {summary.std_dev_error:.2f} GeV", file=out)
    elif args.command == "pt":
        plus, minus = plot_pt_spectra(*pt_spectra(events), args.output)
        print(f"mu+ mean = {plus.mean:.2f} +- {plus.mean_error:.2f} GeV", file=out)
        print(f"mu- mean = {minus.mean:.2f} +- {minus.mean_error:.2f} GeV", file=out)
    elif args.command == "asymmetry":
        hist = asymmetry_histogram(events)
        summary = summarize_asymmetry(hist)
        plot_asymmetry(hist, summary, args.output)
        print(f"mean = {summary.mean:.5f} +- {summary.mean_error:.5f}", file=out)
    elif args.command == "singlemuon":
        hists = single_muon_spectra(events, args.mass_low, args.mass_high)
        plus, minus = plot_single_muon(*hists, args.output, args.mass_low, args.mass_high)
        print(f"mu+ peak = {plus.peak_position:.1f}", file=out)
        print(f"mu- peak = {minus.peak_position:.1f}", file=out)
    elif args.command == "correlation":
        hist, profile = pt_correlation_profile(events)
        plot_pt_correlation(hist, profile, args.output)
        plus, minus = plot_pt_projections(hist, args.projections)
        print(f"mu+ peak = {plus.position:.1f} +- {plus.error:.1f}", file=out)
        print(f"mu- peak = {minus.position:.1f} +- {minus.error:.1f}", file=out)


def main(argv=None) -> int:
    """Run one analysis step; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except (OSError, ValueError, IndexError) as exc:
        print(f"Error in {args.command}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())