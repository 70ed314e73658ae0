"""Z boson to dimuon event selection, histograms and control plots."""

__version__ = "0.1.0"