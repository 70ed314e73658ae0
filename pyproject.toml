[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zmumu"
version = "0.1.0"
description = "Z boson to dimuon control plots: invariant mass, muon pT spectra, pT correlation and pT asymmetry"
requires-python = ">=3.10"
keywords = ["physics", "dimuon", "z-boson", "histogram", "heavy-ion", "muon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "numpy",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zmumu = "zmumu.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zmumu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
