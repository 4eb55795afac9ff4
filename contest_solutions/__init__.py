"""Solutions to ABC355 problems A-D and a crane terminal heuristic for AHC033."""

__version__ = "0.1.0"