"""Classic teaching algorithms: sorting, searching, graphs, arithmetic, statistics, matrices and text patterns."""

__version__ = "0.1.0"

__all__ = ["arithmetic", "cli", "graph", "matrix", "measures", "patterns", "searching", "sorting"]