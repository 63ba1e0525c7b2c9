"""todostore - SQLite vs. ZODB to-do list storage comparison."""

__version__ = "0.1.0"
