"""Parse finite automata in set notation; ordered sets and lists of strings."""

__version__ = "0.1.0"
__all__ = ["automaton", "cli", "setlist"]