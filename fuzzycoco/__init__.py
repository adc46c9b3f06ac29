"""Fuzzy variables, metrics, genome codecs and evolutionary operators for fuzzy rule-based systems."""

__version__ = "1.0.0"