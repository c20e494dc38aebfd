"""Comparison helpers for tests that report why values differ."""

__version__ = "0.1.0"
__all__ = ["approx", "falsestring", "mapeq", "stringeq", "vectorequals", "vectortostring"]