"""AC circuit analysis by modified nodal analysis, with example circuits and a demo command."""

__version__ = "0.1.0"
__all__ = ["circuit", "cli", "components", "examples", "formatting", "linalg", "source"]