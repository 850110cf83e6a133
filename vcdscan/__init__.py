"""Parse Value Change Dump files and report variables that never change."""

__version__ = "0.1.0"
__all__ = ["cli", "model", "parser"]