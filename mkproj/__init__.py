"""Project scaffolding driven by a small line-oriented configuration language."""

__version__ = "0.1.0"
__all__ = ["__version__"]