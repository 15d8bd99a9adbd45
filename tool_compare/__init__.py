"""Tool comparison engine: comparability, scoring and score presentation."""

__version__ = "0.1.0"
