"""javagen: generate import-correct, formatted Java source from an in-memory model."""

__version__ = "0.1.0"
