"""MitoView: mitochondrial variant review and saved-search management."""

__version__ = "0.1.0"
