"""PocketBook Press: print-ready pocket book PDFs from a JSON manuscript."""

__version__ = "0.1.0"
