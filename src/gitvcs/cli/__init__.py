"""Command-line interface for gitvcs."""
