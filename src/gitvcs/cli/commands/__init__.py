"""gitvcs CLI subcommands."""
