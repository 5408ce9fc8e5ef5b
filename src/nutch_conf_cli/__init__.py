"""Command-line interface for nutch-conf-core."""
