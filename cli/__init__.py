"""Command-line interface for modgraph."""
