"""modgraph: dependency resolution for Arma Reforger workshop mods."""

__version__ = "0.1.0"
