"""ForceViz - force-directed graph layout viewer."""

__version__ = "1.0.0"
