"""Building blocks for generating and inspecting Java source code."""

__version__ = "0.1.0"
__all__ = ["data_types", "imports", "indentation", "node_types"]