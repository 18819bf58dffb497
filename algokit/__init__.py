"""Classic algorithms and data structures: number theory, hashing, trees, graphs and geometry."""

__version__ = "0.1.0"