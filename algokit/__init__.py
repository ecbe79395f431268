"""Classic algorithms: sorting, searching, string matching, graphs, dynamic programming and greedy methods, with a small command line front end."""

__version__ = "0.1.0"

__all__ = ["cli", "dynamic", "graphs", "greedy", "searching", "sorting", "strings"]