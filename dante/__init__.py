"""Generate text mazes and solve them by greedy depth-first search."""

__version__ = "0.1.0"
__all__ = ["common", "generator", "solver"]