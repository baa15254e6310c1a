"""Classic dynamic-programming, graph, disjoint-set, spanning-tree and shortest-path algorithms."""

__version__ = "0.1.0"