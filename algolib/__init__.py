"""Graph algorithms, bipartite matchings, matroid intersection and number theory."""

__version__ = "0.1.0"