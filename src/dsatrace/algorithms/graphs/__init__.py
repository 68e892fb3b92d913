"""Graph algorithms.

Importing this package registers every graph handler. Highlights name
vertices by id and edges by EdgeRef; neighbor order is edge insertion order.
"""

from dsatrace.algorithms.graphs import editing, ordering, shortest_paths, spanning_trees, traversal

__all__ = ["editing", "ordering", "shortest_paths", "spanning_trees", "traversal"]
