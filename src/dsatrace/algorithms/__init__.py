"""Algorithm library.

Each family module registers its handlers with the @algorithm decorator when
imported; importing this package loads every family so run_algorithm can
dispatch any AlgorithmId.

Handlers receive an AlgorithmRun and a private working copy of the input
structure, append frames through run.step(), and end with run.finish() or a
rejection (run.precondition() / run.structural()).
"""

from dsatrace.algorithms import arrays, graphs, linked_lists, queues, stacks, strings, trees
from dsatrace.algorithms.params import Params
from dsatrace.algorithms.registry import (
    AlgorithmDescriptor,
    AlgorithmRun,
    algorithm,
    get_descriptor,
    missing_handlers,
    registered,
)
from dsatrace.algorithms.runner import describe_validation_error, run_algorithm

__all__ = [
    "AlgorithmDescriptor",
    "AlgorithmRun",
    "Params",
    "algorithm",
    "arrays",
    "describe_validation_error",
    "get_descriptor",
    "graphs",
    "linked_lists",
    "missing_handlers",
    "queues",
    "registered",
    "run_algorithm",
    "stacks",
    "strings",
    "trees",
]
