"""Single entry point for tracing an algorithm run."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from dsatrace.algorithms.registry import AlgorithmRun, get_descriptor
from dsatrace.config import EngineSettings
from dsatrace.core.catalog import AlgorithmId, Family
from dsatrace.core.errors import UnknownAlgorithmError
from dsatrace.core.values import GraphValue, ListValue, QueueValue, TreeValue
from dsatrace.snapshot import working_copy
from dsatrace.tracing import RejectionKind, Trace, TraceBuilder
from dsatrace.working import BinaryTree, LinkedList, WorkingGraph, WorkingQueue

logger = logging.getLogger(__name__)

# Structures each family accepts: live working structures and their snapshot values.
_ACCEPTS: dict[Family, tuple[type, ...]] = {
    Family.ARRAY: (list, tuple),
    Family.STACK: (list, tuple),
    Family.STRING: (str,),
    Family.QUEUE: (WorkingQueue, QueueValue),
    Family.LINKED_LIST: (LinkedList, ListValue),
    Family.TREE: (BinaryTree, TreeValue),
    Family.GRAPH: (WorkingGraph, GraphValue),
}


def describe_validation_error(exc: ValidationError) -> str:
    """One-line learner-facing message for the first validation error."""
    error = exc.errors()[0]
    # later loc parts are list indices or union member tags, not field names
    field = str(error["loc"][0]) if error["loc"] else ""
    return f"Invalid {field}: {error['msg']}" if field else str(error["msg"])


def run_algorithm(
    kind: AlgorithmId,
    structure: Any,
    params: Mapping[str, Any] | None = None,
    settings: EngineSettings | None = None,
) -> Trace:
    """Trace one algorithm run over a private copy of structure.

    The caller's structure is never mutated. Bad user input produces a
    single-frame rejected trace rather than an exception.

    Args:
        kind: Operation to run.
        structure: Working structure or snapshot value of the algorithm's family.
        params: Raw parameters, validated by the handler's model.
        settings: Capacity limits (EngineSettings() by default).

    Returns:
        Finished, non-empty trace.

    Raises:
        UnknownAlgorithmError: If kind has no handler or structure belongs to
            another family.
    """
    descriptor = get_descriptor(kind)
    if descriptor is None:
        raise UnknownAlgorithmError(f"No handler registered for {kind.name}")
    if not isinstance(structure, _ACCEPTS[kind.family]):
        raise UnknownAlgorithmError(
            f"{kind.name} operates on {kind.family.name.lower()} structures, "
            f"got {type(structure).__name__}"
        )

    settings = settings or EngineSettings()
    builder = TraceBuilder(kind, settings.max_frames)

    parsed = None
    if descriptor.params is None:
        if params:
            warnings.warn(
                f"{kind.name} takes no parameters; ignoring {sorted(params)}",
                UserWarning,
                stacklevel=2,
            )
    else:
        try:
            parsed = descriptor.params.model_validate(dict(params or {}))
        except ValidationError as exc:
            return builder.reject(structure, RejectionKind.PRECONDITION, describe_validation_error(exc))

    trace = descriptor(AlgorithmRun(builder, parsed, settings), working_copy(structure))
    if not trace.is_rejected:
        logger.info("%s traced in %d frames", kind.name, len(trace))
    return trace
