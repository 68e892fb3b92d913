"""Engine invariant errors.

These signal a bug in the code driving the engine, never bad user input.
User-input problems are reported as rejected traces instead (see
dsatrace.tracing.models.RejectionKind).
"""


class EngineError(Exception):
    """Base class for errors raised by the trace engine."""

    pass


class EngineInvariantError(EngineError):
    """Raised when the engine is used in a way that breaks its invariants."""

    pass


class InvalidStateError(EngineInvariantError):
    """Raised when a TraceBuilder is used after finish() or finished empty."""

    pass


class MalformedStructureError(EngineInvariantError):
    """Raised when the snapshot codec meets a pointer it cannot follow."""

    pass


class UnknownAlgorithmError(EngineInvariantError):
    """Raised when no handler is registered for an algorithm id, or the
    structure passed in does not belong to the algorithm's family."""

    pass
