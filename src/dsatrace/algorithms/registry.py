"""Algorithm registry and decorator.

Usage:
    @algorithm(AlgorithmId.ARRAY_DELETE, params=IndexParams)
    def array_delete(run: AlgorithmRun[IndexParams], array: list[int]) -> Trace:
        if not 0 <= run.params.index < len(array):
            return run.structural(array, "Invalid delete index.")
        ...
        return run.finish()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from dsatrace.algorithms.params import Params
from dsatrace.config import EngineSettings
from dsatrace.core.catalog import AlgorithmId
from dsatrace.core.types import ElementRef
from dsatrace.tracing import RejectionKind, Trace, TraceBuilder

type Handler = Callable[..., Trace]


@dataclass(slots=True)
class AlgorithmRun[P: Params | None]:
    """Everything one handler invocation needs besides its working structure.

    Attributes:
        trace: Builder collecting this run's frames.
        params: Validated parameters (None for parameterless algorithms).
        settings: Capacity limits in force.
    """

    trace: TraceBuilder
    params: P
    settings: EngineSettings = field(default_factory=EngineSettings)

    def step(
        self,
        structure: Any,
        highlight: Iterable[ElementRef | None] = (),
        line: int = -1,
        message: str = "",
    ) -> None:
        """Append one frame showing structure."""
        self.trace.append(structure, highlight, line, message)

    def precondition(self, structure: Any, message: str) -> Trace:
        """Reject the run because its input is unacceptable."""
        return self.trace.reject(structure, RejectionKind.PRECONDITION, message)

    def structural(self, structure: Any, message: str) -> Trace:
        """Reject the run because the structure forbids the operation."""
        return self.trace.reject(structure, RejectionKind.STRUCTURAL, message)

    def finish(self, **outcome: Any) -> Trace:
        """Freeze the frames, recording the run's computed answer."""
        return self.trace.finish(outcome)


@dataclass(frozen=True, slots=True)
class AlgorithmDescriptor:
    """Registered handler for one AlgorithmId.

    Attributes:
        algorithm: Operation this handler traces.
        name: Handler function name.
        run: Handler, called as run(algorithm_run, working_structure).
        params: Parameter model, or None if the algorithm takes no parameters.
    """

    algorithm: AlgorithmId
    name: str
    run: Handler
    params: type[Params] | None = None

    def __call__(self, run: AlgorithmRun[Any], structure: Any) -> Trace:
        return self.run(run, structure)


_REGISTRY: dict[AlgorithmId, AlgorithmDescriptor] = {}


class _AlgorithmDecorator:
    """Algorithm decorator factory. Used as @algorithm(AlgorithmId.X, params=Model)."""

    def __call__(
        self,
        kind: AlgorithmId,
        params: type[Params] | None = None,
    ) -> Callable[[Handler], AlgorithmDescriptor]:
        """Register a handler for one algorithm id.

        Args:
            kind: Operation the handler traces.
            params: Pydantic model validating raw parameters.

        Returns:
            Decorator that registers the handler and returns its descriptor.

        Raises:
            ValueError: If a handler is already registered for kind.
        """

        def decorator(fn: Handler) -> AlgorithmDescriptor:
            if kind in _REGISTRY:
                raise ValueError(
                    f"{kind.name} is already handled by {_REGISTRY[kind].name}, cannot register {fn.__name__}"
                )
            descriptor = AlgorithmDescriptor(algorithm=kind, name=fn.__name__, run=fn, params=params)
            _REGISTRY[kind] = descriptor
            return descriptor

        return decorator


algorithm = _AlgorithmDecorator()


def get_descriptor(kind: AlgorithmId) -> AlgorithmDescriptor | None:
    return _REGISTRY.get(kind)


def registered() -> dict[AlgorithmId, AlgorithmDescriptor]:
    """Copy of the registry map."""
    return dict(_REGISTRY)


def missing_handlers() -> list[AlgorithmId]:
    """AlgorithmIds that have no registered handler, in catalog order."""
    return [kind for kind in AlgorithmId if kind not in _REGISTRY]
