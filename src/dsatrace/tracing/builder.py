"""Trace builder: accumulates frames for one algorithm run."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from dsatrace.core.catalog import AlgorithmId
from dsatrace.core.errors import InvalidStateError
from dsatrace.core.types import ElementRef
from dsatrace.snapshot.codec import contains_ref, snapshot
from dsatrace.tracing.models import Frame, Rejection, RejectionKind, Trace

logger = logging.getLogger(__name__)


class TraceBuilder:
    """Appends snapshot frames in execution order, then freezes them.

    Every append snapshots the structure through the codec, so later mutation
    of the working structure cannot reach frames already appended.

    Args:
        algorithm: Operation being traced.
        max_frames: Runaway guard; appending beyond it raises InvalidStateError.
    """

    def __init__(self, algorithm: AlgorithmId, max_frames: int | None = None):
        self._algorithm = algorithm
        self._max_frames = max_frames
        self._frames: list[Frame] = []
        self._rejection: Rejection | None = None
        self._finished = False

    @property
    def algorithm(self) -> AlgorithmId:
        return self._algorithm

    def __len__(self) -> int:
        return len(self._frames)

    def _check_open(self, operation: str) -> None:
        if self._finished:
            raise InvalidStateError(f"Cannot {operation}: trace for {self._algorithm.name} is finished")

    def append(
        self,
        structure: Any,
        highlight: Iterable[ElementRef | None] = (),
        line: int = -1,
        message: str = "",
    ) -> Frame:
        """Snapshot structure and append it as the next frame.

        Args:
            structure: Working structure (or value) to capture.
            highlight: Elements to emphasize; None entries are dropped.
            line: Pseudocode line index, -1 for none.
            message: Human-readable description.

        Returns:
            The appended frame.

        Raises:
            InvalidStateError: If the builder is finished or over max_frames.
        """
        self._check_open("append")
        if self._max_frames is not None and len(self._frames) >= self._max_frames:
            raise InvalidStateError(
                f"Trace for {self._algorithm.name} exceeded {self._max_frames} frames"
            )
        value = snapshot(structure)
        refs = frozenset(ref for ref in highlight if ref is not None)
        for ref in refs:
            if not contains_ref(value, ref):
                logger.debug("%s: highlight %r not in snapshot", self._algorithm.name, ref)
        frame = Frame(snapshot=value, highlight=refs, pseudocode_line=line, message=message)
        self._frames.append(frame)
        return frame

    def reject(self, structure: Any, kind: RejectionKind, message: str) -> Trace:
        """Record a rejected run: one explanatory frame, structure unchanged.

        Args:
            structure: Caller's structure, captured as-is.
            kind: Rejection category.
            message: Explanation shown to the learner.

        Returns:
            The finished single-frame trace.

        Raises:
            InvalidStateError: If the builder is finished or already has frames.
        """
        self._check_open("reject")
        if self._frames:
            raise InvalidStateError(
                f"Cannot reject {self._algorithm.name} after {len(self._frames)} frames"
            )
        self.append(structure, message=message)
        self._rejection = Rejection(kind, message)
        logger.info("%s rejected (%s): %s", self._algorithm.name, kind.name, message)
        return self.finish()

    def finish(self, outcome: Mapping[str, Any] | None = None) -> Trace:
        """Freeze the frames into a Trace.

        Args:
            outcome: Computed answer of the run.

        Returns:
            The finished trace.

        Raises:
            InvalidStateError: If already finished or no frame was appended.
        """
        self._check_open("finish")
        if not self._frames:
            raise InvalidStateError(f"Cannot finish an empty trace for {self._algorithm.name}")
        self._finished = True
        return Trace(
            algorithm=self._algorithm,
            frames=tuple(self._frames),
            rejection=self._rejection,
            outcome=outcome or {},
        )


def reject_trace(algorithm: AlgorithmId, structure: Any, kind: RejectionKind, message: str) -> Trace:
    """Shortcut for a rejected run that needs no builder of its own."""
    return TraceBuilder(algorithm).reject(structure, kind, message)
