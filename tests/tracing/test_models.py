"""Tests for Frame and Trace models."""

import math

import pytest

from dsatrace.core import AlgorithmId, EdgeRef, NodeId
from dsatrace.tracing import Frame, Rejection, RejectionKind, Trace, encode


def test_trace_requires_frames():
    with pytest.raises(ValueError):
        Trace(AlgorithmId.BFS, frames=())


def test_trace_outcome_is_read_only():
    trace = Trace(AlgorithmId.BFS, frames=(Frame(()),), outcome={"order": ["A"]})
    with pytest.raises(TypeError):
        trace.outcome["order"] = []  # type: ignore[index]


def test_trace_sequence_protocol():
    frames = (Frame((1,), message="a"), Frame((2,), message="b"))
    trace = Trace(AlgorithmId.ARRAY_PEEK, frames)
    assert len(trace) == 2
    assert trace[1].message == "b"
    assert [f.message for f in trace] == ["a", "b"]
    assert trace.final_snapshot == (2,)
    assert not trace.is_rejected


def test_frame_highlight_lookup():
    frame = Frame((1, 2), highlight=frozenset({0}))
    assert frame.is_highlighted(0)
    assert not frame.is_highlighted(1)


def test_encode_handles_refs_and_infinity():
    assert encode(NodeId(4)) == 4
    assert encode(EdgeRef("A", "B")) == ["A", "B"]
    assert encode(RejectionKind.STRUCTURAL) == "STRUCTURAL"
    assert encode({"A": math.inf, "B": 2}) == {"A": None, "B": 2}
    assert encode(frozenset({2, 1})) == [1, 2]


def test_trace_to_dict():
    trace = Trace(
        AlgorithmId.STACK_POP,
        frames=(Frame((), pseudocode_line=-1, message="Stack empty! Cannot pop."),),
        rejection=Rejection(RejectionKind.STRUCTURAL, "Stack empty! Cannot pop."),
    )
    data = trace.to_dict()
    assert data["algorithm"] == "STACK_POP"
    assert data["rejection"] == {"kind": "STRUCTURAL", "message": "Stack empty! Cannot pop."}
    assert data["frames"][0] == {
        "snapshot": [],
        "highlight": [],
        "line": -1,
        "message": "Stack empty! Cannot pop.",
    }
