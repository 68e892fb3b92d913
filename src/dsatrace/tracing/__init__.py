"""Trace data types and the builder that produces them."""

from dsatrace.tracing.builder import TraceBuilder, reject_trace
from dsatrace.tracing.models import Frame, Rejection, RejectionKind, Trace, encode

__all__ = [
    "Frame",
    "Rejection",
    "RejectionKind",
    "Trace",
    "TraceBuilder",
    "encode",
    "reject_trace",
]
