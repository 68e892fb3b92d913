"""Core type definitions for dsatrace."""

from dsatrace.core.identity import EdgeRef, NodeId

type Copy[T] = T
"""Type alias indicating a value is a copy that shares nothing with live state.

When you see `Copy[T]` in a return type, the returned value was produced by
the snapshot codec. Mutating the working structure afterwards does NOT affect
it, and mutating it does NOT affect the working structure.
"""

type ElementRef = int | str | NodeId | EdgeRef
"""Anything a frame can highlight.

- int: position in an array, string, stack or queue
- NodeId: a linked-list or tree node
- str: a graph vertex id
- EdgeRef: a graph edge
"""
