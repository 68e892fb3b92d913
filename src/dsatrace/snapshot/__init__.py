"""Snapshot codec: deep, cycle-safe capture of working structures."""

from dsatrace.snapshot.codec import (
    StructureValue,
    contains_ref,
    inorder,
    snapshot,
    thaw,
    walk,
    working_copy,
)

__all__ = [
    "StructureValue",
    "contains_ref",
    "inorder",
    "snapshot",
    "thaw",
    "walk",
    "working_copy",
]
