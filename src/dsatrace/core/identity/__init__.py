"""Element identity: stable node ids and edge references."""

from dsatrace.core.identity.models import EdgeRef, NodeId

__all__ = [
    "EdgeRef",
    "NodeId",
]
