"""Element identity models.

Usage:
    node = NodeId(index=3)
    edge = EdgeRef("A", "B")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class NodeId:
    """Stable identifier for one logical node of a linked list or tree.

    Assigned once when the node is created and carried by every copy of the
    node, so a highlight keeps pointing at the same logical node while its
    pointers are rewired between frames.
    """

    index: int = 0

    def __str__(self) -> str:
        return f"#{self.index}"


@dataclass(frozen=True, slots=True)
class EdgeRef:
    """Highlight reference to a graph edge by its endpoint vertex ids."""

    u: str
    v: str

    def reversed(self) -> EdgeRef:
        """Return the same edge seen from the other endpoint."""
        return EdgeRef(self.v, self.u)

    def matches(self, u: str, v: str, directed: bool) -> bool:
        """Check whether this reference names the edge u-v.

        Args:
            u: Edge source.
            v: Edge target.
            directed: If False, the reference matches either orientation.

        Returns:
            True if the reference names the edge.
        """
        if self.u == u and self.v == v:
            return True
        return not directed and self.u == v and self.v == u

    def __str__(self) -> str:
        return f"{self.u}-{self.v}"
