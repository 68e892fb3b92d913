"""Node id allocation service.

NodeAllocator is a stateful service that hands out NodeIds for one structure
lineage (a linked list or tree and every structure thawed from its snapshots).
"""

from __future__ import annotations

from dsatrace.core.identity import NodeId


class NodeAllocator:
    """Allocates monotonically increasing node ids.

    Ids are never recycled: a deleted node's id does not reappear later in the
    same lineage, so a highlight that names it can never land on a newer node.
    The high-water mark travels inside list and tree snapshots so a thawed
    structure keeps allocating where its predecessor stopped.

    Args:
        start: First index to hand out.
    """

    def __init__(self, start: int = 0):
        self._next_index = start

    def allocate(self) -> NodeId:
        """Allocate a fresh node id.

        Returns:
            NodeId that has never been returned by this allocator before.
        """
        index = self._next_index
        self._next_index += 1
        return NodeId(index=index)

    def reserve(self, node_id: NodeId) -> None:
        """Advance past an id that was assigned elsewhere.

        Args:
            node_id: Id already in use by a node of this lineage.
        """
        if node_id.index >= self._next_index:
            self._next_index = node_id.index + 1

    @property
    def next_index(self) -> int:
        """Index the next allocate() call will use."""
        return self._next_index
