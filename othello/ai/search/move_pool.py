"""
Recycling pool for move-chain records.

A best-move search builds one chain of predicted moves per candidate at every
ply and throws most of them away. Records are returned to a free list instead
of being dropped so that deep searches reuse the same handful of objects.
"""
from typing import Iterator, List, Optional, Tuple


class MoveRecord:
    """
    One move in a predicted continuation.

    ``next`` links to the following move. ``tail`` is only meaningful on the
    head of a chain and points at the chain's last record, which lets a whole
    chain be spliced in constant time.
    """

    __slots__ = ('row', 'col', 'next', 'tail')

    def __init__(self):
        self.row = 0
        self.col = 0
        self.next = None
        self.tail = None

    def __repr__(self):
        return f"MoveRecord({self.row}, {self.col})"


class MoveRecordPool:
    """
    Free list of MoveRecord objects.

    Not thread-safe; one pool belongs to one search context.
    """

    def __init__(self):
        self._free = None
        self.created = 0
        self.reused = 0

    def acquire(self) -> MoveRecord:
        """Take a record from the free list, or create one if it is empty."""
        record = self._free
        if record is None:
            self.created += 1
            return MoveRecord()
        self._free = record.next
        self.reused += 1
        record.next = None
        record.tail = None
        return record

    def release(self, head: Optional[MoveRecord]):
        """
        Return a whole chain to the free list.

        Args:
            head: First record of the chain, or None for an empty chain
        """
        if head is None:
            return
        head.tail.next = self._free
        self._free = head

    def prepend(self, row: int, col: int, chain: Optional[MoveRecord]) -> MoveRecord:
        """
        Build a new chain head for (row, col) in front of ``chain``.

        The new head inherits the tail of ``chain``, or is its own tail when
        ``chain`` is empty.
        """
        record = self.acquire()
        record.row = row
        record.col = col
        record.next = chain
        record.tail = chain.tail if chain is not None else record
        return record

    def __len__(self) -> int:
        """Number of records currently on the free list."""
        size = 0
        record = self._free
        while record is not None:
            size += 1
            record = record.next
        return size

    def drain(self) -> int:
        """
        Drop every free record.

        Returns:
            int: How many records the free list held
        """
        size = len(self)
        self._free = None
        return size

    def get_stats(self) -> dict:
        """Get pool statistics."""
        return {
            'created': self.created,
            'reused': self.reused,
            'free': len(self),
        }


def iter_chain(head: Optional[MoveRecord]) -> Iterator[Tuple[int, int]]:
    """Iterate (row, col) pairs along a chain."""
    record = head
    while record is not None:
        yield (record.row, record.col)
        record = record.next


def chain_moves(head: Optional[MoveRecord]) -> List[Tuple[int, int]]:
    return list(iter_chain(head))
