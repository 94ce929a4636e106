"""
Child enumerator of aptertree.

Children are not stored by the tree, they are discovered by scanning the parent offsets forward from the
position right after the parent (a child can never precede its parent).
"""

import logging

from .exceptions import ConcurrentMutationError

logger = logging.getLogger(__name__)


class Children:
    """
    Single pass, lazy iterator over the direct children of one node, in the order they were added.

    The iterator is either active (with a cursor) or exhausted. Exhausted is terminal: nodes added to the tree
    later are not picked up, build a new iterator with ``Tree.scan_children()`` instead.
    The tree must not be mutated while the iterator is active, ``ConcurrentMutationError`` is raised on the
    next step if it was. This includes ``Tree.set_value()`` on any node, even on a child already returned:
    collect the children first (``list(tree.scan_children(p))``) to rewrite their values in a loop.
    """

    def __init__(self, tree, parent):
        self._tree = tree
        self._parent = parent
        self._generation = tree._generation
        self._cursor = parent.idx + 1  # None when exhausted.

    @property
    def parent(self):
        return self._parent

    @property
    def exhausted(self) -> bool:
        return self._cursor is None

    def __iter__(self):
        return self

    def __next__(self):
        if self._cursor is None:
            raise StopIteration

        tree = self._tree
        if tree._generation != self._generation:
            logger.debug('Tree %s was mutated while scanning the children of %r', tree.tree_id, self._parent)
            raise ConcurrentMutationError(f'Tree ({tree.tree_id}) was mutated while scanning the children of '
                                          f'{self._parent!r}!')

        parents = tree._parents
        pidx = self._parent.idx
        for i in range(self._cursor, len(parents)):
            if parents[i] == pidx:
                self._cursor = i + 1
                return tree._make_ref(i)

        self._cursor = None
        raise StopIteration

    def __repr__(self) -> str:
        state = 'exhausted' if self._cursor is None else f'cursor={self._cursor}'
        return f'{self.__class__.__name__}(parent={self._parent!r}, {state})'
