#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Node reference in aptertree.

A :class:`NodeRef` is a light handle to one node of a :class:`~aptertree.tree.Tree`: it holds the position (idx)
of the node in the backing sequences of the tree and nothing else. Node values are owned by the tree,
a reference is only meaningful together with the tree that produced it.
"""

from functools import total_ordering
from typing import Hashable, Union


@total_ordering
class NodeRef:
    """
    Handles are compared and hashed by position only, so they can be used as dict keys and set members.
    The ``tree_id`` of the producing tree is recorded for the strict checks of the tree but it is not part
    of the identity of the reference.
    """

    __slots__ = ('_idx', '_tree_id')

    def __init__(self, idx: int, tree_id: Union[Hashable, None] = None):
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise TypeError(f'Node position must be int not {type(idx)}!')
        if idx < 0:
            raise ValueError(f'Node position can not be negative ({idx})!')

        self._idx: int = idx
        #: Identifier of the tree which produced this reference (None for hand-made references).
        self._tree_id: Union[Hashable, None] = tree_id

    @property
    def idx(self) -> int:
        """
        The position of the node in the backing sequences of its tree.
        """
        return self._idx

    @property
    def tree_id(self) -> Union[Hashable, None]:
        return self._tree_id

    def is_root(self) -> bool:
        """
        Return true if the reference points to the root, i.e. position 0.
        """
        return self._idx == 0

    def __eq__(self, other):
        if not isinstance(other, NodeRef):
            return NotImplemented
        return self._idx == other._idx

    def __lt__(self, other):
        if not isinstance(other, NodeRef):
            return NotImplemented
        return self._idx < other._idx  # Earlier position means created earlier.

    def __hash__(self):
        return hash(self._idx)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._idx})'
