#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Tree structure in `aptertree`.

The :class:`Tree` object stores a rooted tree in two parallel flat sequences: the node values and,
for every node, the position of its parent. Nodes are addressed by :class:`NodeRef` handles (positions)
and can only be appended: a node is never removed and its parent never changes.
Thus the parent of a node always has a smaller position than the node itself, the root lives at position 0.

Finding the children of a node needs a forward scan (see :class:`Children`), appending a node is O(1).
"""

import logging
from array import array
from uuid import uuid1
from collections import defaultdict
from typing import Any, Union, Hashable

from .children import Children
from .exceptions import NodeRefOutOfRangeError, ForeignNodeRefError, ConcurrentMutationError
from .node import NodeRef

logger = logging.getLogger(__name__)


class Tree:
    """
    Append-only tree with parent offsets stored in a compact array.
    """

    node_ref_class = NodeRef  # Subclasses can have own type of node references.
    children_class = Children  # ... and own child enumerator.

    def __init__(self, root_value: Any, capacity: Union[int, None] = None, tree_id: Union[Hashable, None] = None,
                 strict: bool = True):
        """
        Initiate a new tree with exactly one node, the root, holding ``root_value``.

        :param root_value: The value of the root node.
        :param capacity: Expected number of nodes. Only a hint, it has no observable effect.
        :param tree_id: The identifier of the tree (a new UUID if not given).
        :param strict: Reject references produced by other tree instances (see :class:`ForeignNodeRefError`).
        """
        assert issubclass(self.node_ref_class, NodeRef), 'node_ref_class should be type of NodeRef or subclass!'

        if capacity is not None:
            if isinstance(capacity, bool) or not isinstance(capacity, int):
                raise TypeError(f'Capacity must be int or None not {type(capacity)}!')
            elif capacity < 0:
                raise ValueError(f'Capacity can not be negative ({capacity})!')
        #: Python lists and arrays grow on their own, the hint is kept for introspection only.
        self.capacity_hint: Union[int, None] = capacity

        if tree_id is None:
            tree_id = str(uuid1())  # Generate a UUID from a host ID, sequence number, and the current time.
        self.tree_id: Hashable = tree_id
        self.strict: bool = strict

        #: Node values, indexed by position.
        self._values = [root_value]
        #: Parent position of every node. The root points to itself (sentinel, never reported as a parent).
        self._parents = array('Q', (0,))
        #: Incremented on every mutation, active child enumerators check it.
        self._generation = 0

        logger.debug('Created tree %s (capacity hint: %s, strict: %s)', self.tree_id, capacity, strict)

    @classmethod
    def with_capacity(cls, root_value: Any, capacity: int, **kwargs):
        """
        Same as the constructor, but the capacity hint is mandatory.
        """
        if capacity is None:
            raise ValueError('Capacity can not be None, use the constructor without a hint instead!')
        return cls(root_value, capacity=capacity, **kwargs)

    #: Line types for show(): (vertical line, tee, corner)
    _dt = {
        'ascii': ('|', '|-- ', '+-- '),
        'ascii-ex': ('│', '├── ', '└── '),
        'ascii-exr': ('│', '├── ', '╰── '),
        'ascii-em': ('║', '╠══ ', '╚══ '),
        'ascii-emv': ('║', '╟── ', '╙── '),
        'ascii-emh': ('│', '╞══ ', '╘══ '),
    }

    # HELPER FUNCTIONS -------------------------------------------------------------------------------------------------
    def _make_ref(self, idx: int):
        return self.node_ref_class(idx, self.tree_id)

    def _check_ref(self, node) -> int:
        """
        Validate a node reference against this tree and return its position (used internally).
        """
        if not isinstance(node, NodeRef):
            raise TypeError(f'Node reference must be NodeRef not {type(node)}!')

        if self.strict and node.tree_id is not None and node.tree_id != self.tree_id:
            raise ForeignNodeRefError(f'Node reference ({node!r}) belongs to tree ({node.tree_id}) '
                                      f'not to ({self.tree_id})!')

        idx = node.idx
        if idx >= len(self._values):
            raise NodeRefOutOfRangeError(f'Node reference ({node!r}) is out of range, the tree has only '
                                         f'{len(self._values)} nodes!')
        return idx

    # SIMPLE READER FUNCTIONS ------------------------------------------------------------------------------------------
    def __len__(self) -> int:
        """
        Return the number of nodes in the tree (always at least 1).
        """
        return len(self._values)

    def __contains__(self, node) -> bool:
        if not isinstance(node, NodeRef):
            return False
        elif self.strict and node.tree_id is not None and node.tree_id != self.tree_id:
            return False
        return node.idx < len(self._values)

    def __iter__(self):
        return self.nodes()

    @property
    def root(self):
        """
        The reference of the root node (position 0).
        """
        return self._make_ref(0)

    def value(self, node) -> Any:
        """
        Get the value stored in ``node``.
        NodeRefOutOfRangeError exception is raised if ``node`` is not in the tree.
        """
        return self._values[self._check_ref(node)]

    def __getitem__(self, node) -> Any:
        return self.value(node)

    def parent(self, node):
        """
        Get the reference of the direct parent of ``node`` or None for the root.
        """
        idx = self._check_ref(node)
        if idx == 0:
            return None  # The root has no parent, parents[0] is only a placeholder.
        return self._make_ref(self._parents[idx])

    def nodes(self):
        """
        Return the iterator of all node references in the order the nodes were added (root first).
        """
        return (self._make_ref(i) for i in range(len(self._values)))

    def is_leaf(self, node) -> bool:
        """
        Return true if ``node`` has no children. Scans like ``scan_children()``.
        """
        return next(self.scan_children(node), None) is None

    # Enumerator returning READER FUNCTIONS ----------------------------------------------------------------------------
    def scan_children(self, node):
        """
        Return a :class:`Children` iterator over the direct children of ``node`` in insertion order.
        The tree must not be modified until the iterator is exhausted.
        """
        self._check_ref(node)
        return self.children_class(self, node)

    # MODIFYING FUNCTIONS ----------------------------------------------------------------------------------------------
    def set_value(self, node, value: Any) -> None:
        """
        Replace the value stored in ``node``.
        """
        idx = self._check_ref(node)
        self._values[idx] = value
        self._generation += 1

    def __setitem__(self, node, value: Any) -> None:
        self.set_value(node, value)

    def push_child(self, parent, value: Any):
        """
        Add a new node with ``value`` as the last child of ``parent``.
        Either both the value and the parent position are appended or the tree is left unchanged.

        :return: The reference of the new node, its position is always ``len(tree) - 1``.
        """
        pidx = self._check_ref(parent)

        self._values.append(value)
        try:
            self._parents.append(pidx)
        except BaseException:
            self._values.pop()
            raise
        self._generation += 1

        return self._make_ref(len(self._values) - 1)

    # PRINT RELATED FUNCTIONS ------------------------------------------------------------------------------------------
    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f'{name}(values={self._values!r}, parents={self._parents.tolist()!r})'

    def __str__(self):
        return self.show()

    def show(self, node=None, line_type='ascii-ex', get_label_fun=str, record_end='\n'):
        """
        Return the (sub)tree as string in hierarchy style. Children are listed in insertion order.

        :param node: the reference of the node to start from (the root if None).
        :param line_type: such as 'ascii', 'ascii-ex' (default), 'ascii-exr', 'ascii-em', 'ascii-emv', 'ascii-emh'
            to the change graphical form.
        :param get_label_fun: A function to define how to print the values
        :param record_end: The ending character for each record (e.g. newline)

        For example:

        .. code-block:: bash

            ROOT
            ├── A
            │   ├── A1
            │   └── A2
            └── B
        """
        return ''.join(self.show_iter(node, line_type, get_label_fun, record_end))

    def show_iter(self, node=None, line_type='ascii-ex', get_label_fun=str, record_end='\n'):
        """
        Same as show(), but returns an iterator of the lines. Set up depth-first search with an explicit stack.

        The children are grouped by parent in one pass before rendering, the grouping is not kept.
        The tree must not be modified until the iterator is exhausted.
        """
        if node is None:
            node = self.root
        start = self._check_ref(node)

        line_elems = self._dt.get(line_type)
        if line_elems is None:
            raise ValueError(f'Undefined line type ({line_type})! Must choose from {set(self._dt)}!')
        dt_vertical_line, dt_line_tee, dt_line_corner = line_elems

        generation = self._generation
        children = self._group_children(start)

        stack = [(start, '', '')]  # (position, prefix of its line, prefix of its children's lines)
        while len(stack) > 0:
            if self._generation != generation:
                raise ConcurrentMutationError(f'Tree ({self.tree_id}) was mutated while rendering it!')

            idx, pre, children_pre = stack.pop()
            label = get_label_fun(self._values[idx])
            yield f'{pre}{label}{record_end}'

            curr_children = children.pop(idx, ())
            idxlast = len(curr_children) - 1
            for pos in range(idxlast, -1, -1):  # Reversed, the first child must be popped first.
                if pos == idxlast:
                    stack.append((curr_children[pos], children_pre + dt_line_corner, children_pre + ' ' * 4))
                else:
                    stack.append((curr_children[pos], children_pre + dt_line_tee,
                                  children_pre + dt_vertical_line + ' ' * 3))

    def _group_children(self, start: int):
        """
        Map the positions after ``start`` to their parents: {parent position: [child positions in order]}.
        """
        children = defaultdict(list)
        parents = self._parents
        for i in range(start + 1, len(parents)):
            children[parents[i]].append(i)
        return children
