"""
aptertree - Append-only Tree Implementation

`aptertree` is a Python module with three primary classes: Tree, NodeRef and Children.
A tree stores its nodes in flat sequences, each node records only the position of its parent.
Nodes are addressed by NodeRef handles and children are discovered by scanning (Children).
"""

from .tree import Tree
from .node import NodeRef
from .children import Children
