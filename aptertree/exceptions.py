class NodeRefError(Exception):
    """
    Basic node reference error
    """
    pass


class NodeRefOutOfRangeError(NodeRefError, IndexError):
    """
    Exception throwed if a node reference points past the end of a tree.
    """
    pass


class ForeignNodeRefError(NodeRefError):
    """
    Exception throwed in strict mode if a node reference was produced by another tree instance.
    """
    pass


class ConcurrentMutationError(RuntimeError):
    """
    Exception throwed if a tree is mutated while a child enumerator over it is still active.
    """
    pass
