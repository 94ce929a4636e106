import unittest

from aptertree import NodeRef, Tree


class NodeRefCase(unittest.TestCase):
    def setUp(self):

        self.ref0 = NodeRef(0)
        self.ref1 = NodeRef(1)
        self.ref1_tagged = NodeRef(1, 'tree 1')
        self.ref2 = NodeRef(2, 'tree 2')

    def test_initialization(self):
        self.assertEqual(self.ref0.idx, 0)
        self.assertIsNone(self.ref0.tree_id)
        self.assertEqual(self.ref1_tagged.idx, 1)
        self.assertEqual(self.ref1_tagged.tree_id, 'tree 1')

        with self.assertRaises(ValueError):
            NodeRef(-1)
        with self.assertRaises(TypeError):
            NodeRef('1')
        with self.assertRaises(TypeError):
            NodeRef(1.0)
        with self.assertRaises(TypeError):
            NodeRef(True)

    def test_read_only(self):
        with self.assertRaises(AttributeError):
            self.ref1.idx = 5
        with self.assertRaises(AttributeError):
            self.ref1.tree_id = 'other'

    def test_is_root(self):
        self.assertTrue(self.ref0.is_root())
        self.assertFalse(self.ref1.is_root())
        self.assertFalse(self.ref2.is_root())

    def test_equality(self):
        # Only the position counts.
        self.assertEqual(self.ref1, self.ref1_tagged)
        self.assertEqual(self.ref1, NodeRef(1))
        self.assertNotEqual(self.ref0, self.ref1)
        self.assertNotEqual(self.ref1, 1)
        self.assertEqual(hash(self.ref1), hash(self.ref1_tagged))
        self.assertEqual(len({self.ref0, self.ref1, self.ref1_tagged, self.ref2}), 3)

    def test_ordering(self):
        self.assertTrue(self.ref0 < self.ref1 < self.ref2)
        self.assertTrue(self.ref1 <= self.ref1_tagged <= self.ref2)
        self.assertTrue(self.ref2 > self.ref1 >= self.ref1_tagged)
        self.assertFalse(self.ref2 <= self.ref0)
        self.assertEqual(sorted([self.ref2, self.ref0, self.ref1]), [self.ref0, self.ref1, self.ref2])
        with self.assertRaises(TypeError):
            self.ref0 < 1

    def test_repr(self):
        self.assertEqual(repr(self.ref2), 'NodeRef(2)')

    def test_refs_from_tree(self):
        tree = Tree('root', tree_id='t')
        child = tree.push_child(tree.root, 'child')
        self.assertEqual(tree.root.tree_id, 't')
        self.assertEqual(child.tree_id, 't')
        self.assertEqual(child, NodeRef(1))
        self.assertTrue(tree.root.is_root())
