import unittest

from cooperad.formal import coefficients
from cooperad.local import zero_differential, leaf_differential, binary_node_differential, label_specific_differential, compose_local
from cooperad.trees import key_of, parse_tree

def _apply(d, text):
	return coefficients(d(parse_tree(text)), key_of)

class LocalDifferentialTests(unittest.TestCase):
	def test_zero(self):
		self.assertEqual({}, _apply(zero_differential, "f(a, b)"))

	def test_leaf(self):
		self.assertEqual({'"d(a)"': 1}, _apply(leaf_differential, "a"))
		self.assertEqual({}, _apply(leaf_differential, "f(a)"))

	def test_binary_node(self):
		self.assertEqual({"f(g(b), a)": -1}, _apply(binary_node_differential, "f(a, g(b))"))
		self.assertEqual({}, _apply(binary_node_differential, "f(a)"))
		self.assertEqual({}, _apply(binary_node_differential, "f(a, b, c)"))

	def test_label_specific(self):
		relabel = label_specific_differential("target", "replaced")
		self.assertEqual({"replaced(x, target(y))": 1}, _apply(relabel, "target(x, target(y))"))
		self.assertEqual({}, _apply(relabel, "other(target)"))

	def test_compose_adds(self):
		both = compose_local(leaf_differential, label_specific_differential("a", "b"))
		self.assertEqual({'"d(a)"': 1, "b": 1}, _apply(both, "a"))
		self.assertEqual({}, _apply(compose_local(), "a"))


if __name__ == '__main__':
	unittest.main()
