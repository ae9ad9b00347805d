"""
A few local differentials on trees, ready to hand to make_dg_cooperad.

Each looks only at the root of the tree it is given, and answers zero
for anything it does not care about.
"""
from .formal import Sum, sum_of, zero, plus
from .trees import Tree

def zero_differential(t) -> Sum:
	""" The strict case: nothing moves. """
	return zero()

def leaf_differential(t: Tree) -> Sum:
	if t.kids: return zero()
	return sum_of((1, Tree("d(%s)" % t.label)))

def binary_node_differential(t: Tree) -> Sum:
	""" Swap the children of a binary node, at the price of a sign. """
	if len(t.kids) != 2: return zero()
	first, second = t.kids
	return sum_of((-1, Tree(t.label, (second, first))))

def label_specific_differential(target, replacement):
	def relabel(t: Tree) -> Sum:
		if t.label != target: return zero()
		return sum_of((1, Tree(replacement, t.kids)))
	return relabel

def compose_local(*diffs):
	""" The sum of several local differentials. """
	def composite(t) -> Sum:
		return plus(*(d(t) for d in diffs))
	return composite
