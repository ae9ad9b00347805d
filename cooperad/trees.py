"""
Planar rooted trees, and a cooperad built out of cutting them.

The engine proper never looks in here. This is one concrete supplier
of the Cooperad contract, and the one the tests and the command line use.

Two flavors of cutting live here:

admissible_cuts
	Every admissible cut: at most one cut on each root-to-leaf path.
	Each yields a (forest, trunk) pair, the forest being whatever fell off.
	The empty cut is included.

simple_cuts
	One cut per non-root vertex, snipping the edge above it.
	Each yields a Cut which knows the path to the vertex it removed,
	so the pieces can be put back together exactly. TreeCooperad uses these.

A Context is a tree with one hole in it. Rather than store the holey tree,
it stores the path to the hole, because the trunk it applies to may have
been rewritten since the cut was made (for instance, relabeled by a
differential). Whether the path still fits is checked at fill time.
"""
import itertools, json, re
from typing import Callable, Iterable, Sequence
from boozetools.support.foundation import Visitor
from .formal import Sum, Weighted
from .grading import Degree
from .ontology import Cooperad
from .reassembly import ReassemblyError

class Tree:
	def __init__(self, label, kids: Iterable["Tree"] = ()):
		self.label = label
		self.kids = tuple(kids)
	def __repr__(self): return render(self)

class Hole:
	""" Marks the spot in a one-hole context. """
	def __repr__(self): return "□"

HOLE = Hole()
Forest = tuple[Tree, ...]

def tree(label, kids: Iterable[Tree] = ()) -> Tree: return Tree(label, kids)
def leaf(label) -> Tree: return Tree(label)

def counit(t: Tree) -> int:
	return 0 if t.kids else 1

#########################

_PLAIN_LABEL = re.compile(r'[^\s(),"|\[\]]+')

def _show_label(text:str) -> str:
	# Labels that would confuse the reader get quoted, so keys stay unambiguous.
	return text if _PLAIN_LABEL.fullmatch(text) else json.dumps(text)

class Render(Visitor):
	""" Return the planar string form of a tree. Keys are made of these. """
	def __init__(self, show: Callable = str):
		self.show = show
	def visit_Tree(self, t: Tree):
		head = _show_label(self.show(t.label))
		if not t.kids: return head
		return "%s(%s)" % (head, ", ".join(self.visit(k) for k in t.kids))
	@staticmethod
	def visit_Hole(h: Hole): return repr(h)

class Plug(Visitor):
	""" Rebuild a tree, with something in place of the hole. """
	def __init__(self, excised):
		self.excised = excised
	def visit_Tree(self, t: Tree):
		return Tree(t.label, [self.visit(k) for k in t.kids])
	def visit_Hole(self, _: Hole):
		return self.excised

def render(t, show: Callable = str) -> str: return Render(show).visit(t)

def key_of(t: Tree, show: Callable = str) -> str: return render(t, show)

def key_forest(forest: Iterable[Tree], show: Callable = str) -> str:
	return "[%s]" % "|".join(key_of(t, show) for t in forest)

#########################

def edge_degree(t: Tree) -> Degree: return len(t.kids)
def leaf_degree(t: Tree) -> Degree: return 0

#########################

def admissible_cuts(root: Tree) -> list[tuple[Forest, Tree]]:
	"""
	For each child, either cut the edge above it (taking the whole child
	into the forest) or descend and cut somewhere inside. The cuts of a
	tree are the cartesian product of those choices over its children.
	"""
	if not root.kids:
		return [((), root)]
	per_child = []
	for kid in root.kids:
		choices = [((kid,), None)]
		choices.extend(admissible_cuts(kid))
		per_child.append(choices)
	cuts = []
	for combo in itertools.product(*per_child):
		forest = tuple(pruned for each_forest, _ in combo for pruned in each_forest)
		trunk = Tree(root.label, [kid for _, kid in combo if kid is not None])
		cuts.append((forest, trunk))
	return cuts


def _splice(t, path: Sequence[int], replace: Callable[[tuple, int], tuple]) -> Tree:
	if not isinstance(t, Tree):
		raise ReassemblyError("%r has no children to descend into" % (t,))
	head, rest = path[0], path[1:]
	if rest:
		if head >= len(t.kids):
			raise ReassemblyError("%r has no child at %d" % (t, head))
		inner = _splice(t.kids[head], rest, replace)
		return Tree(t.label, t.kids[:head] + (inner,) + t.kids[head+1:])
	return Tree(t.label, replace(t.kids, head))


class Context:
	""" A tree with one hole, recorded as the path of child-indices to the hole. """
	def __init__(self, path: Sequence[int]):
		assert path, "The root is not excisable."
		self.path = tuple(path)

	def frame(self, trunk: Tree) -> Tree:
		""" The trunk, with a hole where the excised piece used to be. """
		def insert(kids, at):
			if at > len(kids):
				raise ReassemblyError("Only %d children; cannot make a hole at %d" % (len(kids), at))
			return kids[:at] + (HOLE,) + kids[at:]
		return _splice(trunk, self.path, insert)

	def fill(self, trunk: Tree, excised: Tree) -> Tree:
		return Plug(excised).visit(self.frame(trunk))

	def __repr__(self): return "<Context %s>" % "/".join(map(str, self.path))


class Cut(tuple):
	""" An (excised, trunk) pair that remembers where the excision happened. """
	context: Context
	def __new__(cls, excised: Tree, trunk: Tree, context: Context):
		it = super().__new__(cls, (excised, trunk))
		it.context = context
		return it


def simple_cuts(root: Tree) -> list[Cut]:
	""" One cut per non-root vertex, in pre-order. """
	def snip(kids, at): return kids[:at] + kids[at+1:]
	def walk(t: Tree, path: tuple):
		for i, kid in enumerate(t.kids):
			here = path + (i,)
			yield here, kid
			yield from walk(kid, here)
	return [Cut(kid, _splice(root, here, snip), Context(here)) for here, kid in walk(root, ())]


class TreeCooperad(Cooperad[Tree]):
	"""
	Δ(t) = Σ (excised ⊗ trunk) over the simple cuts of t, each with weight one.
	Single vertices have no cuts at all.

	Keys come from show(label). The default is str, under which the labels
	1 and "1" are the same term. If your labels mix types, pass show=repr.
	"""
	def __init__(self, degree: Callable[[Tree], Degree] = edge_degree, show: Callable = str):
		self._degree = degree
		self._show = show
	def delta(self, t: Tree) -> Sum: return tuple(Weighted(1, cut) for cut in simple_cuts(t))
	def key(self, t: Tree) -> str: return key_of(t, self._show)
	def degree(self, t: Tree) -> Degree: return self._degree(t)


class GradedTree(Tree):
	""" A tree which carries its own degree. """
	def __init__(self, label, kids: Iterable[Tree] = (), degree: Degree = 0):
		super().__init__(label, kids)
		self.degree = degree

def graded_tree(t: Tree, degree: Callable[[Tree], Degree] = edge_degree) -> GradedTree:
	return GradedTree(t.label, t.kids, degree(t))


class GradedTreeCooperad(TreeCooperad):
	"""
	Both legs of every cut sit one degree below the tree they came from.
	Trees without a degree of their own (say, fresh out of a differential
	or a reassembler) fall back on the degree function.
	"""
	def delta(self, t: Tree) -> Sum:
		lower = self.degree(t) - 1
		def regrade(piece): return GradedTree(piece.label, piece.kids, lower)
		return tuple(
			Weighted(1, Cut(regrade(excised), regrade(trunk), cut.context))
			for cut in simple_cuts(t) for excised, trunk in [cut]
		)
	def degree(self, t: Tree) -> Degree:
		return t.degree if isinstance(t, GradedTree) else self._degree(t)

#########################

class TreeSyntaxError(ValueError):
	pass

_TOKEN = re.compile(r'\s*(?:("(?:[^"\\]|\\.)*")|([^\s(),"]+)|(\S))?')

def parse_tree(text: str) -> Tree:
	""" Read back what render() writes, e.g. f(g(x, y), z). Labels come back as strings. """
	tokens = []
	pos = 0
	while pos < len(text):
		m = _TOKEN.match(text, pos)
		if m.group(1):
			try: label = json.loads(m.group(1))
			except json.JSONDecodeError as ex:
				raise TreeSyntaxError("Bad quoted label %s at column %d in %r" % (m.group(1), m.start(1), text)) from ex
			tokens.append(("label", label, m.start(1)))
		elif m.group(2): tokens.append(("label", m.group(2), m.start(2)))
		elif m.group(3): tokens.append((m.group(3), m.group(3), m.start(3)))
		pos = m.end()
	tokens.append(("end", None, len(text)))
	index = 0

	def expect(kind):
		nonlocal index
		token = tokens[index]
		if token[0] != kind:
			what = "end of text" if token[0] == "end" else repr(token[1])
			raise TreeSyntaxError("Expected %s but found %s at column %d in %r" % (kind, what, token[2], text))
		index += 1
		return token[1]

	def one_tree():
		label = expect("label")
		if tokens[index][0] != "(": return Tree(label)
		expect("(")
		kids = [one_tree()]
		while tokens[index][0] == ",":
			expect(",")
			kids.append(one_tree())
		expect(")")
		return Tree(label, kids)

	it = one_tree()
	expect("end")
	return it
