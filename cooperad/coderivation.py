"""
Extending a local differential to a coderivation.

You say what the differential does on some spanning set of terms.
This module extends that to every term by distributing it over the
comultiplication, so that (modulo the reassembly policy) the result obeys

	Δ(d t) = (d ⊗ id + id ⊗ d)(Δ t)

For each cut (x, y) of t, the local rule is applied to the left leg
and, with the sign (-1)^|x|, to the right leg. Each modified pair is then
glued back into a single term by the reassembler, and the lot is merged.

A term with no cuts at all has nothing to distribute over. Such terms
are the generators, and there the local rule is simply the answer.

By default the right leg sees the local rule, not the extended one.
Coderivations generated from local data apply that data once per leg.
Pass recursive=True to apply the extended differential to the right
leg instead, and let the validator tell you which one your cooperad wants.
"""
from typing import Callable
from .formal import Sum, Weighted, normalize
from .grading import koszul
from .ontology import Cooperad, DgCooperad
from .reassembly import Reassembler, LEFT_WINS

LOCAL = Callable[[object], Sum]

class Coderivation[T]:
	"""
	A callable d: T -> Sum, built from a cooperad and a local rule.
	No state survives between calls.
	"""
	def __init__(self, cooperad: Cooperad[T], d_local: LOCAL, reassembler: Reassembler[T] = LEFT_WINS, recursive=False):
		self.cooperad = cooperad
		self.d_local = d_local
		self.reassembler = reassembler
		self.recursive = recursive

	def __call__(self, t: T) -> Sum:
		cooperad = self.cooperad
		pairs = cooperad.delta(t)
		if not pairs:
			return normalize(self.d_local(t), cooperad.key)
		on_right = self if self.recursive else self.d_local
		glue = self.reassembler.reassemble
		pieces = []
		for c, cut in pairs:
			x, y = cut
			for a, dx in self.d_local(x):
				pieces.append(Weighted(c * a, glue(dx, y, cut)))
			s = koszul(cooperad.degree(x), 1)
			for b, dy in on_right(y):
				pieces.append(Weighted(c * s * b, glue(x, dy, cut)))
		return normalize(pieces, cooperad.key)


def coderivation_from_local[T](cooperad: Cooperad[T], d_local: LOCAL, reassembler: Reassembler[T] = LEFT_WINS, recursive=False) -> Callable[[T], Sum]:
	return Coderivation(cooperad, d_local, reassembler, recursive)


class ExtendedDgCooperad[T](DgCooperad[T]):
	""" A base cooperad with its extended differential riding along. """
	def __init__(self, base: Cooperad[T], d: Callable[[T], Sum]):
		self.base = base
		self._d = d
	def delta(self, t: T) -> Sum: return self.base.delta(t)
	def key(self, t: T) -> str: return self.base.key(t)
	def degree(self, t: T) -> int: return self.base.degree(t)
	def d(self, t: T) -> Sum: return self._d(t)
	def __repr__(self): return "<dg %s>" % type(self.base).__name__


def make_dg_cooperad[T](base: Cooperad[T], d_local: LOCAL, reassembler: Reassembler[T] = LEFT_WINS, recursive=False) -> DgCooperad[T]:
	return ExtendedDgCooperad(base, coderivation_from_local(base, d_local, reassembler, recursive))
