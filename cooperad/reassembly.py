"""
Putting a cut back together.

The coderivation algorithm modifies one leg of a cut (x, y) and then
needs the single term which *would have* split into the modified pair.
That is a plug-the-piece-back-into-its-context operation, and in general
it needs to know where the cut happened. A bare (left, right) pair does
not say, so the policy is pluggable.

Every reassembler is handed the original pair as ``cut``. Cooperads which
remember their cut sites can hang a ``context`` on that pair; see
``trees.Cut`` for one that does.
"""
from abc import ABC, abstractmethod

class ReassemblyError(Exception):
	""" The pieces cannot be put back together with the information at hand. """


class Reassembler[T](ABC):
	@abstractmethod
	def reassemble(self, left: T, right: T, cut=None) -> T:
		"""
		Given the two legs of one cut (one of them possibly modified),
		produce the whole term. May raise ReassemblyError.
		"""


class LeftWins(Reassembler):
	"""
	Return the left piece and forget the right.

	This is only right when the comultiplication keeps the entire cut-site
	context inside the left leg. Some admissible-cut schemes do; many do not.
	For those, this silently produces a differential which flunks the
	co-Leibniz check. It is the default because it never fails.
	"""
	def reassemble(self, left, right, cut=None):
		return left

LEFT_WINS = LeftWins()


class ContextReassembler(Reassembler):
	"""
	Plug the left piece into the right piece at the hole the cut left behind.

	The original pair must carry a ``context`` with a ``fill(trunk, excised)``
	method. Pairs without one are refused loudly rather than guessed at.
	"""
	def reassemble(self, left, right, cut=None):
		context = getattr(cut, "context", None)
		if context is None:
			raise ReassemblyError("No cut-site context came along with %r" % (cut,))
		return context.fill(right, left)
