"""
Formal sums: finite weighted combinations of terms.

A sum is a plain tuple of (coefficient, term) pairs. Nothing here ever
mutates a sum; every operation hands back a fresh tuple.

Terms are opaque. The only notion of equality between two terms is that
they produce the same key, so every operation which needs to merge
summands takes the key function as a parameter.
"""
from numbers import Number
from typing import Any, Callable, Iterable, NamedTuple

class Weighted(NamedTuple):
	coef: Number
	term: Any

Sum = tuple[Weighted, ...]
KEY = Callable[[Any], str]

def zero() -> Sum:
	return ()

def sum_of(*items) -> Sum:
	""" Wrap literal summands. Plain (coef, term) pairs are welcome. """
	return tuple(Weighted(*item) for item in items)

def normalize(s: Iterable[Weighted], key: KEY) -> Sum:
	"""
	Merge summands with equal keys and drop whatever cancels to zero.
	Keys come out in the order they were first seen, and the first term
	seen under each key stands for all of them.
	"""
	coefs, terms = {}, {}
	for coef, term in s:
		k = key(term)
		if k in coefs:
			coefs[k] += coef
		else:
			coefs[k], terms[k] = coef, term
	return tuple(Weighted(c, terms[k]) for k, c in coefs.items() if c != 0)

def scale(c: Number, s: Iterable[Weighted]) -> Sum:
	return tuple(Weighted(c * coef, term) for coef, term in s)

def plus(*sums: Iterable[Weighted]) -> Sum:
	# Concatenation. Normalize afterwards if you care about duplicates.
	return tuple(w for s in sums for w in s)

def coefficients(s: Iterable[Weighted], key: KEY) -> dict[str, Number]:
	return {key(term): coef for coef, term in normalize(s, key)}

def equal(this: Iterable[Weighted], that: Iterable[Weighted], key: KEY) -> bool:
	"""
	Equality as formal sums: a key missing from one side counts as a zero
	coefficient there. Coefficients are compared exactly.
	"""
	mine, theirs = coefficients(this, key), coefficients(that, key)
	return all(mine.get(k, 0) == theirs.get(k, 0) for k in mine.keys() | theirs.keys())

def pair_key(key: KEY) -> KEY:
	""" Lift a key on terms to a key on tensor pairs. """
	def key_pair(pair):
		x, y = pair
		return "%s ⊗ %s" % (key(x), key(y))
	return key_pair

def render(s: Sum, show: Callable[[Any], str]=str) -> str:
	if not s: return "0"
	text = ""
	for coef, term in s:
		if text:
			sign, coef = (" - ", -coef) if coef < 0 else (" + ", coef)
		else:
			sign = ""
		factor = "" if coef == 1 else "-" if coef == -1 else "%s*" % coef
		text += sign + factor + show(term)
	return text
