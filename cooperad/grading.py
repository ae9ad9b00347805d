"""
Degrees and the Koszul sign rule.

Swapping two graded things past each other costs (-1)^(|a|*|b|).
Only parity matters, so everything here reduces to a coin-flip.
"""

Degree = int

def koszul(a: Degree, b: Degree) -> int:
	return -1 if (a * b) % 2 else 1

def sign_by_degree(a: Degree) -> int:
	""" The sign for moving a degree-one operator past something of degree a. """
	return koszul(a, 1)
