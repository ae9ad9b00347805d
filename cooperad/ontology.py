"""
The contracts this package consumes and produces.

A cooperad is whatever can split a term into weighted ordered pairs of
sub-terms, give every term a canonical key, and say what degree it has.
Concrete cooperads live elsewhere (see trees.py for one); the coderivation
machinery only ever talks to them through these methods.

The methods are assumed, not checked, to agree with each other:
terms with equal keys should have equal deltas and degrees.
"""
from abc import ABC, abstractmethod
from typing import Callable
from .formal import Sum
from .grading import Degree

class Cooperad[T](ABC):
	@abstractmethod
	def delta(self, t: T) -> Sum:
		""" Comultiplication: a formal sum of (left, right) pairs """

	@abstractmethod
	def key(self, t: T) -> str:
		""" A stable textual key: equal keys mean equal terms """

	@abstractmethod
	def degree(self, t: T) -> Degree: pass


class DgCooperad[T](Cooperad[T]):
	""" A cooperad with a differential, which ought to be a coderivation. """
	@abstractmethod
	def d(self, t: T) -> Sum: pass


class FunctionalCooperad[T](Cooperad[T]):
	""" For when you already have the three functions lying around. """
	def __init__(self, delta: Callable[[T], Sum], key: Callable[[T], str], degree: Callable[[T], Degree]):
		self._delta, self._key, self._degree = delta, key, degree
	def delta(self, t: T) -> Sum: return self._delta(t)
	def key(self, t: T) -> str: return self._key(t)
	def degree(self, t: T) -> Degree: return self._degree(t)
