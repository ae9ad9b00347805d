"""
Oracles for checking a differential on a finite batch of terms.

These never raise. Whatever goes wrong comes back as data: a flag and a
list of messages, each naming the offending term by its key. That makes
them suitable for use directly as test-suite oracles.

The co-Leibniz check is the important one. The nilpotency check
(d∘d = 0) is offered alongside, but nothing in the construction of a
differential relies on it.
"""
from typing import Iterable, NamedTuple, Optional
from .diagnostics import Report
from .formal import Sum, Weighted, normalize, scale, equal, pair_key
from .grading import koszul
from .ontology import DgCooperad
from .reassembly import ReassemblyError

class ValidationResult(NamedTuple):
	passed: bool
	failures: list[str]


def co_leibniz_sides(dg: DgCooperad, t) -> tuple[Sum, Sum]:
	"""
	Both sides of Δ(d t) = (d ⊗ id + id ⊗ d)(Δ t), unnormalized.
	Reassembly trouble inside d propagates from here.
	"""
	left = []
	for coef, dt in dg.d(t):
		left.extend(scale(coef, dg.delta(dt)))
	right = []
	for coef, (x, y) in dg.delta(t):
		for a, dx in dg.d(x):
			right.append(Weighted(coef * a, (dx, y)))
		sign = koszul(dg.degree(x), 1)
		for b, dy in dg.d(y):
			right.append(Weighted(coef * sign * b, (x, dy)))
	return tuple(left), tuple(right)


def _check_each(name, dg, test_terms, report, predicate) -> ValidationResult:
	failures = []
	for t in test_terms:
		label = dg.key(t)
		try:
			good = predicate(t)
		except ReassemblyError as ex:
			failures.append("Reassembly failed for term: %s: %s" % (label, ex))
			report.info(name, "could not reassemble", label)
			continue
		if good:
			report.info(name, "holds for", label)
		else:
			failures.append("%s failed for term: %s" % (name, label))
			report.info(name, "FAILS for", label)
	for f in failures: report.issue(f)
	return ValidationResult(not failures, failures)


def validate_co_leibniz_law(dg: DgCooperad, test_terms: Iterable, report: Optional[Report] = None) -> ValidationResult:
	key = pair_key(dg.key)
	def holds(t):
		left, right = co_leibniz_sides(dg, t)
		return equal(left, right, key)
	return _check_each("Co-Leibniz", dg, test_terms, report or Report(), holds)


def validate_nilpotency(dg: DgCooperad, test_terms: Iterable, report: Optional[Report] = None) -> ValidationResult:
	def holds(t):
		ddt = [Weighted(coef * c, term) for coef, dt in dg.d(t) for c, term in dg.d(dt)]
		return not normalize(ddt, dg.key)
	return _check_each("Nilpotency", dg, test_terms, report or Report(), holds)
