import sys, random
from typing import Any

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Jeepers', "Heavens to Betsy", 'Nuts', 'Rats', 'Woe is me',
	]

	resignations = [
		'The signs do not add up.',
		'Something did not cancel.',
		'The law is broken.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	"""
	Collects whatever went wrong, so callers decide what to do about it.
	With verbose set, also narrates progress to stderr.
	"""
	issues : list[Any]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self.issues = []

	def ok(self): return not self.issues
	def sick(self): return bool(self.issues)

	def issue(self, it:Any):
		self.issues.append(it)

	def reset(self):
		self.issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		for it in self.issues:
			print(" -", it, file=sys.stderr)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self.issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
