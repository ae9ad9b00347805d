import io, sys, importlib
import unittest
from contextlib import redirect_stdout, redirect_stderr

from cooperad import cmdline

def _run(*argv):
	out, err = io.StringIO(), io.StringIO()
	with redirect_stdout(out), redirect_stderr(err):
		status = cmdline.run(cmdline.parser.parse_args(list(argv)))
	return status, out.getvalue(), err.getvalue()

class CommandLineTests(unittest.TestCase):
	def test_exact_reassembly_passes(self):
		status, out, err = _run("f(a, b)", "-d", "a=a*", "-r", "context", "-g", "leaf")
		self.assertIsNone(status)
		self.assertIn("Δ = a ⊗ f(b) + b ⊗ f(a)", out)
		self.assertIn("d = f(a*, b)", out)
		self.assertIn("Looks plausible", err)

	def test_left_wins_fails(self):
		status, out, err = _run("f(a, b)", "-d", "a=a*")
		self.assertEqual(1, status)
		self.assertIn("d = a*", out)
		self.assertIn("Co-Leibniz failed for term: f(a, b)", err)

	def test_nilpotency_flag(self):
		status, out, err = _run("a", "-n")
		self.assertEqual(1, status)
		self.assertIn("Nilpotency failed for term: a", err)

	def test_composed_differentials(self):
		status, out, err = _run("f(a)", "-d", "zero", "-d", "zero")
		self.assertIsNone(status)
		self.assertIn("d = 0", out)

	def test_unreadable_tree(self):
		status, out, err = _run("f(a,")
		self.assertEqual(1, status)
		self.assertIn("Expected label", err)

	def test_bad_escape_in_label(self):
		status, out, err = _run('f("\\q")')
		self.assertEqual(1, status)
		self.assertEqual("", out)
		self.assertIn("Bad quoted label", err)

	def test_import_leaves_sys_path_alone(self):
		before = list(sys.path)
		importlib.reload(cmdline)
		self.assertEqual(before, sys.path)

	def test_unknown_differential(self):
		with redirect_stderr(io.StringIO()):
			self.assertRaises(SystemExit, _run, "a", "-d", "bogus")


if __name__ == '__main__':
	unittest.main()
