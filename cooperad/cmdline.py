"""
Extend a local differential over some trees and check the co-Leibniz law.

{0}

For example:

    cooperad "f(a, b)"

will print the comultiplication and the extended differential of f(a, b)
using the leaf differential, then check the co-Leibniz law there.

    cooperad "f(a, b)" -d a=a* -r context -g leaf

does the same with a relabeling differential, exact reassembly, and
everything in degree zero.

    cooperad -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="cooperad",
	description="Extend a local differential on trees to a coderivation, and check it.",
)
parser.add_argument("trees", nargs="+", help="trees written like f(g(x, y), z)")
parser.add_argument('-d', "--differential", action="append", help="zero, leaf, binary, or OLD=NEW to relabel. Repeat to add several. Default: leaf.")
parser.add_argument('-r', "--reassembly", choices=["left", "context"], default="left", help="How to glue a modified cut back together.")
parser.add_argument('-R', "--recursive", action="store_true", help="Apply the extended differential, not the local one, to the right leg of each cut.")
parser.add_argument('-g', "--grading", choices=["edge", "leaf"], default="edge", help="Degree is the number of children, or always zero.")
parser.add_argument('-n', "--nilpotency", action="store_true", help="Also check that d∘d = 0.")
parser.add_argument('-c', "--check", action="count", help="Narrate each verdict on stderr.")

def _local_differential(names):
	from . import local
	stock = {
		"zero": local.zero_differential,
		"leaf": local.leaf_differential,
		"binary": local.binary_node_differential,
	}
	diffs = []
	for name in names or ["leaf"]:
		if name in stock: diffs.append(stock[name])
		elif "=" in name:
			old, new = name.split("=", 1)
			diffs.append(local.label_specific_differential(old, new))
		else:
			parser.error("Unknown differential %r" % name)
	return diffs[0] if len(diffs) == 1 else local.compose_local(*diffs)

def run(args):
	from .coderivation import make_dg_cooperad
	from .diagnostics import Report
	from .formal import render
	from .reassembly import LEFT_WINS, ContextReassembler, ReassemblyError
	from .trees import TreeCooperad, TreeSyntaxError, parse_tree, edge_degree, leaf_degree
	from .validation import validate_co_leibniz_law, validate_nilpotency

	report = Report(verbose=args.check)
	try: terms = [parse_tree(text) for text in args.trees]
	except TreeSyntaxError as ex:
		print(ex, file=sys.stderr)
		return 1
	base = TreeCooperad(degree=edge_degree if args.grading == "edge" else leaf_degree)
	reassembler = LEFT_WINS if args.reassembly == "left" else ContextReassembler()
	dg = make_dg_cooperad(base, _local_differential(args.differential), reassembler, args.recursive)
	for t in terms:
		print(dg.key(t))
		print("  Δ =", render(dg.delta(t), lambda pair: "%s ⊗ %s" % (dg.key(pair[0]), dg.key(pair[1]))))
		try: print("  d =", render(dg.d(t), dg.key))
		except ReassemblyError as ex: print("  d = ?", ex)
	validate_co_leibniz_law(dg, terms, report)
	if args.nilpotency:
		validate_nilpotency(dg, terms, report)
	if report.sick():
		report.complain_to_console()
		return 1
	print("Looks plausible to me.", file=sys.stderr)

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
