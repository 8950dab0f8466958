"""
Evaluate arithmetic expressions made of numbers, +, * and parentheses.

Give expressions as arguments, or give none and type them one per line.
A line reading "quit" (or end-of-input) ends the session.
"""

import sys, argparse

from monadparse.arithmetic import driver

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m monadparse', description=__doc__,)
	parser.add_argument('expressions', nargs='*', help='expressions to evaluate; quote them to protect spaces and * from the shell')
	parser.add_argument('-v', '--verbose', action='store_true', help="Also show how each expression was grouped.")
	return parser.parse_args(argv)

def each_line(stream):
	for line in stream:
		text = line.strip()
		if text.lower() == 'quit': break
		elif text: yield text

def report(text:str, verbose:bool) -> bool:
	""" Print the outcome for one expression; answer whether it evaluated. """
	result = driver.run(text)
	if result.outcome is driver.Outcome.EVALUATED:
		if verbose: print(" -->", result.tree)
		print(result.message())
		return True
	print(result.message(), file=sys.stderr)
	if verbose and result.tree is not None: print(" -- matched only", result.tree, file=sys.stderr)
	return False

def main(args) -> int:
	source = args.expressions or each_line(sys.stdin)
	results = [report(text, args.verbose) for text in source]
	return 0 if all(results) else 1

if __name__ == '__main__': sys.exit(main(parse_arguments()))
