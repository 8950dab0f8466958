"""
Character-level building blocks on top of the parser core.

A word of warning about repetition: `many` and `many1` assume the parser they
repeat either fails or consumes at least one character every time it succeeds.
Hand them something that can succeed on nothing (like `unit(x)`, or `many(p)`
itself) and they will loop forever. Nothing checks this for you.
"""

from .core import Parser, Success, Cursor


def _any_char(cursor:Cursor):
	if cursor.at_end(): return None
	return Success(cursor.head(), cursor.advance())

any_char = Parser(_any_char)

def satisfy(predicate) -> Parser:
	""" One character, provided the predicate holds for it. """
	return any_char.filter(predicate)

def char(c:str) -> Parser:
	return satisfy(c.__eq__)

def many(p:Parser) -> Parser:
	"""
	Zero or more `p`, collected into a list. Never fails.
	Same meaning as `many1(p) | unit([])`, but iterative so that a long run
	does not exhaust the interpreter's stack.
	"""
	def repeat(cursor):
		values = []
		while True:
			result = p(cursor)
			if result is None: return Success(values, cursor)
			values.append(result.value)
			cursor = result.remaining
	return Parser(repeat)

def many1(p:Parser) -> Parser:
	""" One or more `p`. Fails exactly when the first `p` fails. """
	return p.bind(lambda first: many(p).map(lambda rest: [first] + rest))
