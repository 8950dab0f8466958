"""
A parser is nothing more than a function from an input position to an optional
pair of (value, remaining input). Everything else in this package is built by
gluing such functions together.

The glue is the usual monadic trio:

	bind: run one parser, feed its value to a function which picks the next parser.
	map: transform the value of a successful parse.
	unit: succeed with a given value, consuming nothing.

To those, add `filter` (reject a successful parse after the fact) and the
ordered alternative `p | q`, which is the one operation that cannot be derived
from the others: it must rewind to where it started when the left side fails.

Rewinding is free because input is an immutable `Cursor`: a backing string and
an offset. A failed attempt leaves no trace. The caller still holds the cursor
it started with, and simply hands that same cursor to the other branch.

Failure carries no payload. A parser returns either a `Success` or `None`.
Every combinator here is total: it never raises on account of the input.
"""

from typing import Callable, Generic, NamedTuple, Optional, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class Cursor(NamedTuple):
	""" An immutable view of the unconsumed suffix of some text. """
	text: str
	offset: int = 0

	def at_end(self) -> bool: return self.offset >= len(self.text)
	def head(self) -> str: return self.text[self.offset]
	def advance(self, amount:int=1) -> "Cursor": return Cursor(self.text, self.offset + amount)
	def rest(self) -> str: return self.text[self.offset:]


class Success(NamedTuple):
	value: object
	remaining: Cursor

	def rest(self) -> str:
		""" The unconsumed input, as a string. """
		return self.remaining.rest()


ParseResult = Optional[Success]


class Parser(Generic[A]):
	"""
	Wraps a function of type `Cursor -> Optional[Success]`.
	Parsers are values: combine them, store them, pass them around.
	Calling one with a plain string starts at the beginning of that string.
	"""
	__slots__ = ('_fn',)

	def __init__(self, fn:Callable[[Cursor], ParseResult]):
		self._fn = fn

	def __call__(self, source) -> ParseResult:
		if not isinstance(source, Cursor): source = Cursor(source)
		return self._fn(source)

	def bind(self, f:Callable[[A], "Parser[B]"]) -> "Parser[B]":
		"""
		Sequence-then. The second parser may depend on the value of the first.
		Failure of the first short-circuits: `f` is never called.
		"""
		def bound(cursor):
			first = self._fn(cursor)
			if first is None: return None
			return f(first.value)(first.remaining)
		return Parser(bound)

	def map(self, f:Callable[[A], B]) -> "Parser[B]":
		def mapped(cursor):
			result = self._fn(cursor)
			if result is None: return None
			return Success(f(result.value), result.remaining)
		return Parser(mapped)

	def filter(self, predicate:Callable[[A], bool]) -> "Parser[A]":
		def filtered(cursor):
			result = self._fn(cursor)
			if result is None or not predicate(result.value): return None
			return result
		return Parser(filtered)

	def __or__(self, other:"Parser") -> "Parser":
		"""
		Ordered choice. If the left side succeeds, its result stands and the right
		side is never consulted. Otherwise the right side runs against the same
		cursor the left side was given.
		"""
		def alternative(cursor):
			result = self._fn(cursor)
			if result is None: return other._fn(cursor)
			return result
		return Parser(alternative)

	def then(self, other:"Parser[B]") -> "Parser[B]":
		""" Sequence, keeping only the right-hand value. """
		return self.bind(lambda _: other)

	def skip(self, other:"Parser") -> "Parser[A]":
		""" Sequence, keeping only the left-hand value. """
		return self.bind(lambda value: other.map(lambda _: value))


def unit(value) -> Parser:
	""" Succeed with `value` without consuming anything. """
	return Parser(lambda cursor: Success(value, cursor))

fail = Parser(lambda cursor: None)

def defer(thunk:Callable[[], Parser]) -> Parser:
	"""
	Postpone looking up a parser until it is first used.
	Mutually recursive grammar rules need this: the rule being referred to
	may not exist yet when the referring rule is constructed.
	"""
	return Parser(lambda cursor: thunk()(cursor))
