"""
Runs the grammar over a complete line of text and says how it went.

There are exactly three ways it can go: the grammar does not match at all, it
matches only a prefix, or it matches everything and the tree gets evaluated.
`run` reports which, as a `Report`. `evaluate_text` is the same thing for
callers who would rather catch an exception than inspect an outcome.
"""

from enum import Enum
from typing import NamedTuple, Optional

from .grammar import additive
from .tree import Expression


class ExpressionError(ValueError):
	""" Base class of the exceptions raised on account of bad expression text. """

class ParsingFailed(ExpressionError):
	def __init__(self, text:str):
		super().__init__(text)
		self.text = text

class IncompleteParse(ExpressionError):
	"""
	The grammar matched a prefix of the text but not all of it.
	Parameters are:
		the original text.
		the offset where matching stopped.
	"""
	def __init__(self, text:str, position:int):
		super().__init__(text, position)
		self.text, self.position = text, position

	def leftover(self) -> str: return self.text[self.position:]


class Outcome(Enum):
	FAILED = "parsing failed"
	INCOMPLETE = "not all input consumed"
	EVALUATED = "expression %s was evaluated. Result is %s"


class Report(NamedTuple):
	text: str
	outcome: Outcome
	tree: Optional[Expression] = None
	value: Optional[float] = None
	stop: Optional[int] = None # Offset where matching stopped, for an incomplete parse.

	def message(self) -> str:
		if self.outcome is Outcome.EVALUATED:
			return self.outcome.value%(self.text, self.value)
		return self.outcome.value


def run(text:str) -> Report:
	result = additive(text)
	if result is None: return Report(text, Outcome.FAILED)
	if not result.remaining.at_end(): return Report(text, Outcome.INCOMPLETE, result.value, stop=result.remaining.offset)
	return Report(text, Outcome.EVALUATED, result.value, result.value.evaluate())

def evaluate_text(text:str) -> float:
	report = run(text)
	if report.outcome is Outcome.FAILED: raise ParsingFailed(text)
	if report.outcome is Outcome.INCOMPLETE: raise IncompleteParse(text, report.stop)
	return report.value
