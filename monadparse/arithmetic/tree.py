"""
The abstract syntax of arithmetic expressions, and what it means.

Five node types make a closed family: a number leaf, plus one node per binary
operator. Nodes are frozen; a parse builds them bottom-up and `evaluate` folds
them back down to a float.

The grammar only ever produces Number, Plus and Mult. Minus and Div are here
for completeness of the arithmetic, and they evaluate correctly if you build
them by hand.

Division follows IEEE-754 rather than Python: dividing by zero gives an
infinity or a NaN instead of raising ZeroDivisionError.
"""

import math, operator
from dataclasses import dataclass
from typing import Union


def ieee_divide(a:float, b:float) -> float:
	try: return a / b
	except ZeroDivisionError:
		if a == 0 or math.isnan(a): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True)
class Number:
	value: float

	def evaluate(self) -> float: return self.value
	def __str__(self): return repr(self.value)


@dataclass(frozen=True)
class Binary:
	""" Common shape of the operator nodes. Subclasses name their symbol and function. """
	left: "Expression"
	right: "Expression"
	symbol = '?'

	@staticmethod
	def function(a:float, b:float) -> float: raise NotImplementedError

	def evaluate(self) -> float:
		return self.function(self.left.evaluate(), self.right.evaluate())

	def __str__(self): return "(%s %s %s)"%(self.left, self.symbol, self.right)


@dataclass(frozen=True)
class Plus(Binary):
	symbol = '+'
	function = staticmethod(operator.add)

@dataclass(frozen=True)
class Minus(Binary):
	symbol = '-'
	function = staticmethod(operator.sub)

@dataclass(frozen=True)
class Mult(Binary):
	symbol = '*'
	function = staticmethod(operator.mul)

@dataclass(frozen=True)
class Div(Binary):
	symbol = '/'
	function = staticmethod(ieee_divide)


Expression = Union[Number, Plus, Minus, Mult, Div]


def evaluate(expr:Expression) -> float:
	return expr.evaluate()
