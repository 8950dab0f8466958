"""
Recursive-descent grammar for sums and products, written with combinators:

	additive   = multitive '+' additive  -> Plus   |  multitive
	multitive  = primary   '*' multitive -> Mult   |  primary
	primary    = '(' additive ')'                  |  number
	number     = token(floating | integer)         -> Number

Choice is ordered and left-biased, as in a PEG. Two consequences:

	`floating` has to come before `integer`, because `integer` happily matches
	the "1" in "1.5" and the choice would never reconsider.

	Operator chains group to the right: "1+2+3" is Plus(1, Plus(2, 3)).
	That is fine for + and *, which associate. It would be wrong for - and /,
	which is one reason the grammar does not offer them.

`primary` refers back to `additive` before the latter exists, hence `defer`.

Each binary rule reads its left operand once and only then looks for the
operator; with no operator it settles for the operand alone. Writing it as
`X op Y | X` would read X twice, and nested parentheses would cost
exponential time.
"""

from ..parsing.core import defer, unit
from ..parsing.lexical import floating, integer, token, symbol
from .tree import Number, Plus, Mult


def _infix(operand, sign:str, rhs, node):
	continuation = symbol(sign).then(rhs)
	return operand.bind(lambda left: continuation.map(lambda right: node(left, right)) | unit(left))

number = token(floating | integer).map(Number)

primary = symbol('(').then(defer(lambda: additive)).skip(symbol(')')) | number

multitive = _infix(primary, '*', defer(lambda: multitive), Mult)

additive = _infix(multitive, '+', defer(lambda: additive), Plus)
