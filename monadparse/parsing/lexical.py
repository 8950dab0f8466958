""" Tokens: numbers and blank space. """

from .core import Parser
from .combinators import satisfy, char, many, many1


def _is_ascii_digit(c:str) -> bool: return '0' <= c <= '9'

digit = satisfy(_is_ascii_digit)

# Both literal kinds produce a float; the grammar never distinguishes them.
integer = many1(digit).map(lambda digits: float(''.join(digits)))

floating = many1(digit).bind(
	lambda whole: char('.').then(many1(digit)).map(
		lambda fraction: float(''.join(whole) + '.' + ''.join(fraction))
	)
)

skip_whitespace = many(char(' ')).map(lambda _: None)

def token(p:Parser) -> Parser:
	""" Make `p` indifferent to blank space on either side. """
	return skip_whitespace.then(p).skip(skip_whitespace)

def symbol(c:str) -> Parser:
	return token(char(c))
