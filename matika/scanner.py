"""
Turn text into tokens.

The lexicon is a handful of miniscan rules. Each rule reports a kind and
the slice it matched; scan() then dresses those up as Token objects with
lexeme, literal value and line number.

The one peculiar rule is implicit multiplication: a number followed
directly by a word gets a synthesized '*' token in between, so that
"2x" scans the same as "2*x".
"""
import sys
from boozetools.scanning import miniscan
from boozetools.scanning.engine import IterableScanner
from .ontology import Token, NUMBER, NAME, PRINT, END
from .diagnostics import LexError

RESERVED = {"print": PRINT}
STRAY = "<stray>"

lexicon = miniscan.Definition()
lexicon.ignore(r'[\ \t\r\n]+')
lexicon.ignore(r'\/\/[^\n]*')

@lexicon.on(r'[().+\-*\/^!=,]|[<>]=?')
def punctuation(yy:IterableScanner):
	yy.token(sys.intern(yy.match()), yy.slice())

@lexicon.on(r'\d+(\.\d+)?')
def number(yy:IterableScanner):
	yy.token(NUMBER, yy.slice())

@lexicon.on(r'[A-Za-z_][A-Za-z0-9_]*')
def word(yy:IterableScanner):
	yy.token(RESERVED.get(yy.match(), NAME), yy.slice())

@lexicon.on(r'[^\ \t\r\n0-9A-Za-z_().+\-*\/^!=,<>]')
def stray(yy:IterableScanner):
	yy.token(STRAY, yy.slice())

def scan(text:str) -> list[Token]:
	""" Ordered token sequence ending in exactly one <END> token. Raises LexError. """
	tokens, line, mark = [], 1, 0
	for kind, where in lexicon.scan(text):
		line += text.count("\n", mark, where.start)
		mark = where.start
		lexeme = text[where]
		if kind == STRAY:
			site = Token(lexeme, lexeme, None, line, where.start, where.stop)
			raise LexError("Unexpected character %r on line %d." % (lexeme, line), site)
		literal = float(lexeme) if kind == NUMBER else None
		tokens.append(Token(kind, lexeme, literal, line, where.start, where.stop))
	tokens = list(_imply_products(tokens))
	line += text.count("\n", mark)
	tokens.append(Token.synthetic(END, line, len(text)))
	return tokens

def _imply_products(tokens:list[Token]):
	previous = None
	for token in tokens:
		if previous is not None and previous.kind == NUMBER and token.kind in (NAME, PRINT) and previous.stop == token.start:
			yield Token.synthetic("*", previous.line, previous.stop)
		yield token
		previous = token
