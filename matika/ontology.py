"""
These most-fundamental classes are kept apart from the rest to avoid
circular imports. The scanner, the parser, the syntax tree and the
diagnostics all need to agree on what a token is and how a phrase
locates itself within the source text.

Locations are plain character offsets into whatever text went into the
scanner. A phrase spans from its left() offset up to, but not including,
its right() offset.
"""
from typing import NamedTuple, Optional

# Token kinds that are not simply their own punctuation:
NUMBER = "number"
NAME = "name"
PRINT = "PRINT"
END = "<END>"

class Phrase:
	def left(self) -> int:
		""" Return the offset of the first character of this phrase """
		raise NotImplementedError(type(self))
	def right(self) -> int:
		""" Return the offset just past the last character of this phrase """
		raise NotImplementedError(type(self))
	def span(self) -> tuple[int, int]: return self.left(), self.right()

class Token(NamedTuple):
	"""
	One classified lexical unit. Punctuation tokens use their own text as kind.
	A synthesized token (such as implicit multiplication) has an empty span.
	"""
	kind: str
	lexeme: str
	literal: Optional[float]
	line: int
	start: int
	stop: int

	def __str__(self): return "(%s, %s)" % (self.kind, self.lexeme)
	def left(self): return self.start
	def right(self): return self.stop
	def span(self): return self.start, self.stop

	@staticmethod
	def synthetic(kind:str, line:int, offset:int) -> "Token":
		return Token(kind, kind, None, line, offset, offset)
