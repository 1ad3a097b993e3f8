"""
Recursive descent over the token sequence, one level per precedence tier:

	term  := factor (("+"|"-") factor)*
	factor:= power (("*"|"/") power)*
	power := unary ("^" primary)*
	unary := "-" unary | call
	call  := primary ( "(" arguments? ")" )*

A statement followed by "=" gets reinterpreted as a declaration,
which is how "x = 5" and "f(x) = x^2" both come out of one grammar.
There is no error recovery: the first problem ends the parse.
"""
from typing import Optional, Sequence
from . import syntax
from .ontology import Token, NUMBER, NAME, PRINT, END
from .diagnostics import ParseError
from .scanner import scan

class Parser:
	def __init__(self, tokens:Sequence[Token]):
		""" Tokens as scan() makes them: the last one, and only the last, is <END>. """
		self._tokens = tokens
		self._current = 0

	def parse(self) -> list[syntax.Statement]:
		statements = []
		while not self._is_end():
			statements.append(self._declaration())
		return statements

	def _declaration(self) -> syntax.Statement:
		stmt = self._statement()
		if self._match("="):
			equals = self._previous()
			return reinterpret(stmt, equals, self._expression())
		return stmt

	def _statement(self) -> syntax.Statement:
		if self._match(PRINT):
			keyword = self._previous()
			return syntax.PrintStatement(keyword, self._expression())
		return syntax.ExpressionStatement(self._expression())

	def _expression(self) -> syntax.ValueExpression:
		return self._term()

	def _term(self):
		expr = self._factor()
		while self._match("+", "-"):
			op = self._previous()
			expr = syntax.Binary(expr, op, self._factor())
		return expr

	def _factor(self):
		expr = self._power()
		while self._match("*", "/"):
			op = self._previous()
			expr = syntax.Binary(expr, op, self._power())
		return expr

	def _power(self):
		# Left-associative, and the exponent is only a primary: 2^3^2 is (2^3)^2.
		expr = self._unary()
		while self._match("^"):
			op = self._previous()
			expr = syntax.Binary(expr, op, self._primary())
		return expr

	def _unary(self):
		if self._match("-"):
			op = self._previous()
			return syntax.Unary(op, self._unary())
		return self._call()

	def _call(self):
		expr = self._primary()
		while self._match("("):
			opening = self._previous()
			args = self._arguments()
			closing = self._consume(")", "Expected ')' after arguments.")
			if isinstance(expr, syntax.Literal):
				# 3(4) means 3*4, but only for exactly one parenthesized expression.
				if len(args) != 1:
					raise ParseError(
						"A number may be followed by one parenthesized expression, not %d." % len(args),
						opening, "Did you mean to multiply? Then write one expression in the parentheses.",
					)
				star = Token.synthetic("*", opening.line, opening.start)
				expr = syntax.Binary(expr, star, args[0])
			else:
				expr = syntax.Call(expr, args, closing)
		return expr

	def _arguments(self) -> list[syntax.ValueExpression]:
		args = []
		if not self._check(")"):
			args.append(self._expression())
			while self._match(","):
				args.append(self._expression())
		return args

	def _primary(self):
		if self._match(NUMBER):
			return syntax.Literal(self._previous())
		if self._match(NAME):
			return syntax.Variable(self._previous())
		if self._match("("):
			expr = self._expression()
			self._consume(")", "Expected ')' after expression.")
			return syntax.Grouping(expr)
		raise self._unexpected("Expected an expression.")

	def _consume(self, kind:str, message:str) -> Token:
		if self._check(kind):
			return self._advance()
		raise self._unexpected(message)

	def _unexpected(self, message:str) -> ParseError:
		token = self._peek()
		if token.kind == END:
			message = "Unexpected end of input. " + message
		else:
			message = "Unexpected %r. %s" % (token.lexeme, message)
		return ParseError(message, token, _best_hint(self._previous_kind(), token.kind))

	def _match(self, *kinds:str) -> bool:
		for kind in kinds:
			if self._check(kind):
				self._advance()
				return True
		return False

	def _check(self, kind:str) -> bool:
		return not self._is_end() and self._peek().kind == kind

	def _advance(self) -> Token:
		if not self._is_end():
			self._current += 1
		return self._previous()

	def _peek(self) -> Token:
		return self._tokens[self._current]

	def _previous(self) -> Token:
		return self._tokens[self._current - 1]

	def _previous_kind(self) -> Optional[str]:
		return self._previous().kind if self._current else None

	def _is_end(self) -> bool:
		return self._peek().kind == END

def reinterpret(stmt:syntax.Statement, equals:Token, initializer:syntax.ValueExpression) -> syntax.Statement:
	"""
	The statement to the left of "=" was parsed as an expression.
	Decide what sort of declaration it really was.
	"""
	if isinstance(stmt, syntax.ExpressionStatement):
		target = stmt.expr
		if isinstance(target, syntax.Variable):
			return syntax.VariableDeclaration(target.nom, initializer)
		if (
			isinstance(target, syntax.Call)
			and isinstance(target.fn_exp, syntax.Variable)
			and all(isinstance(a, syntax.Variable) for a in target.args)
		):
			params = [a.nom for a in target.args]
			return syntax.FunctionDeclaration(target.fn_exp.nom, params, initializer)
	raise ParseError(
		"Declaration not supported.", equals,
		"Only a name, or a name applied to parameter names, may stand left of '='.",
	)

def parse(tokens:Sequence[Token]) -> list[syntax.Statement]:
	return Parser(tokens).parse()

def parse_text(text:str) -> list[syntax.Statement]:
	""" Scan and parse in one go. Raises LexError or ParseError. """
	return parse(scan(text))

##########################
#
#  Hints for parse errors, keyed on the token just consumed and the lookahead.
#  The wildcard ETC matches anything in that position.
#

ETC = "???"
_advice = {}

def _hint(previous:str, lookahead:str, text:str):
	_advice[previous, lookahead] = text

def _best_hint(previous:Optional[str], lookahead:str) -> Optional[str]:
	for key in (previous, lookahead), (ETC, lookahead), (previous, ETC):
		if key in _advice:
			return _advice[key]
	return None

for _op in "+-*/^":
	_hint(_op, END, "Something seems to be missing after the final '%s'." % _op)
	_hint(_op, _op, "Two operators in a row. Is one of them a typo?")
for _relop in "<", "<=", ">", ">=", "!", ".":
	_hint(ETC, _relop, "'%s' is a token, but no expression makes use of it." % _relop)
_hint("(", ")", "Empty parentheses only make sense after a function name, as in pi().")
_hint(ETC, ")", "This ')' seems to have no partner.")
_hint("=", END, "There needs to be an expression on the right of '='.")
_hint(",", ")", "There is a stray comma before the closing parenthesis.")
_hint("^", "-", "The exponent must be a number, a name, or parenthesized: write 2^(-1).")
