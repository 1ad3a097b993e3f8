"""
The set of parse-nodes in simple form.
The parser calls these constructors as it descends; nothing mutates them afterward.
Each node knows its extent in the source text, which is all the diagnostics need.
"""
from typing import Sequence
from .ontology import Phrase, Token

class ValueExpression(Phrase): pass

class Literal(ValueExpression):
	def __init__(self, token:Token):
		self.token = token
		self.value = token.literal
	def __repr__(self): return "<Literal %r>" % self.value
	def left(self): return self.token.left()
	def right(self): return self.token.right()

class Variable(ValueExpression):
	def __init__(self, nom:Token): self.nom = nom
	@property
	def name(self) -> str: return self.nom.lexeme
	def __repr__(self): return "<ref:%s>" % self.name
	def left(self): return self.nom.left()
	def right(self): return self.nom.right()

class Grouping(ValueExpression):
	def __init__(self, inner:ValueExpression): self.inner = inner
	def __repr__(self): return "(%r)" % self.inner
	def left(self): return self.inner.left()
	def right(self): return self.inner.right()

class Binary(ValueExpression):
	def __init__(self, lhs:ValueExpression, op:Token, rhs:ValueExpression):
		self.lhs, self.op, self.rhs = lhs, op, rhs
	def __repr__(self): return "(%r %s %r)" % (self.lhs, self.op.kind, self.rhs)
	def left(self): return self.lhs.left()
	def right(self): return self.rhs.right()

class Unary(ValueExpression):
	def __init__(self, op:Token, arg:ValueExpression):
		self.op, self.arg = op, arg
	def __repr__(self): return "(%s%r)" % (self.op.kind, self.arg)
	def left(self): return self.op.left()
	def right(self): return self.arg.right()

class Call(ValueExpression):
	def __init__(self, fn_exp:ValueExpression, args:Sequence[ValueExpression], closing:Token):
		self.fn_exp, self.args = fn_exp, tuple(args)
		self._closing = closing
	def __repr__(self): return "%r(%s)" % (self.fn_exp, ', '.join(map(repr, self.args)))
	def left(self): return self.fn_exp.left()
	def right(self): return self._closing.right()

###############################################################################

class Statement(Phrase): pass

class ExpressionStatement(Statement):
	def __init__(self, expr:ValueExpression): self.expr = expr
	def left(self): return self.expr.left()
	def right(self): return self.expr.right()

class PrintStatement(Statement):
	def __init__(self, keyword:Token, expr:ValueExpression):
		self._keyword = keyword
		self.expr = expr
	def left(self): return self._keyword.left()
	def right(self): return self.expr.right()

class VariableDeclaration(Statement):
	def __init__(self, nom:Token, initializer:ValueExpression):
		self.nom, self.initializer = nom, initializer
	@property
	def name(self) -> str: return self.nom.lexeme
	def left(self): return self.nom.left()
	def right(self): return self.initializer.right()

class FunctionDeclaration(Statement):
	"""
	Written as an equation, e.g. f(x, y) = x*y.
	The body waits, unevaluated, until somebody calls the function.
	"""
	def __init__(self, nom:Token, params:Sequence[Token], body:ValueExpression):
		self.nom = nom
		self.params = tuple(params)
		self.body = body
	@property
	def name(self) -> str: return self.nom.lexeme
	def param_names(self) -> list[str]: return [p.lexeme for p in self.params]
	def __repr__(self): return "<fnc:%s(%s)>" % (self.name, ', '.join(self.param_names()))
	def left(self): return self.nom.left()
	def right(self): return self.body.right()
