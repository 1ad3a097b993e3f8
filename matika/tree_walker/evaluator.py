"""
The tree-walker proper. One Interpreter holds one session's scope chain
and walks statements against it, one after another.

The interpreter keeps track of the currently-active scope. User functions
run in a child of that scope, and the previous scope comes back afterward
no matter how the body finishes. The plot built-in calls back in here
while an outer call is still in progress, so this save-and-restore
discipline is what keeps the outer call on its feet.

The interpreter also knows which batch of statements the running code
came from. Error sites are offsets into that batch's text, so an error
that escapes a function declared in some other batch gets re-sited at
the call, where the caller's text can show it.
"""
from typing import Callable, Optional, Sequence
from boozetools.support.foundation import Visitor
from .. import syntax
from ..environment import Scope
from ..diagnostics import MatikaError, TypeMismatch, ArityError
from ..preamble import global_scope
from .values import Function, Closure, Unbound, VALUE
from .runtime import PRIMITIVE_BINARY, PRIMITIVE_UNARY, NOTHING, is_number, render

PLOTTER = Callable[[list[tuple[float, float]]], object]
OUTPUT = Callable[[str], object]

class Interpreter(Visitor):
	globals: Scope
	environment: Scope
	plotter: Optional[PLOTTER]

	def __init__(self, *, plotter:Optional[PLOTTER]=None, output:Optional[OUTPUT]=None):
		self.globals = self.environment = global_scope()
		self.origin = None
		self.plotter = plotter
		self.output = output or print

	def interpret(self, statements:Sequence[syntax.Statement]) -> VALUE:
		""" Run one batch. Functions declared here remember that they came from this batch. """
		self.origin = statements
		result = NOTHING
		for stmt in statements:
			result = self.visit(stmt)
		return result

	def evaluate(self, expr:syntax.ValueExpression) -> VALUE:
		return self.visit(expr)

	def evaluate_inner(self, expr:syntax.ValueExpression, scope:Scope, origin) -> VALUE:
		previous = self.environment, self.origin
		self.environment, self.origin = scope, origin
		try: return self.visit(expr)
		finally: self.environment, self.origin = previous

	###########################################################################

	def visit_ExpressionStatement(self, stmt:syntax.ExpressionStatement):
		return self.visit(stmt.expr)

	def visit_PrintStatement(self, stmt:syntax.PrintStatement):
		self.output(render(self.visit(stmt.expr)))
		return NOTHING

	def visit_VariableDeclaration(self, stmt:syntax.VariableDeclaration):
		self.environment.define(stmt.name, self.visit(stmt.initializer))
		return NOTHING

	def visit_FunctionDeclaration(self, stmt:syntax.FunctionDeclaration):
		self.environment.define(stmt.name, Closure(stmt, self.origin))
		return NOTHING

	###########################################################################

	@staticmethod
	def visit_Literal(expr:syntax.Literal):
		return expr.value

	def visit_Grouping(self, expr:syntax.Grouping):
		return self.visit(expr.inner)

	def visit_Unary(self, expr:syntax.Unary):
		arg = self.visit(expr.arg)
		if not is_number(arg):
			raise TypeMismatch("Cannot apply '%s' to %s." % (expr.op.kind, render(arg)), expr)
		return PRIMITIVE_UNARY[expr.op.kind](arg)

	def visit_Binary(self, expr:syntax.Binary):
		a = self.visit(expr.lhs)
		b = self.visit(expr.rhs)
		for operand, value in (expr.lhs, a), (expr.rhs, b):
			if not is_number(value):
				pattern = "Arithmetic needs numbers, but %s is not one."
				raise TypeMismatch(pattern % render(value), operand)
		return PRIMITIVE_BINARY[expr.op.kind](a, b)

	def visit_Call(self, expr:syntax.Call):
		function = self.visit(expr.fn_exp)
		args = [self.visit(a) for a in expr.args]
		if not isinstance(function, Function):
			raise TypeMismatch("%s is not a function." % render(function), expr.fn_exp)
		if len(args) != function.arity():
			raise ArityError(function.arity(), len(args), expr)
		try:
			return function.apply(self, args)
		except MatikaError as ex:
			raise ex.blame(expr)

	def visit_Variable(self, expr:syntax.Variable):
		value = self.environment.get(expr.name)
		if value is None:
			value = Unbound(expr.name)
			self.environment.define(expr.name, value)
		return value
