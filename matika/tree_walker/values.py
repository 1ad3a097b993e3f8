"""
Run-time values that need a class of their own.
Basic values play themselves: a number is a Python float and a list of numbers is a tuple of floats.
Callables and unbound symbols need more help.
"""
from abc import ABC, abstractmethod
from typing import Sequence, Union, TYPE_CHECKING
from .. import syntax
from ..environment import Scope
from ..diagnostics import MatikaError

if TYPE_CHECKING:
	from .evaluator import Interpreter

class MatikaValue(ABC):
	""" Root for classes that implement specialized run-time values """
	pass

VALUE = Union[float, tuple, MatikaValue]
ARGS = Sequence[VALUE]

class Unbound(MatikaValue):
	"""
	What a name means before anybody gives it a meaning.
	It renders as the name itself, so a free symbol reads naturally.
	"""
	def __init__(self, name:str):
		self.name = name
	def __str__(self): return self.name
	def __repr__(self): return "<Unbound %s>" % self.name

class Function(MatikaValue):
	""" A run-time object that can be applied with arguments. """
	name: str

	@abstractmethod
	def arity(self) -> int: pass

	@abstractmethod
	def apply(self, interpreter:"Interpreter", args:ARGS) -> VALUE:
		""" The caller has already checked the number of arguments. """
		pass

	def __str__(self): return "<fnc:%s>" % self.name

class Closure(Function):
	"""
	The run-time manifestation of a user-declared function.

	Despite the name, it does not capture its natal scope: the body runs in a
	fresh scope atop whichever scope is active at the moment of the call.
	"""
	def __init__(self, fnc:syntax.FunctionDeclaration, origin=None):
		self._fnc = fnc
		self.name = fnc.name
		self.origin = origin

	def arity(self) -> int: return len(self._fnc.params)

	def apply(self, interpreter:"Interpreter", args:ARGS) -> VALUE:
		inner = Scope.from_enclosing(interpreter.environment)
		for param, arg in zip(self._fnc.param_names(), args):
			inner.define(param, arg)
		try:
			return interpreter.evaluate_inner(self._fnc.body, inner, self.origin)
		except MatikaError as ex:
			if self.origin is not interpreter.origin:
				# The site points into text the caller cannot see.
				ex.site = None
			raise

class Primitive(Function):
	""" Built-in functions declare their name and arity as class attributes. """
	name: str
	ARITY: int

	def arity(self) -> int: return self.ARITY
