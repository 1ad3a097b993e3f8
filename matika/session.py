"""
One session: one global scope, many calls to evaluate.

Bindings accumulate from call to call, the way a read-eval-print loop
would use them. Nothing here raises on bad input; evaluate hands back
the error instead, and whatever the failing batch managed to bind
before the failure stays bound.
"""
from typing import Optional, Union
from .diagnostics import MatikaError, TooDeep
from .front_end import parse_text
from .tree_walker.evaluator import Interpreter, PLOTTER, OUTPUT
from .tree_walker.values import VALUE

class Session:
	def __init__(self, plotter:Optional[PLOTTER]=None, output:Optional[OUTPUT]=None):
		self.interpreter = Interpreter(plotter=plotter, output=output)

	@property
	def globals(self):
		return self.interpreter.globals

	def evaluate(self, text:str) -> Union[VALUE, MatikaError]:
		""" Scan, parse and interpret text. The result is a value or a MatikaError. """
		try:
			statements = parse_text(text)
			return self.interpreter.interpret(statements)
		except MatikaError as ex:
			return ex
		except RecursionError:
			return TooDeep("Nesting or recursion went too deep to follow.")

def evaluate(text:str, session:Optional[Session]=None) -> Union[VALUE, MatikaError]:
	""" Convenience for one-off evaluation; pass a session to keep bindings. """
	return (session or Session()).evaluate(text)
