"""
The built-in functions, and the global scope that starts out holding them.
"""
import math
from .environment import Scope
from .diagnostics import TypeMismatch, ArityError
from .tree_walker.values import Primitive, Function, ARGS, VALUE
from .tree_walker.runtime import is_number, render, NOTHING

# Plot samples its subject at these abscissas, in this order.
PLOT_DOMAIN = range(-10, 10)
# Trial division up to the square root stays quick below this.
FACTORS_CEILING = 1e12
NAN = math.nan

def _need_number(fn:Primitive, value:VALUE) -> float:
	if not is_number(value):
		raise TypeMismatch("%s needs a number, but got %s." % (fn, render(value)))
	return value

class Pi(Primitive):
	name, ARITY = "pi", 0
	def apply(self, interpreter, args:ARGS) -> VALUE:
		return math.pi

class Sin(Primitive):
	name, ARITY = "sin", 1
	def apply(self, interpreter, args:ARGS) -> VALUE:
		x = _need_number(self, args[0])
		return NAN if math.isinf(x) else math.sin(x)

class Factors(Primitive):
	"""
	Every positive divisor of the argument, in ascending order.
	Fractions truncate toward zero; anything below one has no divisors.
	"""
	name, ARITY = "factors", 1
	def apply(self, interpreter, args:ARGS) -> VALUE:
		x = _need_number(self, args[0])
		if math.isinf(x):
			raise TypeMismatch("%s needs a finite number." % self)
		if x > FACTORS_CEILING:
			raise TypeMismatch("%s only goes up to %s." % (self, render(FACTORS_CEILING)))
		if math.isnan(x) or x < 1:
			return ()
		return tuple(map(float, divisors(int(x))))

def divisors(n:int) -> list[int]:
	small, large = [], []
	d = 1
	while d * d <= n:
		if n % d == 0:
			small.append(d)
			if d * d != n: large.append(n // d)
		d += 1
	return small + large[::-1]

class Plot(Primitive):
	"""
	Sample a one-argument function over a fixed domain and hand the points
	to whatever plot renderer the interpreter has. Evaluates to zero either way.
	A sample that is not a number, such as a free symbol, plots as zero.
	"""
	name, ARITY = "plot", 1
	def apply(self, interpreter, args:ARGS) -> VALUE:
		subject = args[0]
		if not isinstance(subject, Function):
			raise TypeMismatch("%s needs a function, but got %s." % (self, render(subject)))
		if subject.arity() != 1:
			raise ArityError(subject.arity(), 1)
		points = []
		for x in PLOT_DOMAIN:
			y = subject.apply(interpreter, [float(x)])
			points.append((float(x), y if is_number(y) else 0.0))
		if interpreter.plotter is not None:
			interpreter.plotter(points)
		return NOTHING

BUILT_INS = (Pi, Sin, Factors, Plot)

def global_scope() -> Scope:
	""" A fresh root scope, pre-populated with the built-in functions. """
	scope = Scope()
	for cls in BUILT_INS:
		scope.define(cls.name, cls())
	return scope
