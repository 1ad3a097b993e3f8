"""
Arithmetic on numbers, and how values look when printed.

Arithmetic follows IEEE-754 the whole way: dividing by zero gives an
infinity (or NaN for 0/0), and powers with no real answer give NaN.
Python would rather raise, so two of the operators need a little help.
"""
import math
import operator
from .values import VALUE

INF = math.inf
NAN = math.nan

# The value of a statement which is not an expression, and of an empty program.
NOTHING = 0.0

def is_number(value:VALUE) -> bool:
	return isinstance(value, float)

def _is_odd_integer(x:float) -> bool:
	return x.is_integer() and x % 2 == 1

def _divide(a:float, b:float) -> float:
	try: return a / b
	except ZeroDivisionError:
		if a == 0 or math.isnan(a): return NAN
		return math.copysign(INF, a) * math.copysign(1.0, b)

def _power(a:float, b:float) -> float:
	try: return math.pow(a, b)
	except OverflowError:
		return -INF if a < 0 and _is_odd_integer(b) else INF
	except ValueError:
		# Zero to a negative power is a pole; otherwise a negative base met a fractional exponent.
		if a == 0: return math.copysign(INF, a) if _is_odd_integer(b) else INF
		return NAN

PRIMITIVE_BINARY = {
	"^" : _power,
	"*" : operator.mul,
	"/" : _divide,
	"+" : operator.add,
	"-" : operator.sub,
}
PRIMITIVE_UNARY = {
	"-" : operator.neg,
}

def render_number(x:float) -> str:
	if x.is_integer() and abs(x) < 1e16:
		return str(int(x))
	return repr(x)

def render(value:VALUE) -> str:
	""" The textual form of a value, as print shows it. """
	if is_number(value):
		return render_number(value)
	if isinstance(value, tuple):
		return "[" + ", ".join(map(render_number, value)) + "]"
	return str(value)
