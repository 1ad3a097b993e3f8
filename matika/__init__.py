"""
Matika: a small language for arithmetic, functions, and the occasional plot.
"""
from .diagnostics import MatikaError, LexError, ParseError, TypeMismatch, ArityError, TooDeep
from .session import Session, evaluate
from .tree_walker.runtime import render
