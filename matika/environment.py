"""
The canonical list-structured search: each scope is a dictionary
with a link to the scope that encloses it. Definition always lands
in the innermost scope. Lookup walks outward and stops at the first hit.
"""
from typing import Any, Iterable, Optional

class Scope:
	_bindings: dict[str, Any]
	enclosing: Optional["Scope"]

	def __init__(self, enclosing:Optional["Scope"]=None):
		self._bindings = {}
		self.enclosing = enclosing

	@staticmethod
	def from_enclosing(enclosing:"Scope") -> "Scope":
		return Scope(enclosing)

	def define(self, name:str, value:Any):
		self._bindings[name] = value

	def get(self, name:str) -> Optional[Any]:
		""" The innermost binding of name, or None if there is none anywhere. """
		scope = self
		while scope is not None:
			if name in scope._bindings:
				return scope._bindings[name]
			scope = scope.enclosing
		return None

	def names(self) -> Iterable[str]:
		""" Names bound in this scope alone, not its ancestors. """
		return self._bindings.keys()

	def depth(self) -> int:
		return 0 if self.enclosing is None else 1 + self.enclosing.depth()

	def __repr__(self):
		return "<Scope depth=%d: %s>" % (self.depth(), ', '.join(sorted(self._bindings)))
