import unittest

from matika.environment import Scope
from matika.preamble import global_scope, Pi, Sin, Factors, Plot

class ScopeTests(unittest.TestCase):

	def setUp(self) -> None:
		self.root = Scope()
		self.root.define("a", 1.0)
		self.child = Scope.from_enclosing(self.root)

	def test_absent_name_is_not_found(self):
		self.assertIsNone(self.child.get("nope"))

	def test_lookup_walks_outward(self):
		self.assertEqual(1.0, self.child.get("a"))

	def test_definition_lands_in_innermost_scope(self):
		self.child.define("b", 2.0)
		self.assertEqual(2.0, self.child.get("b"))
		self.assertIsNone(self.root.get("b"))

	def test_shadowing(self):
		self.child.define("a", 5.0)
		self.assertEqual(5.0, self.child.get("a"))
		self.assertEqual(1.0, self.root.get("a"))

	def test_redefinition_overwrites(self):
		self.root.define("a", 3.0)
		self.assertEqual(3.0, self.child.get("a"))

	def test_zero_is_a_real_binding(self):
		self.root.define("z", 0.0)
		self.assertEqual(0.0, self.child.get("z"))

	def test_names_and_depth(self):
		self.child.define("b", 2.0)
		self.assertEqual({"b"}, set(self.child.names()))
		self.assertEqual(0, self.root.depth())
		self.assertEqual(1, self.child.depth())

class GlobalScopeTests(unittest.TestCase):

	def test_built_ins_are_present(self):
		scope = global_scope()
		for name, cls in [("pi", Pi), ("sin", Sin), ("factors", Factors), ("plot", Plot)]:
			with self.subTest(name):
				self.assertIsInstance(scope.get(name), cls)

	def test_each_session_gets_its_own(self):
		one, two = global_scope(), global_scope()
		one.define("x", 1.0)
		self.assertIsNone(two.get("x"))

if __name__ == '__main__':
	unittest.main()
