from pathlib import Path
import unittest

from typenorm.ontology import ModuleName, PathConversionError

class ModuleNameTests(unittest.TestCase):

	def test_interned(self):
		self.assertIs(ModuleName.from_str("a.b"), ModuleName.from_str("a.b"))
		self.assertIs(ModuleName.from_str("a.b"), ModuleName.from_parts(["a", "b"]))
		self.assertIs(ModuleName.builtins(), ModuleName.from_str("builtins"))

	def test_display(self):
		self.assertEqual("a.b", str(ModuleName.from_str("a.b")))
		self.assertEqual(".", str(ModuleName.from_str("")))

	def test_first_component(self):
		self.assertEqual("a", ModuleName.from_str("a.b.c").first_component())
		self.assertEqual("a", ModuleName.from_str("a").first_component())

	def test_append(self):
		self.assertEqual(ModuleName.from_str("a.b.c"), ModuleName.from_str("a.b").append("c"))

	def test_relative(self):
		base = ModuleName.from_str("a.b.c")
		for is_init, dots, suffix, expect in [
			(False, 0, "d", "d"),
			(False, 1, "d", "a.b.d"),
			(False, 2, "d", "a.d"),
			(False, 3, "d", "d"),
			(False, 1, None, "a.b"),
			(False, 2, None, "a"),
		]:
			with self.subTest(dots=dots, suffix=suffix):
				self.assertEqual(ModuleName.from_str(expect), base.new_maybe_relative(is_init, dots, suffix))
		self.assertIsNone(base.new_maybe_relative(False, 4, "d"))
		self.assertEqual(
			ModuleName.from_str("sys"),
			ModuleName.from_str("sys").new_maybe_relative(True, 1, None),
		)

	def test_from_relative_path(self):
		for path, expect in [
			("foo.py", "foo"),
			("foo.pyi", "foo"),
			("foo/bar.py", "foo.bar"),
			("foo/bar.pyi", "foo.bar"),
			("foo/bar/__init__.py", "foo.bar"),
			("foo/bar/__init__.pyi", "foo.bar"),
		]:
			with self.subTest(path):
				self.assertEqual(ModuleName.from_str(expect), ModuleName.from_relative_path(Path(path)))

	def test_conversion_error(self):
		for path in ["foo/bar.derp", "foo/bar/baz", "foo/bar/__init__.derp"]:
			with self.subTest(path):
				with self.assertRaises(PathConversionError):
					ModuleName.from_relative_path(Path(path))


if __name__ == '__main__':
	unittest.main()
