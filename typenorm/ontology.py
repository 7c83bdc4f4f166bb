"""
These most-fundamental classes are the identities that types refer to:
the names of modules, and the nominal classes defined within them.
They are separate from the type calculus to avoid circular-import
scenarios, since the built-in class registry needs them too.
"""
from itertools import count
from pathlib import Path
from typing import Iterable, Optional

class PathConversionError(ValueError):
	pass

_INTERNED: dict[str, "ModuleName"] = {}

class ModuleName:
	"""
	The name of a python module. Examples: `foo.bar.baz`, `.foo.bar`.

	Module names are interned: asking for the same dotted name twice
	yields the same object, so identity comparison is good enough
	for the common case. Equality and hashing still go by the text.
	"""
	__slots__ = ("_text",)

	def __init__(self, text:str):
		assert isinstance(text, str), type(text)
		self._text = text

	@staticmethod
	def from_str(text:str) -> "ModuleName":
		try: return _INTERNED[text]
		except KeyError:
			it = _INTERNED[text] = ModuleName(text)
			return it

	@staticmethod
	def from_parts(parts:Iterable) -> "ModuleName":
		return ModuleName.from_str(".".join(map(str, parts)))

	@staticmethod
	def from_relative_path(path:Path) -> "ModuleName":
		""" foo/bar.py and foo/bar/__init__.pyi both name foo.bar """
		components = list(Path(path).parts)
		if components:
			file_name = components.pop()
			splits = file_name.rsplit(".", 1)
			if len(splits) != 2 or splits[1] not in ("py", "pyi"):
				raise PathConversionError("invalid source file extension (file name: `%s`)" % file_name)
			if splits[0] != "__init__":
				components.append(splits[0])
		return ModuleName.from_parts(components)

	@staticmethod
	def builtins() -> "ModuleName": return ModuleName.from_str("builtins")
	@staticmethod
	def typing() -> "ModuleName": return ModuleName.from_str("typing")
	@staticmethod
	def typing_extensions() -> "ModuleName": return ModuleName.from_str("typing_extensions")
	@staticmethod
	def enum_() -> "ModuleName": return ModuleName.from_str("enum")
	@staticmethod
	def unknown() -> "ModuleName":
		""" For files given directly which are not on any search path. """
		return ModuleName.from_str("__unknown__")

	def as_str(self) -> str: return self._text
	def __str__(self): return self._text or "."
	def __repr__(self): return "ModuleName(%r)" % self._text
	def __eq__(self, other): return isinstance(other, ModuleName) and self._text == other._text
	def __hash__(self): return hash(self._text)
	def __lt__(self, other:"ModuleName"): return self._text < other._text

	def append(self, name:str) -> "ModuleName":
		return ModuleName.from_str("%s.%s" % (self._text, name))

	def first_component(self) -> str:
		return self._text.split(".", 1)[0]

	def components(self) -> list[str]:
		return self._text.split(".")

	def new_maybe_relative(self, is_init:bool, dots:int, suffix:Optional[str]=None) -> Optional["ModuleName"]:
		"""
		Resolve a (maybe-)relative import as seen from within this module:
		remove `dots` trailing components, then append `suffix` if given.
		An __init__ module is its own package, so it gets one dot for free.
		Returns None if there are not enough components to remove.
		"""
		if dots == 0 and suffix is not None:
			return ModuleName.from_str(suffix)
		components = self.components()
		if is_init:
			dots = max(0, dots - 1)
		for _ in range(dots):
			if not components: return None
			components.pop()
		if suffix is not None:
			components.append(suffix)
		return ModuleName.from_parts(components)


class Class:
	"""
	A nominal class. Did I say value-object? Not for classes! These have identity.
	Two classes may well share a module and a name, yet remain distinct.
	The serial number breaks that tie when sorting, and otherwise
	reflects nothing more than the order of definition.
	"""
	_serials = count()

	def __init__(self, name:str, module:ModuleName):
		assert isinstance(module, ModuleName), type(module)
		self.name = name
		self.module = module
		self.serial = next(Class._serials)
		self.key = (module.as_str(), name, self.serial)

	def qualified_name(self) -> str:
		return "%s.%s" % (self.module, self.name)

	def __repr__(self): return "<class %s>" % self.qualified_name()
