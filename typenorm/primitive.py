"""
The built-in class registry: the general-class lookup for literal types,
and accessors for the few well-known classes the simplifier cares about.

Each accessor hands back the very same ClassType object every time,
because the literal-collapsing pass uses these as lookup keys.
"""
from typing import Optional
from .ontology import ModuleName, Class
from .calculus import ClassType, Lit

BUILT_IN_CLASS_NAMES = ("object", "bool", "int", "str", "bytes", "tuple")

class Stdlib:
	_classes: dict[str, ClassType]

	def __init__(self, module:Optional[ModuleName]=None):
		self.module = module or ModuleName.builtins()
		self._classes = {}
		for name in BUILT_IN_CLASS_NAMES:
			self._built_in_class(name)

	def _built_in_class(self, name:str) -> ClassType:
		it = self._classes[name] = ClassType(Class(name, self.module))
		return it

	def lookup(self, name:str) -> ClassType:
		return self._classes[name]

	def object(self) -> ClassType: return self._classes["object"]
	def bool(self) -> ClassType: return self._classes["bool"]
	def int(self) -> ClassType: return self._classes["int"]
	def str(self) -> ClassType: return self._classes["str"]
	def bytes(self) -> ClassType: return self._classes["bytes"]
	def tuple(self) -> ClassType: return self._classes["tuple"]

	def general_class_of(self, it:Lit) -> ClassType:
		""" The nominal class a literal widens to once its value is forgotten. """
		return it.general_class_type(self)

STDLIB = Stdlib()
