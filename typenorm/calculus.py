"""
The data over which the normalization engine operates.

Every type here is a value object. Each one carries a structural key,
and equality, hashing, and ordering all run off that one key.
The first element of each key is a tag for the kind of type,
and the rest is built from the keys of the parts. That way the total
order used for sorting unions cannot disagree with the equality
used to deduplicate them, nor with the hash that caches depend on.

The tags are ordered on purpose: every literal refinement of a class
sorts before any plain class type. The literal-collapsing pass in
the simplifier relies on this.

Types are immutable once built. Operations build new ones.
"""
from itertools import count
from typing import Sequence
from boozetools.support.foundation import Visitor
from .ontology import Class

class UnsupportedLiteral(TypeError):
	pass

# Type tags, in sort order.
LITERAL = 0
LITERAL_STRING = 1
CLASS = 2
TUPLE = 3
UNPACK = 4
TYPE_VAR = 5
TYPE_VAR_TUPLE = 6
ANY = 7
NEVER = 8
UNION = 9

# Literal kinds, in sort order.
BOOL_LIT, INT_LIT, STR_LIT, BYTES_LIT, ENUM_LIT = range(5)

# Tuple shapes, in sort order.
CONCRETE, UNBOUNDED, UNPACKED = range(3)

NEVER_STYLES = ("Never", "NoReturn")

class Term:
	"""Value objects so they can play well with sorting, sets, and the classifier"""
	def __init__(self, *key):
		self._key = key
		self._hash = hash(key)
	def __hash__(self): return self._hash
	def __eq__(self, other): return type(self) is type(other) and self._key == other._key
	def __lt__(self, other:"Term"): return self._key < other._key
	def key(self) -> tuple: return self._key
	def __repr__(self) -> str:
		it = Render().visit(self)
		assert isinstance(it, str), (it, type(self))
		return it

def _keys(terms:Sequence[Term]) -> tuple:
	return tuple(t.key() for t in terms)

###############################################################################

class Lit(Term):
	""" The value inside a literal type """
	def general_class_type(self, stdlib) -> "ClassType":
		raise NotImplementedError(type(self))

class BoolLit(Lit):
	def __init__(self, value:bool):
		assert isinstance(value, bool), type(value)
		self.value = value
		super().__init__(BOOL_LIT, value)
	def general_class_type(self, stdlib) -> "ClassType": return stdlib.bool()

class IntLit(Lit):
	def __init__(self, value:int):
		assert isinstance(value, int) and not isinstance(value, bool), type(value)
		self.value = value
		super().__init__(INT_LIT, value)
	def general_class_type(self, stdlib) -> "ClassType": return stdlib.int()

class StrLit(Lit):
	def __init__(self, value:str):
		assert isinstance(value, str), type(value)
		self.value = value
		super().__init__(STR_LIT, value)
	def general_class_type(self, stdlib) -> "ClassType": return stdlib.str()

class BytesLit(Lit):
	def __init__(self, value:bytes):
		assert isinstance(value, bytes), type(value)
		self.value = value
		super().__init__(BYTES_LIT, value)
	def general_class_type(self, stdlib) -> "ClassType": return stdlib.bytes()

class EnumLit(Lit):
	""" One member of an enumeration. It widens to the enum class itself. """
	def __init__(self, enum_class:Class, member:str):
		assert isinstance(enum_class, Class), type(enum_class)
		self.enum_class = enum_class
		self.member = member
		self._general = ClassType(enum_class)
		super().__init__(ENUM_LIT, enum_class.key, member)
	def general_class_type(self, stdlib) -> "ClassType": return self._general

def lit(value) -> Lit:
	""" The literal for a plain Python value. Enum members need an EnumLit directly. """
	# NB: bool is a subclass of int, so it must come first.
	if isinstance(value, bool): return BoolLit(value)
	if isinstance(value, int): return IntLit(value)
	if isinstance(value, str): return StrLit(value)
	if isinstance(value, bytes): return BytesLit(value)
	raise UnsupportedLiteral("There is no literal type for %r" % (value,))

###############################################################################

class Type(Term):
	pass

class Never(Type):
	""" The bottom type. The style only matters for display. """
	def __init__(self, style:str="Never"):
		assert style in NEVER_STYLES, style
		self.style = style
		super().__init__(NEVER, style)

class Literal(Type):
	def __init__(self, it:Lit):
		assert isinstance(it, Lit), type(it)
		self.lit = it
		super().__init__(LITERAL, it.key())
	@staticmethod
	def of(value) -> "Literal": return Literal(lit(value))

class LiteralString(Type):
	def __init__(self):
		super().__init__(LITERAL_STRING)

class ClassType(Type):
	def __init__(self, cls:Class, targs:Sequence[Type]=()):
		assert isinstance(cls, Class), type(cls)
		self.cls = cls
		self.targs = tuple(targs)
		assert all(isinstance(a, Type) for a in self.targs), self.targs
		super().__init__(CLASS, cls.key, _keys(self.targs))

class Union(Type):
	""" Not necessarily canonical: that's what simplify.unions is for. """
	def __init__(self, members:Sequence[Type]):
		self.members = tuple(members)
		super().__init__(UNION, _keys(self.members))

class Unpack(Type):
	""" Spread the inner type into whatever sequence contains this. """
	def __init__(self, inner:Type):
		assert isinstance(inner, Type), type(inner)
		self.inner = inner
		super().__init__(UNPACK, inner.key())

class TypeVar(Type):
	"""Binders have identity, so they get a serial number in the key."""
	_serials = count()
	def __init__(self, name:str):
		self.name = name
		self.serial = next(TypeVar._serials)
		super().__init__(TYPE_VAR, name, self.serial)

class TypeVarTuple(Type):
	""" A variadic binder. Until substituted, it stands for some unknown run of types. """
	_serials = count()
	def __init__(self, name:str):
		self.name = name
		self.serial = next(TypeVarTuple._serials)
		super().__init__(TYPE_VAR_TUPLE, name, self.serial)

class AnyType(Type):
	def __init__(self):
		super().__init__(ANY)

class Tuple(Type):
	def __init__(self, shape:"Shape"):
		assert isinstance(shape, Shape), type(shape)
		self.shape = shape
		super().__init__(TUPLE, shape.key())
	@staticmethod
	def concrete(elements:Sequence[Type]) -> "Tuple":
		return Tuple(Concrete(elements))
	@staticmethod
	def unbounded(element:Type) -> "Tuple":
		return Tuple(Unbounded(element))
	@staticmethod
	def unpacked(prefix:Sequence[Type], middle:Type, suffix:Sequence[Type]) -> "Tuple":
		return Tuple(Unpacked(prefix, middle, suffix))

###############################################################################

class Shape(Term):
	pass

class Concrete(Shape):
	""" tuple[A, B, C]: exactly so many elements. """
	def __init__(self, elements:Sequence[Type]):
		self.elements = tuple(elements)
		super().__init__(CONCRETE, _keys(self.elements))

class Unbounded(Shape):
	""" tuple[A, ...]: any number of elements, all alike. """
	def __init__(self, element:Type):
		assert isinstance(element, Type), type(element)
		self.element = element
		super().__init__(UNBOUNDED, element.key())

class Unpacked(Shape):
	""" tuple[P, *M, S]: a fixed prefix, one variadic middle, and a fixed suffix. """
	def __init__(self, prefix:Sequence[Type], middle:Type, suffix:Sequence[Type]):
		assert isinstance(middle, Type), type(middle)
		self.prefix = tuple(prefix)
		self.middle = middle
		self.suffix = tuple(suffix)
		super().__init__(UNPACKED, _keys(self.prefix), middle.key(), _keys(self.suffix))

###############################################################################

class Render(Visitor):
	""" Return a string representation of the term, in roughly Python's own notation. """

	def _list(self, items) -> str:
		return ", ".join(self.visit(t) for t in items)

	@staticmethod
	def visit_BoolLit(it:BoolLit): return repr(it.value)
	@staticmethod
	def visit_IntLit(it:IntLit): return repr(it.value)
	@staticmethod
	def visit_StrLit(it:StrLit): return repr(it.value)
	@staticmethod
	def visit_BytesLit(it:BytesLit): return repr(it.value)
	@staticmethod
	def visit_EnumLit(it:EnumLit): return "%s.%s" % (it.enum_class.name, it.member)

	@staticmethod
	def visit_Never(t:Never): return t.style
	def visit_Literal(self, t:Literal): return "Literal[%s]" % self.visit(t.lit)
	@staticmethod
	def visit_LiteralString(t:LiteralString): return "LiteralString"
	def visit_ClassType(self, t:ClassType):
		if t.targs: return "%s[%s]" % (t.cls.name, self._list(t.targs))
		else: return t.cls.name
	def visit_Union(self, t:Union): return " | ".join(self.visit(m) for m in t.members)
	def visit_Unpack(self, t:Unpack): return "*" + self.visit(t.inner)
	@staticmethod
	def visit_TypeVar(t:TypeVar): return t.name
	@staticmethod
	def visit_TypeVarTuple(t:TypeVarTuple): return t.name
	@staticmethod
	def visit_AnyType(t:AnyType): return "Any"
	def visit_Tuple(self, t:Tuple): return self.visit(t.shape)

	def visit_Concrete(self, s:Concrete):
		return "tuple[%s]" % (self._list(s.elements) if s.elements else "()")
	def visit_Unbounded(self, s:Unbounded):
		return "tuple[%s, ...]" % self.visit(s.element)
	def visit_Unpacked(self, s:Unpacked):
		parts = [self.visit(t) for t in s.prefix]
		parts.append("*" + self.visit(s.middle))
		parts.extend(self.visit(t) for t in s.suffix)
		return "tuple[%s]" % ", ".join(parts)
