"""
Canonical Forms
================

Two semantically identical types must compare equal and hash equal,
however they were put together. Everything downstream leans on that:
structural equality, subtype checks, the inference cache, and the
text of diagnostics. So here we reduce arbitrary unions and arbitrary
tuple compositions to one canonical form each.

A canonical union is flat, sorted, free of duplicates and of Never,
and never has fewer than two members. (With fewer, it is not a union.)
With a class registry on hand, redundant literals are also collapsed.

A canonical tuple has no spread of a fixed-size tuple directly among
its elements (those get inlined), and never wraps a bare tuple type
in an otherwise-empty variadic shape (that unwraps to the tuple).

These functions are pure and total. Every input has a defined answer,
including the empty union, which is Never. Callers that want to complain
about degenerate input must do so themselves.
"""
from bisect import bisect_left
from typing import Optional, Sequence
from .calculus import (
	Type, Never, Literal, LiteralString, ClassType, Union, Unpack,
	Tuple, Shape, Concrete, Unpacked, BoolLit, StrLit,
)
from .primitive import Stdlib

def _flatten(xs:Sequence[Type], res:list[Type]):
	for x in xs:
		if isinstance(x, Union): _flatten(x.members, res)
		elif isinstance(x, Never): pass
		else: res.append(x)

def flatten_and_dedup(xs:Sequence[Type]) -> list[Type]:
	""" Turn unions of unions into a single flat list, sorted and without duplicates. """
	flat = []
	_flatten(xs, flat)
	flat.sort()
	res = []
	for x in flat:
		if not res or res[-1] != x: res.append(x)
	return res

def _try_collapse(xs:Sequence[Type]) -> Optional[Type]:
	""" Nothing is Never; one thing is itself. Otherwise, None. """
	if not xs: return Never()
	if len(xs) == 1: return xs[0]
	return None

def _unions_internal(xs:Sequence[Type], stdlib:Optional[Stdlib]) -> Type:
	xs = list(xs)
	collapsed = _try_collapse(xs)
	if collapsed is not None: return collapsed
	res = flatten_and_dedup(xs)
	if stdlib is not None:
		res = collapse_literals(res, stdlib)
	# Flattening and literal-collapse may have left only 0 or 1 elements.
	collapsed = _try_collapse(res)
	if collapsed is not None: return collapsed
	return Union(res)

def unions(xs:Sequence[Type]) -> Type:
	""" Union a set of types together, simplifying as much as you can. """
	return _unions_internal(xs, None)

def unions_with_literals(xs:Sequence[Type], stdlib:Stdlib) -> Type:
	"""
	Like `unions`, but also simplify away things regarding literals if you can,
	e.g. `Literal[True, False] ==> bool`.
	"""
	return _unions_internal(xs, stdlib)

def collapse_literals(types:list[Type], stdlib:Stdlib) -> list[Type]:
	"""
	Perform all the literal transformations we can think of:

	1. Literal[True, False] ==> bool
	2. Literal[0] | int ==> int (and likewise for bool, str, bytes, and enum members)
	3. LiteralString | str ==> str
	4. LiteralString | Literal["x"] ==> LiteralString

	Takes a sorted, deduplicated list and returns one in the same condition.
	If there is nothing to do, you get the same list back.
	"""
	# General class of every literal seen -> whether that plain class also appears.
	plain_seen: dict[ClassType, bool] = {}
	has_literal_string = False
	has_specific_str = False
	has_true = False
	has_false = False

	# The sort order puts every literal before any class type,
	# so a class type need only check whether it is already on the map.
	for t in types:
		if isinstance(t, LiteralString):
			has_literal_string = True
			plain_seen[stdlib.str()] = False
		elif isinstance(t, Literal):
			x = t.lit
			if isinstance(x, BoolLit):
				if x.value: has_true = True
				else: has_false = True
			elif isinstance(x, StrLit):
				has_specific_str = True
			plain_seen[x.general_class_type(stdlib)] = False
		elif isinstance(t, ClassType) and plain_seen and t in plain_seen:
			plain_seen[t] = True

	both_bools = has_true and has_false
	if not (any(plain_seen.values()) or both_bools or (has_literal_string and has_specific_str)):
		return types

	def keep(t:Type) -> bool:
		if isinstance(t, LiteralString):
			return plain_seen.get(stdlib.str()) is False
		if isinstance(t, Literal):
			x = t.lit
			if isinstance(x, BoolLit) and both_bools: return False
			if isinstance(x, StrLit) and has_literal_string: return False
			return plain_seen.get(x.general_class_type(stdlib)) is False
		return True

	res = [t for t in types if keep(t)]

	# Both booleans went away, so the plain class must now stand in for them.
	bool_type = stdlib.bool()
	if both_bools and plain_seen.get(bool_type) is False:
		position = bisect_left(res, bool_type)
		if position == len(res) or res[position] != bool_type:
			res.insert(position, bool_type)
	return res

###############################################################################

def _is_concrete_tuple(t:Type) -> bool:
	return isinstance(t, Tuple) and isinstance(t.shape, Concrete)

def flatten_unpacked_concrete_tuples(elts:Sequence[Type]) -> list[Type]:
	""" (a, *(b, c), d) is just (a, b, c, d). Other elements pass through untouched. """
	result = []
	for elt in elts:
		if isinstance(elt, Unpack) and _is_concrete_tuple(elt.inner):
			result.extend(elt.inner.shape.elements)
		else:
			result.append(elt)
	return result

def simplify_tuples(shape:Shape) -> Type:
	"""
	After a TypeVarTuple gets substituted with a tuple type, try to simplify the type.
	The cases are mutually exclusive, and tried in this order.
	"""
	assert isinstance(shape, Shape), type(shape)
	if isinstance(shape, Concrete):
		return Tuple(Concrete(flatten_unpacked_concrete_tuples(shape.elements)))
	if isinstance(shape, Unpacked):
		prefix, middle, suffix = shape.prefix, shape.middle, shape.suffix
		if isinstance(middle, Tuple):
			if not prefix and not suffix:
				return middle
			inner = middle.shape
			if isinstance(inner, Concrete):
				# A fixed-size middle absorbs its neighbors entirely.
				return Tuple(Concrete(flatten_unpacked_concrete_tuples(prefix + inner.elements + suffix)))
			if isinstance(inner, Unpacked):
				# Outer fixed segments merge into the inner ones; the innermost middle survives.
				new_prefix = flatten_unpacked_concrete_tuples(prefix) + flatten_unpacked_concrete_tuples(inner.prefix)
				new_suffix = flatten_unpacked_concrete_tuples(inner.suffix) + flatten_unpacked_concrete_tuples(suffix)
				return Tuple(Unpacked(new_prefix, inner.middle, new_suffix))
		return Tuple(Unpacked(
			flatten_unpacked_concrete_tuples(prefix),
			middle,
			flatten_unpacked_concrete_tuples(suffix),
		))
	return Tuple(shape)
