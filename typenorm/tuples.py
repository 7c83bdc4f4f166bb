"""
A couple of operations on tuple types, built on the canonicalizers.

They come up when checking `x + y` for tuples, and when iterating over
a tuple (or indexing it with something other than a literal integer).
Inputs need not be canonical; outputs are.
"""
from .calculus import Type, AnyType, Unpack, Tuple, Shape, Concrete, Unbounded, Unpacked
from .simplify import unions, simplify_tuples

def _canonical(shape:Shape) -> Shape:
	# The simplifier always hands back a tuple type, even when it unwraps one.
	return simplify_tuples(shape).shape

def _spread_element(middle:Type) -> Type:
	""" What one element of a variadic middle looks like. Opaque middles could be anything. """
	if isinstance(middle, Tuple): return element_union(middle.shape)
	return AnyType()

def _element(t:Type) -> Type:
	return _spread_element(t.inner) if isinstance(t, Unpack) else t

def _variadic_parts(shape:Shape) -> tuple[tuple, Type, tuple]:
	if isinstance(shape, Unbounded): return (), Tuple(shape), ()
	assert isinstance(shape, Unpacked), type(shape)
	return shape.prefix, shape.middle, shape.suffix

def element_union(shape:Shape) -> Type:
	""" The type of an arbitrary element, as seen by iteration or a non-literal index. """
	shape = _canonical(shape)
	if isinstance(shape, Concrete):
		return unions([_element(t) for t in shape.elements])
	if isinstance(shape, Unbounded):
		return shape.element
	prefix, middle, suffix = _variadic_parts(shape)
	return unions([*map(_element, prefix), _spread_element(middle), *map(_element, suffix)])

def concat(left:Shape, right:Shape) -> Type:
	"""
	The type of `left + right`.
	Fixed-size sides join the other side's prefix or suffix.
	When both sides are variadic, whatever lies between the outer prefix
	and the outer suffix becomes a single unbounded middle.
	"""
	left, right = _canonical(left), _canonical(right)
	if isinstance(left, Concrete) and isinstance(right, Concrete):
		return Tuple(Concrete(left.elements + right.elements))
	if isinstance(left, Concrete):
		prefix, middle, suffix = _variadic_parts(right)
		return simplify_tuples(Unpacked(left.elements + prefix, middle, suffix))
	if isinstance(right, Concrete):
		prefix, middle, suffix = _variadic_parts(left)
		return simplify_tuples(Unpacked(prefix, middle, suffix + right.elements))
	l_prefix, l_middle, l_suffix = _variadic_parts(left)
	r_prefix, r_middle, r_suffix = _variadic_parts(right)
	between = unions([
		_spread_element(l_middle),
		*map(_element, l_suffix),
		*map(_element, r_prefix),
		_spread_element(r_middle),
	])
	return simplify_tuples(Unpacked(l_prefix, Tuple(Unbounded(between)), r_suffix))
