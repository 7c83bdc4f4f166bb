"""
Rewriting types under a substitution of their binders.

This is where the canonicalizers earn their keep. Replacing a
TypeVarTuple with an actual tuple type leaves nonsense like
tuple[int, *tuple[str, bool]] lying about, and replacing a TypeVar
inside a union can make two arms identical. So every tuple and every
union that passes through here comes out the other side canonical.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from .calculus import (
	Type, ClassType, Union, Unpack, TypeVar, TypeVarTuple, Tuple,
	Concrete, Unbounded, Unpacked,
)
from .diagnostics import Report
from .primitive import Stdlib
from .simplify import unions, unions_with_literals, simplify_tuples

GAMMA = dict[Type, Type]

class Substitution(Visitor):
	"""
	Binders found in gamma get replaced; the rest survive as they are.
	With a class registry supplied, unions also get their literals collapsed.
	Complaints go on the caller's report.
	"""
	def __init__(self, gamma:GAMMA, report:Report, stdlib:Optional[Stdlib]=None):
		assert isinstance(report, Report), type(report)
		self.gamma = gamma
		self._stdlib = stdlib
		self._report = report

	def _all(self, types) -> tuple[Type, ...]:
		return tuple(self.visit(t) for t in types)

	def _trace(self, before:Type, after:Type):
		if before != after:
			self._report.info("Rewrote", before, "as", after)

	@staticmethod
	def visit_Never(t): return t
	visit_Literal = visit_Never
	visit_LiteralString = visit_Never
	visit_AnyType = visit_Never

	def visit_ClassType(self, t:ClassType):
		return ClassType(t.cls, self._all(t.targs)) if t.targs else t

	def visit_TypeVar(self, v:TypeVar):
		return self.gamma.get(v, v)

	def visit_TypeVarTuple(self, v:TypeVarTuple):
		bound = self.gamma.get(v, v)
		if bound is v or isinstance(bound, (Tuple, TypeVarTuple)):
			return bound
		self._report.not_a_tuple_binding(v, bound)
		return v

	def visit_Unpack(self, t:Unpack):
		return Unpack(self.visit(t.inner))

	def visit_Union(self, t:Union):
		members = self._all(t.members)
		if self._stdlib is None: result = unions(members)
		else: result = unions_with_literals(members, self._stdlib)
		self._trace(t, result)
		return result

	def visit_Tuple(self, t:Tuple):
		result = simplify_tuples(self.visit(t.shape))
		self._trace(t, result)
		return result

	def visit_Concrete(self, s:Concrete):
		return Concrete(self._all(s.elements))

	def visit_Unbounded(self, s:Unbounded):
		return Unbounded(self.visit(s.element))

	def visit_Unpacked(self, s:Unpacked):
		return Unpacked(self._all(s.prefix), self.visit(s.middle), self._all(s.suffix))

def substitute(t:Type, gamma:GAMMA, report:Report, stdlib:Optional[Stdlib]=None) -> Type:
	return Substitution(gamma, report, stdlib).visit(t)
