"""
Type-numbering: each distinct type gets a small integer,
so that memo tables can key on numbers rather than whole trees.

Conveniently, type-numbering is just an equivalence classification scheme.
I can reuse the one from booze-tools. Since types hash and compare by
their structural keys, any two constructions of the same canonical type
land in the same class.

Each numbering belongs to whoever made it. There is no global one.
"""
from typing import Optional, Sequence
from boozetools.support.foundation import EquivalenceClassifier
from .calculus import Type
from .primitive import Stdlib
from .simplify import unions, unions_with_literals

class TypeNumbering:
	def __init__(self):
		self._classifier = EquivalenceClassifier()

	def number(self, t:Type) -> int:
		assert isinstance(t, Type), type(t)
		return self._classifier.classify(t)

	def exemplar(self, number:int) -> Type:
		""" The first type given this number. Any other would do as well. """
		return self._classifier.exemplars[number]

	def same(self, a:Type, b:Type) -> bool:
		return self.number(a) == self.number(b)

	def number_of_union(self, xs:Sequence[Type], stdlib:Optional[Stdlib]=None) -> int:
		if stdlib is None: return self.number(unions(xs))
		else: return self.number(unions_with_literals(xs, stdlib))

	def __len__(self): return len(self._classifier.exemplars)
