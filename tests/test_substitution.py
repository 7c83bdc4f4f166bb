import io
import unittest
from unittest import mock

from typenorm.calculus import (
	Tuple, Concrete, Unpack, TypeVar, TypeVarTuple, Union, Literal, ClassType,
)
from typenorm.diagnostics import Report, TooManyIssues
from typenorm.ontology import Class, ModuleName
from typenorm.primitive import Stdlib
from typenorm.substitution import Substitution, substitute
from typenorm.simplify import unions

std = Stdlib()
BOOL, INT, STR = std.bool(), std.int(), std.str()
LIST = Class("list", ModuleName.builtins())

class Silence(Report):
	def __init__(self, **kwargs):
		super().__init__(**kwargs)
		self.complain_to_console = mock.Mock()

class VariadicSubstitutionTests(unittest.TestCase):

	def setUp(self) -> None:
		self.Ts = TypeVarTuple("Ts")
		self.report = Silence(verbose=False)

	def sub(self, t, gamma, stdlib=None):
		result = substitute(t, gamma, self.report, stdlib)
		self.report.assert_no_issues("Substitution should not have complained.")
		return result

	def test_end_to_end_concrete_argument(self):
		# A parameter declared as tuple[*Ts], called with a tuple[int, str, bool]:
		declared = Tuple.unpacked([], self.Ts, [])
		result = self.sub(declared, {self.Ts: Tuple.concrete([INT, STR, BOOL])})
		self.assertIsInstance(result.shape, Concrete)
		self.assertEqual(Tuple.concrete([INT, STR, BOOL]), result)

	def test_concrete_argument_joins_prefix(self):
		declared = Tuple.unpacked([INT], self.Ts, [])
		result = self.sub(declared, {self.Ts: Tuple.concrete([INT, STR, BOOL])})
		self.assertEqual(Tuple.concrete([INT, INT, STR, BOOL]), result)

	def test_unbounded_argument_becomes_middle(self):
		declared = Tuple.unpacked([INT], self.Ts, [BOOL])
		result = self.sub(declared, {self.Ts: Tuple.unbounded(STR)})
		self.assertEqual(Tuple.unpacked([INT], Tuple.unbounded(STR), [BOOL]), result)

	def test_variadic_argument_merges(self):
		Us = TypeVarTuple("Us")
		declared = Tuple.unpacked([INT], self.Ts, [BOOL])
		result = self.sub(declared, {self.Ts: Tuple.unpacked([STR], Us, [STR])})
		self.assertEqual(Tuple.unpacked([INT, STR], Us, [STR, BOOL]), result)

	def test_spread_within_concrete(self):
		declared = Tuple.concrete([INT, Unpack(self.Ts)])
		result = self.sub(declared, {self.Ts: Tuple.concrete([STR, BOOL])})
		self.assertEqual(Tuple.concrete([INT, STR, BOOL]), result)

	def test_unbound_binders_survive(self):
		T = TypeVar("T")
		declared = Tuple.unpacked([T], self.Ts, [])
		self.assertEqual(declared, self.sub(declared, {}))

	def test_non_tuple_binding_is_reported(self):
		declared = Tuple.unpacked([], self.Ts, [])
		result = substitute(declared, {self.Ts: INT}, self.report)
		self.assertEqual(declared, result)
		self.assertTrue(self.report.sick())
		self.assertEqual(1, len(self.report.issues))

	def test_every_bad_binding_reaches_the_report(self):
		A, B, C = TypeVarTuple("A"), TypeVarTuple("B"), TypeVarTuple("C")
		declared = Tuple.concrete([Tuple.unpacked([], v, []) for v in (A, B, C)])
		report = Silence(max_issues=None)
		result = substitute(declared, {A: INT, B: INT, C: INT}, report)
		self.assertEqual(declared, result)
		self.assertEqual(3, len(report.issues))

	def test_too_many_issues(self):
		report = Silence(max_issues=1)
		with self.assertRaises(TooManyIssues):
			substitute(Unpack(self.Ts), {self.Ts: INT}, report)

	def test_report_is_required(self):
		with self.assertRaises(TypeError):
			substitute(Unpack(self.Ts), {self.Ts: INT})
		with self.assertRaises(TypeError):
			Substitution({self.Ts: INT})


class UnionSubstitutionTests(unittest.TestCase):

	def setUp(self) -> None:
		self.report = Silence()

	def tearDown(self) -> None:
		self.report.assert_no_issues()

	def test_arms_become_identical(self):
		T = TypeVar("T")
		self.assertEqual(INT, substitute(Union([T, INT]), {T: INT}, self.report))

	def test_literals_collapse_with_registry(self):
		T = TypeVar("T")
		declared = Union([T, Literal.of(True)])
		self.assertEqual(BOOL, substitute(declared, {T: Literal.of(False)}, self.report, std))
		self.assertEqual(
			Union([Literal.of(False), Literal.of(True)]),
			substitute(declared, {T: Literal.of(False)}, self.report),
		)

	def test_type_arguments_are_rewritten(self):
		T, U = TypeVar("T"), TypeVar("U")
		declared = ClassType(LIST, [Union([T, U])])
		result = substitute(declared, {T: STR, U: Union([INT, STR])}, self.report)
		self.assertEqual(ClassType(LIST, [unions([INT, STR])]), result)

	def test_verbose_report_traces_rewrites(self):
		T = TypeVar("T")
		report = Report(verbose=1)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			Substitution({T: INT}, report).visit(Union([T, STR]))
		self.assertIn("Rewrote", err.getvalue())

	def test_quiet_report_says_nothing(self):
		T = TypeVar("T")
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			substitute(Union([T, STR]), {T: INT}, self.report)
		self.assertEqual("", err.getvalue())


if __name__ == '__main__':
	unittest.main()
