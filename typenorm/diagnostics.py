"""
Reporting, such as it is.

The canonicalizers themselves never complain: every input has an answer.
But the passes built on top of them (substitution, mainly) can meet
inputs that only a confused caller would supply. Those get noted here,
and the caller decides whether and when to bemoan them on the console.
"""
import sys, random
from typing import Any, Optional, Sequence

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm. ", "", ""]
	exclamations = [
		'Blast', 'Bother', 'Botheration', 'Confound it', 'Drat', 'Egad',
		'Fiddlesticks', 'Gadzooks', 'Goodness', 'Gracious', 'Jiminy',
		'Phooey', 'Rats', 'Shucks', 'Thunderation', 'Zounds',
	]
	resignations = [
		'I cannot make this canonical.',
		'These types refuse to behave.',
		'Somebody handed me nonsense.',
		'Please check what you asked for.',
	]
	return "%s%s! %s" % tuple(map(random.choice, (particle, exclamations, resignations)))

class Complaint:
	def __init__(self, intro:str, details:Sequence[str]=(), footer:Sequence[str]=()):
		self.intro, self.details, self.footer = intro, list(details), list(footer)
	def as_text(self):
		lines = [self.intro]
		lines.extend("    " + d for d in self.details)
		lines.extend(self.footer)
		return '\n'.join(lines)
	def __repr__(self): return "<Complaint: %s>" % self.intro

class Report:
	""" Collects complaints, and chatters on stderr when asked to be verbose. """
	_issues : list[Complaint]

	def __init__(self, *, verbose:int=0, max_issues:Optional[int]=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self) -> list[Complaint]: return list(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Complaint):
		self._issues.append(it)
		# No limit at all, when max_issues is None.
		if self._max_issues is not None and len(self._issues) >= self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args:Any):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message=""):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst() + " " + message)

	# Methods the substitution pass might call:

	def not_a_tuple_binding(self, binder, bound):
		intro = "A variadic type parameter can only stand for a tuple of types."
		details = ["%s was bound to %s" % (binder, bound)]
		footer = ["The parameter is left as it was."]
		self.issue(Complaint(intro, details, footer))

def _bemoan(issues:Sequence[Complaint]):
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
