"""
Everything that can go wrong, and how to talk about it afterward.

The scanner, parser and evaluator raise the exceptions defined here.
They carry the phrase or token that got the blame, so the Report can
illustrate the problem against the source text. A Session catches them
at the boundary and hands them back as ordinary results.
"""
import sys, random
from typing import Optional

from boozetools.support.failureprone import SourceText, illustration

class MatikaError(Exception):
	""" Root of the recoverable failures. """
	kind = "Error"

	def __init__(self, message:str, site=None, hint:Optional[str]=None):
		super().__init__(message)
		self.message = message
		self.site = site
		self.hint = hint

	def __str__(self): return "%s: %s" % (self.kind, self.message)

	def blame(self, site):
		""" Attach a site if nothing more specific has done so already. """
		if self.site is None:
			self.site = site
		return self

class LexError(MatikaError):
	kind = "Lexical error"

class ParseError(MatikaError):
	kind = "Parse error"

class TypeMismatch(MatikaError):
	kind = "Type error"

class ArityError(MatikaError):
	kind = "Arity error"
	def __init__(self, need:int, got:int, site=None):
		plural = '' if need == 1 else 's'
		super().__init__("This takes %d argument%s, but got %d instead." % (need, plural, got), site)
		self.need, self.got = need, got

class TooDeep(MatikaError):
	kind = "Recursion error"

class TooManyIssues(Exception):
	pass

def _outburst():
	openers = ["Hmm. ", "Oops, ", "", ""]
	minced_oaths = ['Blast', 'Botheration', 'Crikey', 'Dagnabbit', 'Phooey', 'Shucks', 'Zounds']
	resignations = [
		'The arithmetic stops here.',
		'That sum will not come out.',
		'Something does not add up.',
	]
	return "%s%s! %s" % tuple(map(random.choice, (openers, minced_oaths, resignations)))

class Report:
	""" Collects issues for the command-line host and complains about them on request. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def sick(self): return bool(self._issues)

	@property
	def issues(self): return tuple(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def failure(self, label:str, text:str, ex:MatikaError):
		""" Turn a caught error into an illustrated issue. """
		source = SourceText(text, filename=label)
		problem = []
		if ex.site is not None and _is_visible(text, ex.site):
			problem.append(Annotation(source, ex.site, ex.kind))
		footer = [ex.hint] if ex.hint else []
		self.issue(Pic(str(ex), label, problem, footer))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

def _is_visible(text:str, site) -> bool:
	start, stop = site.span()
	return 0 <= start < len(text)

class Annotation:
	def __init__(self, source:SourceText, site, caption:str=""):
		start, stop = site.span()
		self.source = source
		self.slice = slice(start, max(stop, start+1))
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.slice.start)
		single_line = self.source.line_of_text(row)
		width = self.slice.stop - self.slice.start
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, label:str, anns:list[Annotation], footer=()):
		self._intro, self._label, self._anns, self._footer = intro, label, anns, footer
	def as_text(self):
		lines = [self._intro, ""]
		if self._anns:
			lines.append(self._label)
		for ann in self._anns:
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
