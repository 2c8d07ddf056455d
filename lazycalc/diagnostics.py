"""
Things that go wrong, and how to tell people about them.

The calculator raises exceptions; it never swallows them.
A Report is what the console driver uses to explain them afterward.
"""
import sys, random
from typing import Optional
from boozetools.support.failureprone import SourceText, illustration

class CalculatorError(Exception):
	""" Base of everything the calculator means to raise on purpose. """
	caption = ""
	def __init__(self, text:Optional[str]=None, offset:Optional[int]=None, caption:Optional[str]=None):
		super().__init__(text, offset)
		self.text = text
		self.offset = offset
		if caption is not None:
			self.caption = caption

	def __str__(self):
		if self.text is None: return self.caption
		return "%s at offset %s of %r"%(self.caption, self.offset, self.text)

class UnknownOperator(CalculatorError, KeyError):
	caption = "No operator is defined for this character"

class PostfixSyntaxError(CalculatorError):
	caption = "Malformed postfix expression"

class OperatorAlreadyDefined(CalculatorError, KeyError):
	caption = "This character already means something"
	def __init__(self, token:str):
		super().__init__(None, None)
		self.token = token
	def __str__(self):
		return "%s: %r"%(self.caption, self.token)


def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Jeepers', 'Nuts', 'Rats',
	]
	resignations = [
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'That does not add up.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects calculator errors and explains them on the console. """
	_issues : list[CalculatorError]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	def sick(self): return bool(self._issues)

	def issue(self, it:CalculatorError):
		assert isinstance(it, CalculatorError), type(it)
		self._issues.append(it)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print(_outburst(), file=sys.stderr)
		for ex in self._issues:
			print("  -"*20, file=sys.stderr)
			print(as_text(ex), file=sys.stderr)
		sys.stderr.flush()

def as_text(ex:CalculatorError) -> str:
	"""
	Registration problems have no source text to point at, so they get one line.
	Parse problems get a picture of the expression with the guilty character marked.
	"""
	if ex.text is None:
		return str(ex)
	source = SourceText(ex.text)
	offset = min(ex.offset, len(ex.text))
	if ex.text:
		row, col = source.find_row_col(offset)
		single_line = source.line_of_text(row)
	else:
		row, col, single_line = 1, 0, ""
	width = 1 if offset < len(ex.text) else 0
	return '\n'.join([
		type(ex).__name__,
		illustration(single_line, col, width, prefix='% 6d |' % row, caption=ex.caption),
	])
