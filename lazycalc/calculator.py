"""
The postfix parser, which is also the evaluator, because parsing is all it does.

Parsing builds a graph of thunks on a stack. Nothing gets computed until
somebody forces the one thunk left standing at the end.
"""
from typing import Mapping, Optional
from . import primitive
from .runtime import Thunk, Literal, Composite, OPERATOR, force
from .space import OperatorTable
from .diagnostics import Report, UnknownOperator, PostfixSyntaxError

class LazyCalculator:
	def __init__(self, *, literals:Mapping[str, int]=primitive.LITERALS, report:Optional[Report]=None):
		self._literals = dict(literals)
		self._report = report or Report(verbose=0)
		self._table = primitive.seed(OperatorTable(reserved=self._literals))

	def define(self, token:str, fn:OPERATOR):
		""" Teach the calculator a new operator. Digits and existing operators are off-limits. """
		self._table.define(token, fn)
		self._report.info("Defined operator %r"%token)

	register = define

	def lookup(self, token:str) -> OPERATOR:
		return self._table.lookup(token)

	def operators(self) -> tuple[str, ...]:
		return self._table.tokens()

	def parse(self, text:str) -> Thunk:
		stack : list[Thunk] = []
		for offset, c in enumerate(text):
			if c in self._literals:
				stack.append(Literal(c, self._literals[c]))
				continue
			try: fn = self._table.lookup(c)
			except UnknownOperator: raise UnknownOperator(text, offset) from None
			if len(stack) < 2:
				raise PostfixSyntaxError(text, offset, "Not enough operands for this operator")
			top = stack.pop()
			below = stack.pop()
			stack.append(Composite(c, fn, below, top))
		if not stack:
			raise PostfixSyntaxError(text, len(text), "There is nothing here to calculate")
		if len(stack) > 1:
			caption = "%d operands are left over; more operators are needed"%len(stack)
			raise PostfixSyntaxError(text, len(text), caption)
		self._report.info("Parsed", stack[0])
		return stack[0]

	def calculate(self, text:str) -> int:
		return force(self.parse(text))
