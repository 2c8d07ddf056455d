"""
The operator table: single characters mapped to binary operators over thunks.

It is a name-space that does not like duplicate keys.
Entries go in once and stay put; there is no way to replace or remove one.
"""
from typing import Iterable
from boozetools.support.symtab import NameSpace, NoSuchSymbol, SymbolAlreadyExists
from .runtime import OPERATOR
from .diagnostics import UnknownOperator, OperatorAlreadyDefined

class OperatorTable:
	def __init__(self, reserved:Iterable[str]=()):
		self._reserved = frozenset(reserved)
		self._namespace = NameSpace(place=self)
		self._tokens = []

	def define(self, token:str, fn:OPERATOR):
		if not (isinstance(token, str) and len(token) == 1):
			raise ValueError("Operators are single characters, not %r"%(token,))
		if not callable(fn):
			raise TypeError("Operator %r needs a callable, not %r"%(token, fn))
		if token in self._reserved:
			raise OperatorAlreadyDefined(token)
		try: self._namespace[token] = fn
		except SymbolAlreadyExists: raise OperatorAlreadyDefined(token) from None
		self._tokens.append(token)

	def lookup(self, token:str) -> OPERATOR:
		try: return self._namespace[token]
		except NoSuchSymbol:
			raise UnknownOperator(caption="No operator is defined for %r"%token) from None

	def tokens(self) -> tuple[str, ...]:
		""" In order of definition """
		return tuple(self._tokens)
