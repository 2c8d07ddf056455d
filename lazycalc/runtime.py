"""
Thunks: the not-yet-values which the calculator builds instead of doing arithmetic.

Unlike a call-by-need thunk, these do NOT remember their value.
Every time something forces one, the whole computation beneath it runs again,
side-effects and all. Operators such as repetition depend on that.
"""
from typing import Callable

OPERATOR = Callable[["Thunk", "Thunk"], int]

class Thunk:
	""" A kind of not-yet-value which can be forced, as often as you like. """
	def __call__(self) -> int:
		raise NotImplementedError(type(self))

class Literal(Thunk):
	def __init__(self, token:str, value:int):
		self.token = token
		self.value = value
	def __call__(self) -> int:
		return self.value
	def __str__(self):
		return self.token
	def __repr__(self):
		return "<Literal %s>"%self.token

class Composite(Thunk):
	"""
	An operator applied to two operands, but not yet.
	The operator function was resolved when the composite was built;
	forcing hands it the operand thunks themselves, so the function alone
	decides whether, how often, and in what order they run.
	"""
	def __init__(self, token:str, fn:OPERATOR, below:Thunk, top:Thunk):
		self.token = token
		self.fn = fn
		self.below = below
		self.top = top
	def __call__(self) -> int:
		return self.fn(self.below, self.top)
	def __str__(self):
		# Iterative: the graph may be deeper than the recursion limit.
		parts, pending = [], [self]
		while pending:
			it = pending.pop()
			if isinstance(it, Composite):
				pending.extend((it.token, it.top, it.below))
			else:
				parts.append(str(it))
		return ''.join(parts)
	def __repr__(self):
		return "<Composite %s>"%self

def force(it:Thunk) -> int:
	""" Run the deferred computation one more time and return what it makes. """
	return it()
