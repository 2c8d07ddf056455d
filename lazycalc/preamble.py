"""
Some operators that show off what laziness buys you:
control flow and side-effects, built from nothing but thunks.

	!	concatenate digits: 42! is forty-two.
	,	do the left thing, then the right thing.
	$	do the right thing as many times as the left thing says.
	?	do the right thing only if the left thing is not zero.
	P	append "pomidor" to a buffer.
"""
from .runtime import Thunk, OPERATOR, force

class Buffer:
	""" An opaque mutable cell of text. Operators share it by reference. """
	def __init__(self):
		self._parts = []
	def append(self, text:str):
		self._parts.append(text)
	def clear(self):
		self._parts.clear()
	def __str__(self):
		return ''.join(self._parts)
	def __len__(self):
		return sum(map(len, self._parts))

def concatenate(a:Thunk, b:Thunk) -> int:
	return force(a) * 10 + force(b)

def sequence(a:Thunk, b:Thunk) -> int:
	force(a)
	return force(b)

def repeat(n:Thunk, body:Thunk) -> int:
	for _ in range(force(n)):
		force(body)
	return 0

def guard(condition:Thunk, consequence:Thunk) -> int:
	return force(consequence) if force(condition) else 0

def emitter(buffer:Buffer, text:str) -> OPERATOR:
	""" An operator which ignores its operands and writes to the buffer. """
	def emit(a:Thunk, b:Thunk) -> int:
		buffer.append(text)
		return 0
	return emit

def install(calculator, buffer:Buffer):
	calculator.define('!', concatenate)
	calculator.define(',', sequence)
	calculator.define('$', repeat)
	calculator.define('?', guard)
	calculator.define('P', emitter(buffer, "pomidor"))
	return calculator
