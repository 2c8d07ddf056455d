"""
The arithmetic every calculator starts with, and the digits it understands.
"""
import operator
from .runtime import Thunk, OPERATOR, force

LITERALS = {"0": 0, "2": 2, "4": 4}

def _divide(a:int, b:int) -> int:
	""" Integer division truncating toward zero. Division by zero raises as usual. """
	quotient = abs(a) // abs(b)
	return quotient if (a < 0) == (b < 0) else -quotient

PRIMITIVE_BINARY = {
	"+" : operator.add,
	"-" : operator.sub,
	"*" : operator.mul,
	"/" : _divide,
}

def strict(fn) -> OPERATOR:
	""" Make a binary function on integers into an operator that forces both operands, left first. """
	def operate(below:Thunk, top:Thunk) -> int:
		a = force(below)
		return fn(a, force(top))
	operate.__name__ = getattr(fn, "__name__", "operate")
	return operate

def seed(table):
	for token, fn in PRIMITIVE_BINARY.items():
		table.define(token, strict(fn))
	return table
