"""
A lazy postfix calculator with a table of operators you can add to.
"""
from .runtime import Thunk, force
from .calculator import LazyCalculator
from .diagnostics import CalculatorError, UnknownOperator, PostfixSyntaxError, OperatorAlreadyDefined
