import unittest

from lazycalc import LazyCalculator, CalculatorError, UnknownOperator, PostfixSyntaxError, OperatorAlreadyDefined
from lazycalc.diagnostics import as_text

class ZooOfFail(unittest.TestCase):
	""" Tests that assert about failure modes. """

	def setUp(self):
		self.calc = LazyCalculator()

	def test_00_syntax_error(self):
		for bad in ["", "42", "4+", "424+", "+", "4200+"]:
			with self.subTest(bad):
				with self.assertRaises(PostfixSyntaxError):
					self.calc.calculate(bad)

	def test_01_where_it_went_wrong(self):
		for bad, offset in [("", 0), ("42", 2), ("4+", 1), ("424+", 4)]:
			with self.subTest(bad):
				with self.assertRaises(PostfixSyntaxError) as cm:
					self.calc.parse(bad)
				self.assertEqual(bad, cm.exception.text)
				self.assertEqual(offset, cm.exception.offset)

	def test_02_unknown_operator(self):
		with self.assertRaises(UnknownOperator) as cm:
			self.calc.calculate("02&")
		self.assertEqual(2, cm.exception.offset)

	def test_03_unknown_operator_beats_underflow(self):
		for bad in ["&", "4&", "42+&"]:
			with self.subTest(bad):
				with self.assertRaises(UnknownOperator):
					self.calc.parse(bad)

	def test_03a_lookup_of_unknown_operator(self):
		with self.assertRaises(UnknownOperator) as cm:
			self.calc.lookup('&')
		self.assertIsNone(cm.exception.text)
		self.assertIsNone(cm.exception.offset)
		self.assertIn("'&'", as_text(cm.exception))
		self.assertNotIn("offset", as_text(cm.exception))

	def test_04_first_problem_wins(self):
		with self.assertRaises(UnknownOperator):
			self.calc.parse("42&+")
		with self.assertRaises(PostfixSyntaxError):
			self.calc.parse("4+&")

	def test_05_redefinition(self):
		self.calc.define('!', lambda a, b: a() * 10 + b())
		for token in "+-*/!":
			with self.subTest(token):
				with self.assertRaises(OperatorAlreadyDefined):
					self.calc.define(token, lambda a, b: 0)

	def test_06_digits_are_reserved(self):
		for token in "024":
			with self.subTest(token):
				with self.assertRaises(OperatorAlreadyDefined):
					self.calc.define(token, lambda a, b: 0)

	def test_07_failed_definition_changes_nothing(self):
		before = self.calc.operators()
		plus = self.calc.lookup('+')
		with self.assertRaises(OperatorAlreadyDefined):
			self.calc.define('+', lambda a, b: 0)
		self.assertIs(plus, self.calc.lookup('+'))
		self.assertEqual(before, self.calc.operators())
		self.assertEqual(6, self.calc.calculate("42+"))

	def test_08_tokens_are_single_characters(self):
		for bogon in ["", "ab", 7, None]:
			with self.subTest(repr(bogon)):
				with self.assertRaises(ValueError):
					self.calc.define(bogon, lambda a, b: 0)

	def test_09_everything_is_a_calculator_error(self):
		for kind in UnknownOperator, PostfixSyntaxError, OperatorAlreadyDefined:
			with self.subTest(kind.__name__):
				self.assertTrue(issubclass(kind, CalculatorError))

	def test_10_explanations(self):
		with self.assertRaises(OperatorAlreadyDefined) as cm:
			self.calc.define('*', lambda a, b: 0)
		self.assertIn("'*'", as_text(cm.exception))
		for bad in ["4+", "02&", "42", ""]:
			with self.subTest(bad):
				with self.assertRaises(CalculatorError) as cm:
					self.calc.parse(bad)
				self.assertTrue(as_text(cm.exception).startswith(type(cm.exception).__name__))


if __name__ == '__main__':
	unittest.main()
