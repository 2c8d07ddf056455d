"""
This is a lazy postfix calculator.

{0}

For example:

    lazycalc 42+ 242--

will print 6 and then 0.

    lazycalc -p 42!42P$

will do something 42 times, then show you what it did.

    lazycalc -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="lazycalc",
	description="Lazy postfix calculator over the digits 0, 2, and 4.",
)
parser.add_argument("expression", nargs="+", help="try 42+ for example.")
parser.add_argument('-c', "--check", action="store_true", help="Parse the expressions but do not actually calculate anything.")
parser.add_argument('-p', "--preamble", action="store_true", help="Also define the operators ! , $ ? and P.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is going on.")

def run(args):
	from .calculator import LazyCalculator
	from .diagnostics import Report, CalculatorError
	from .preamble import Buffer, install
	report = Report(verbose=args.verbose)
	calculator = LazyCalculator(report=report)
	buffer = Buffer()
	if args.preamble:
		install(calculator, buffer)
	for text in args.expression:
		try:
			if args.check:
				print(calculator.parse(text), file=sys.stderr)
			else:
				print(calculator.calculate(text))
		except CalculatorError as ex:
			report.issue(ex)
	if report.sick():
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
	if len(buffer):
		print(buffer)
	return 0

def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	if argv:
		return run(parser.parse_args(argv))
	else:
		print(__doc__.strip().format(parser.format_usage()))
