"""
This is an interpreter for the Matika expression language.

{0}

For example:

    matika program.mk

will evaluate every statement in program.mk and print the final value.

    matika -e "f(x) = x^2 - 3" -e "plot(f)"

will evaluate each expression in turn, in one session, printing each result.

    matika -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="matika",
	description="Interpreter for the Matika expression language.",
)
parser.add_argument("program", nargs="?", help="a file of Matika statements")
parser.add_argument('-e', "--expression", action="append", default=[], help="evaluate this text; may be given more than once")
parser.add_argument('-p', "--plot", choices=["none", "text", "window"], default="text", help="how to draw plots (default: text)")
parser.add_argument('-v', "--verbose", action="count", help="say more about what is going on")

def _plotter(choice:str):
	if choice == "text":
		from .adapters.teletype_adapter import TextPlotter
		return TextPlotter()
	if choice == "window":
		from .adapters.pygame_adapter import WindowPlotter
		return WindowPlotter()
	return None

def _batches(args):
	if args.program:
		path = Path.cwd() / args.program
		yield str(path), path.read_text(encoding="utf-8")
	for i, text in enumerate(args.expression, 1):
		yield "expression %d" % i, text

def run(args):
	"""
	Each batch runs in the same session. A batch that fails is reported,
	and the next batch still gets its turn, until too many have failed.
	"""
	from .diagnostics import Report, MatikaError, TooManyIssues
	from .session import Session
	from .tree_walker.runtime import render
	from .adapters.teletype_adapter import console_output
	if not (args.program or args.expression):
		parser.error("Give a program file or at least one expression.")
	report = Report(verbose=args.verbose)
	session = Session(plotter=_plotter(args.plot), output=console_output)
	try:
		for label, text in _batches(args):
			report.info("Evaluating", label)
			result = session.evaluate(text)
			if isinstance(result, MatikaError):
				report.failure(label, text, result)
			else:
				console_output(render(result))
	except OSError as ex:
		print("Could not read %s: %s" % (args.program, ex.strerror), file=sys.stderr)
		return 1
	except TooManyIssues:
		report.complain_to_console()
		print("Too many failures; the remaining batches were skipped.", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	return 0

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
