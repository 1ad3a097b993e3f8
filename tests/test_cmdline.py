import io
import os
import tempfile
import unittest
from unittest import mock

from matika import cmdline
from matika.diagnostics import Report, TypeMismatch, ParseError, TooManyIssues
from matika.front_end import parse_text

def run(*argv):
	return cmdline.run(cmdline.parser.parse_args(list(argv)))

@mock.patch("matika.adapters.teletype_adapter.console_output")
class CommandLineTests(unittest.TestCase):

	def test_expression_prints_its_value(self, console):
		self.assertEqual(0, run("-e", "2+3*4", "-p", "none"))
		console.assert_called_once_with("14")

	def test_expressions_share_a_session(self, console):
		self.assertEqual(0, run("-e", "x = 5", "-e", "print x", "-e", "x+1", "-p", "none"))
		self.assertEqual(["0", "5", "0", "6"], [c.args[0] for c in console.call_args_list])

	def test_program_file(self, console):
		with tempfile.TemporaryDirectory() as folder:
			path = os.path.join(folder, "square.mk")
			with open(path, "w", encoding="utf-8") as fh:
				fh.write("f(x) = x^2\nf(7)\n")
			self.assertEqual(0, run(path, "-p", "none"))
		console.assert_called_once_with("49")

	def test_missing_file(self, console):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			self.assertEqual(1, run("no/such/file.mk", "-p", "none"))
		self.assertIn("Could not read", err.getvalue())
		console.assert_not_called()

	@mock.patch.object(Report, "complain_to_console")
	def test_failed_batch_does_not_stop_the_next(self, complain, console):
		self.assertEqual(1, run("-e", "sin(1, 2)", "-e", "1+1", "-p", "none"))
		complain.assert_called_once_with()
		console.assert_called_once_with("2")

	@mock.patch.object(Report, "complain_to_console")
	def test_gives_up_after_too_many_failures(self, complain, console):
		argv = ["-e", "pi(1)", "-e", "1+", "-e", "2 $ 2", "-e", "print 4", "-p", "none"]
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			self.assertEqual(1, run(*argv))
		complain.assert_called_once_with()
		self.assertIn("Too many failures", err.getvalue())
		console.assert_not_called()

	def test_nothing_to_do(self, console):
		with mock.patch("sys.stderr", new_callable=io.StringIO):
			with self.assertRaises(SystemExit):
				run()

class ReportTests(unittest.TestCase):

	def test_failure_is_illustrated(self):
		text = "x = 1\ny = x(2)"
		report = Report()
		report.failure("sample", text, TypeMismatch("1 is not a function.", parse_text(text)[1].initializer))
		self.assertTrue(report.sick())
		picture = report.issues[0].as_text()
		self.assertIn("Type error: 1 is not a function.", picture)
		self.assertIn("sample", picture)

	def test_hint_lands_in_the_footer(self):
		text = "1 +"
		try:
			parse_text(text)
		except ParseError as ex:
			report = Report()
			report.failure("sample", text, ex)
			self.assertTrue(report.issues[0].as_text().endswith(ex.hint))
		else:
			self.fail("Should not parse.")

	def test_errors_without_a_site(self):
		report = Report()
		report.failure("sample", "", TypeMismatch("Nothing to see."))
		self.assertEqual("Type error: Nothing to see.\n", report.issues[0].as_text())

	def test_too_many_issues(self):
		report = Report(max_issues=2)
		report.failure("a", "", TypeMismatch("One."))
		with self.assertRaises(TooManyIssues):
			report.failure("b", "", TypeMismatch("Two."))

	def test_complaints_go_to_stderr(self):
		report = Report()
		report.failure("sample", "", TypeMismatch("Nothing to see."))
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			report.complain_to_console()
		self.assertIn("Nothing to see.", err.getvalue())

	def test_quiet_unless_verbose(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			Report().info("hush")
			Report(verbose=1).info("hello")
		self.assertEqual("hello\n", err.getvalue())

if __name__ == '__main__':
	unittest.main()
