import io
import unittest
from contextlib import redirect_stdout, redirect_stderr
from monadparse import __main__ as cli


def run_cli(*argv):
	out, err = io.StringIO(), io.StringIO()
	with redirect_stdout(out), redirect_stderr(err):
		status = cli.main(cli.parse_arguments(list(argv)))
	return status, out.getvalue(), err.getvalue()


class TestCommandLine(unittest.TestCase):
	def test_00_arguments(self):
		status, out, err = run_cli("3+4*2", "(1+1)*2")
		self.assertEqual(0, status)
		self.assertEqual([
			"expression 3+4*2 was evaluated. Result is 11.0",
			"expression (1+1)*2 was evaluated. Result is 4.0",
		], out.splitlines())
		self.assertEqual("", err)

	def test_01_failures_go_to_stderr(self):
		status, out, err = run_cli("sasdasd", "2+", "1")
		self.assertEqual(1, status)
		self.assertEqual(["expression 1 was evaluated. Result is 1.0"], out.splitlines())
		self.assertEqual(["parsing failed", "not all input consumed"], err.splitlines())

	def test_02_verbose(self):
		status, out, err = run_cli("-v", "1+2*3")
		self.assertEqual(0, status)
		self.assertIn("(1.0 + (2.0 * 3.0))", out)

	def test_03_each_line(self):
		lines = io.StringIO("1+1\n\n  2*3  \nquit\n4\n")
		self.assertEqual(["1+1", "2*3"], list(cli.each_line(lines)))


if __name__ == '__main__':
	unittest.main()
