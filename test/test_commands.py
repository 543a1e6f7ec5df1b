""" Test cases for the various commandline utilities. """

import unittest
import tempfile
import io
import os
import sys
from unittest.mock import patch

from sel.cli.run import run
from sel.cli.check import check
from sel.__main__ import main


def new_temp_file(suffix):
    """ Generate a new temporary filename """
    handle, filename = tempfile.mkstemp(suffix=suffix)
    os.close(handle)
    return filename


class RunTestCase(unittest.TestCase):
    """ Test the run command-line utility """
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_run_all(self, mock_stdout):
        run(['(4+8)*15'])
        output = mock_stdout.getvalue()
        self.assertTrue(output.startswith('Result of evaluation:\n\n180\n'))
        self.assertIn(
            '\n\nTranslation to Lisp:\n\n'
            "(require '[clojure.math.numeric-tower :refer [expt]])\n"
            '(* (+ 4 8) 15)\n', output)
        self.assertIn('\n\nTranslation to C:\n\n#include <stdio.h>', output)
        self.assertIn('printf("%d",((4+8)*15));', output)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_emit_single(self, mock_stdout):
        run(['--emit', 'eval', '2**10'])
        self.assertEqual('1024\n', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_emit_lisp(self, mock_stdout):
        run(['--emit', 'lisp', '2+3'])
        self.assertTrue(mock_stdout.getvalue().endswith('\n(+ 2 3)\n'))

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_ast(self, mock_stdout):
        run(['--ast', '--emit', 'c', '1'])
        output = mock_stdout.getvalue()
        self.assertTrue(output.startswith('Prog\n  Int [INT, "1"]\n'))
        self.assertIn('printf("%d",1);', output)

    @patch('sys.stdin', new_callable=lambda: io.StringIO('2+3\n'))
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_read_stdin(self, mock_stdout, mock_stdin):
        run(['--emit', 'eval'])
        self.assertEqual('5\n', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    @patch('sys.stderr', new_callable=io.StringIO)
    def test_bad_syntax(self, mock_stderr, mock_stdout):
        with self.assertRaises(SystemExit) as cm:
            run(['4+'])
        self.assertEqual(1, cm.exception.code)
        self.assertEqual('Bad syntax!\n', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    @patch('sys.stderr', new_callable=io.StringIO)
    def test_evaluation_error(self, mock_stderr, mock_stdout):
        """ Overflowing powers are reported as an error """
        with self.assertRaises(SystemExit) as cm:
            run(['--emit', 'eval', '10**400'])
        self.assertEqual(1, cm.exception.code)
        self.assertIn('10 ** 400', mock_stderr.getvalue())

    @unittest.skipUnless(
        getattr(sys, 'get_int_max_str_digits', lambda: 0)(),
        'integer string conversion is not limited')
    @patch('sys.stdout', new_callable=io.StringIO)
    @patch('sys.stderr', new_callable=io.StringIO)
    def test_value_too_long(self, mock_stderr, mock_stdout):
        """ Values too long to print are reported as an error """
        half = sys.get_int_max_str_digits() // 2 + 1
        source = '9' * half + '*' + '9' * half
        with self.assertRaises(SystemExit) as cm:
            run(['--emit', 'eval', source])
        self.assertEqual(1, cm.exception.code)
        self.assertEqual('', mock_stdout.getvalue())
        self.assertIn('too many digits', mock_stderr.getvalue())

    @unittest.skipUnless(
        getattr(sys, 'get_int_max_str_digits', lambda: 0)(),
        'integer string conversion is not limited')
    @patch('sys.stdout', new_callable=io.StringIO)
    @patch('sys.stderr', new_callable=io.StringIO)
    def test_literal_too_long(self, mock_stderr, mock_stdout):
        source = '9' * (sys.get_int_max_str_digits() + 1)
        with self.assertRaises(SystemExit) as cm:
            run([source])
        self.assertEqual(1, cm.exception.code)
        self.assertIn('is too long', mock_stderr.getvalue())

    @patch('sel.cli.base.prompt', return_value='6*7')
    @patch('sys.stdin')
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_terminal_prompt(self, mock_stdout, mock_stdin, mock_prompt):
        mock_stdin.isatty.return_value = True
        run(['--emit', 'eval'])
        self.assertEqual('42\n', mock_stdout.getvalue())
        mock_prompt.assert_called_once_with('> ')

    @patch('sel.cli.base.prompt', side_effect=EOFError)
    @patch('sys.stdin')
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_terminal_end_of_input(self, mock_stdout, mock_stdin, mock_prompt):
        """ Ctrl-D at the prompt is an empty expression """
        mock_stdin.isatty.return_value = True
        with self.assertRaises(SystemExit) as cm:
            run([])
        self.assertEqual(1, cm.exception.code)
        self.assertEqual('Bad syntax!\n', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    @patch('sys.stderr', new_callable=io.StringIO)
    def test_report(self, mock_stderr, mock_stdout):
        report_file = new_temp_file('.log')
        run(['-v', '--report', report_file, '--emit', 'eval', '7'])
        self.assertEqual('7\n', mock_stdout.getvalue())
        with open(report_file) as f:
            self.assertIn('Loggers attached', f.read())
        os.remove(report_file)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_help(self, mock_stdout):
        """ Test help function """
        with self.assertRaises(SystemExit) as cm:
            run(['-h'])
        self.assertEqual(0, cm.exception.code)
        self.assertIn('sel-run', mock_stdout.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_invalid_log_level(self, mock_stderr):
        """ Test invalid log level """
        with self.assertRaises(SystemExit) as cm:
            run(['--log', 'blabla'])
        self.assertEqual(2, cm.exception.code)
        self.assertIn('invalid log_level value', mock_stderr.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_invalid_emit(self, mock_stderr):
        with self.assertRaises(SystemExit) as cm:
            run(['--emit', 'java', '1'])
        self.assertEqual(2, cm.exception.code)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_version(self, mock_stdout):
        with self.assertRaises(SystemExit) as cm:
            run(['--version'])
        self.assertEqual(0, cm.exception.code)
        self.assertIn('sel', mock_stdout.getvalue())


class CheckTestCase(unittest.TestCase):
    """ Test the check command-line utility """
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_good(self, mock_stdout):
        check(['2**3**2'])
        self.assertEqual('Syntax OK!\n', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_bad(self, mock_stdout):
        with self.assertRaises(SystemExit) as cm:
            check(['(4'])
        self.assertEqual(1, cm.exception.code)
        self.assertEqual('Bad syntax!\n', mock_stdout.getvalue())

    @patch('sys.stdin', new_callable=lambda: io.StringIO(''))
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_empty_input(self, mock_stdout, mock_stdin):
        with self.assertRaises(SystemExit) as cm:
            check([])
        self.assertEqual(1, cm.exception.code)
        self.assertEqual('Bad syntax!\n', mock_stdout.getvalue())


    @patch('sel.cli.base.prompt', side_effect=KeyboardInterrupt)
    @patch('sys.stdin')
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_terminal_interrupt(self, mock_stdout, mock_stdin, mock_prompt):
        mock_stdin.isatty.return_value = True
        with self.assertRaises(SystemExit) as cm:
            check([])
        self.assertEqual(1, cm.exception.code)
        self.assertEqual('Bad syntax!\n', mock_stdout.getvalue())


class MainTestCase(unittest.TestCase):
    """ Test the python -m sel entry point """
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_no_subcommand(self, mock_stdout):
        with patch.object(sys, 'argv', ['sel']):
            main()
        self.assertIn('python -m sel run -h', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_unknown_subcommand(self, mock_stdout):
        with patch.object(sys, 'argv', ['sel', 'compile']):
            main()
        self.assertIn(
            'Please use one of the subcommands', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_dispatch(self, mock_stdout):
        argv = ['sel', 'run', '--emit', 'eval', '3*3']
        with patch.object(sys, 'argv', argv):
            main()
        self.assertEqual('9\n', mock_stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
