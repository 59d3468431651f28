import io
import unittest

from forth.lang.error import (DivideByZero, ErrorHandler, GenericException, LiteralParseFailure, StackUnderflow,
                              UnterminatedComment)
from forth.lang.lexical import Token


class FaultTestCase(unittest.TestCase):

    def test_str(self):
        cases = {
            StackUnderflow("+"): "+: no more items on the stack",
            DivideByZero("/"): "/: divide by zero",
            LiteralParseFailure("abc"): "can't convert 'abc' to integer",
            UnterminatedComment("("): "unterminated comment: end of input reached before ')'",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(case), repr(case))

    def test_eq(self):
        self.assertEqual(StackUnderflow("."), StackUnderflow("."))
        self.assertNotEqual(StackUnderflow("."), StackUnderflow("+"))
        self.assertNotEqual(StackUnderflow("/"), DivideByZero("/"))

    def test_warning(self):
        self.assertTrue(UnterminatedComment("(").warning)
        for fault in [StackUnderflow("+"), DivideByZero("/"), LiteralParseFailure("x")]:
            self.assertFalse(fault.warning, repr(fault))


class ErrorHandlerTestCase(unittest.TestCase):

    def setUp(self):
        self.err = io.StringIO()
        self.error_handler = ErrorHandler(fatal=False, stream=self.err, color=False)

    def test_report(self):
        self.error_handler.register_file("prog.fs")
        self.error_handler.report(StackUnderflow("*"), Token("*", 2, 4))
        self.error_handler.report(UnterminatedComment("("), Token("(", 3, 1))

        self.assertEqual("prog.fs:2:4: error: *: no more items on the stack\n"
                         "prog.fs:3:1: warning: unterminated comment: end of input reached before ')'\n",
                         self.err.getvalue())
        self.assertEqual([StackUnderflow("*"), UnterminatedComment("(")], self.error_handler.faults)

    def test_report_color(self):
        error_handler = ErrorHandler(fatal=False, stream=self.err, color=True)
        error_handler.report(LiteralParseFailure("abc"), Token("abc"))

        line = self.err.getvalue()
        self.assertTrue(line.endswith("\n"))
        self.assertEqual(1, line.count("\n"))
        self.assertIn("abc", line)
        self.assertIn("error: ", line)

    def test_throw(self):
        self.error_handler.throw(GenericException("could not open file '{}'", "missing.fs"))
        self.assertEqual("error: could not open file 'missing.fs'\n", self.err.getvalue())

    def test_throw_fatal(self):
        error_handler = ErrorHandler(stream=self.err, color=False)
        with self.assertRaises(SystemExit) as context:
            error_handler.throw(GenericException("bad"))
        self.assertEqual(1, context.exception.code)

    def test_context_manager(self):
        with self.error_handler:
            raise GenericException("'{}' is bad", "x")
        self.assertEqual("error: 'x' is bad\n", self.err.getvalue())

    def test_context_manager_internal(self):
        with self.assertRaises(ZeroDivisionError):
            with self.error_handler:
                raise ZeroDivisionError("oops")
        self.assertEqual("[internal] error: unknown error: 'ZeroDivisionError: oops'\n", self.err.getvalue())

    def test_context_manager_system_exit(self):
        with self.assertRaises(SystemExit):
            with self.error_handler:
                raise SystemExit(2)
        self.assertEqual("", self.err.getvalue())


if __name__ == '__main__':
    unittest.main()
