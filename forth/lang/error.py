"""Error handling for forth. Evaluation never raises: words, the operand stack and literal parsing hand back Fault
values, which the interpreter reports through an ErrorHandler and then carries on. Only GenericExceptions should
reach ErrorHandler as exceptions: if another type of error makes it all the way there, it is assumed to be an
internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Fatal forth error raised outside of evaluation (bad file, bad arguments). exprs are formatted into msg."""

    def __init__(self, msg, exprs=None, internal=False):
        if exprs is None:
            exprs = []
        if isinstance(exprs, str):
            exprs = [exprs]

        super().__init__(msg.format(*exprs))
        self.msg = msg
        self.exprs = exprs
        self.internal = internal


class Fault:
    """Recoverable interpreter fault. Returned, never raised, by whatever detects it. expr is the word or token
    that failed and is substituted into msg.
    """
    msg = "{}"
    warning = False  # warnings end the run, errors only abort the current token

    def __init__(self, expr):
        self.expr = expr

    def __eq__(self, other):
        return type(other) is type(self) and other.expr == self.expr

    def __hash__(self):
        return hash((type(self), self.expr))

    def __repr__(self):
        return f"{type(self).__name__}('{self.expr}')"

    def __str__(self):
        return self.msg.format(self.expr)


class StackUnderflow(Fault):
    """A word needed more values than the stack held."""
    msg = "{}: no more items on the stack"


class DivideByZero(Fault):
    msg = "{}: divide by zero"


class LiteralParseFailure(Fault):
    """Token is neither a known word nor an int32 literal."""
    msg = "can't convert '{}' to integer"


class UnterminatedComment(Fault):
    msg = "unterminated comment: end of input reached before ')'"
    warning = True


class ErrorHandler:
    """Reports faults and fatal errors on the diagnostic stream. Also a context manager for the command line, where
    it turns GenericExceptions and unexpected Python errors into forth errors.
    """
    ERROR = "red"
    WARNING = "magenta"
    STRING = "<string>"  # path used when source didn't come from a file

    def __init__(self, fatal=True, stream=None, color=True):
        self.fatal = fatal
        self.color = color
        self.path = ErrorHandler.STRING
        self.faults = []  # every fault reported so far, in order

        self._stream = stream  # None means whatever sys.stderr is at print time

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stderr

    def register_file(self, path):
        """Sets path that prefixes fault locations."""
        self.path = path

    def _colored(self, text, color=None, attrs=None):
        return colored(text, color, attrs=attrs, no_color=not self.color)

    def _print(self, line):
        print(line, file=self.stream)

    def report(self, fault, token):
        """Prints fault as a single diagnostic line located at token. Never fatal."""
        self.faults.append(fault)

        if fault.warning:
            level = self._colored("warning: ", ErrorHandler.WARNING, attrs=["bold"])
        else:
            level = self._colored("error: ", ErrorHandler.ERROR, attrs=["bold"])

        location = self._colored(f"{self.path}:{token.line}:{token.col}: ", attrs=["bold"])
        self._print(location + level + fault.msg.format(self._colored(fault.expr, attrs=["bold"])))

    def trace(self, token):
        """Debug trace of a token about to be dispatched."""
        self._print(f"[debug]: {token}")

    def throw(self, error):
        """Prints GenericException error, then exits with status 1 if self.fatal."""
        error_msg = ""
        if error.internal:
            error_msg += self._colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        exprs = (self._colored(expr, attrs=["bold"]) for expr in error.exprs)
        error_msg += self._colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg.format(*exprs)
        self._print(error_msg)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is GenericException:
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}: {}'", [exc_type.__name__, str(exc_val)], internal=True))
            do_exit = True

        return not do_exit
