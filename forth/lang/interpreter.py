"""Forth interpreter: a single forward pass over the tokens of a source string, against one operand stack.

Basic program flow:
    1. Tokenizer: lazily splits source on whitespace (see forth/lang/lexical.py)
    2. Dispatch: each token is either a comment opener, a known word, or an integer literal
    3. Execution: words act on the stack directly and hand back a Fault if they couldn't finish

Faults are reported and evaluation moves on to the next token. The one exception is a comment that is never closed,
which ends the run.
"""

import sys

from forth.lang.error import ErrorHandler, LiteralParseFailure, UnterminatedComment
from forth.lang.lexical import COMMENT_OPEN, parse_literal, skip_comment, tokenize
from forth.lang.words import Stack, builtin_words


class Interpreter:
    """Owns an operand stack and a word table. Independent instances share nothing."""

    def __init__(self, out=None, error_handler=None, debug=False):
        self.out = out if out is not None else sys.stdout
        self.error_handler = error_handler if error_handler is not None else ErrorHandler(fatal=False)
        self.debug = debug  # trace every token on the diagnostic stream

        self.stack = Stack()
        self.words = {}

    def init_words(self):
        """Resets the word table to the built-in words."""
        self.words = builtin_words(self.out)

    def run(self, source):
        """Evaluates source on a fresh stack. Output of "." goes to self.out, faults to self.error_handler. The stack
        is left as evaluation ended for inspection.
        """
        self.init_words()
        self.stack = Stack()

        tokens = tokenize(source)
        for token in tokens:
            if self.debug:
                self.error_handler.trace(token)

            if token.text == COMMENT_OPEN:
                if not skip_comment(tokens):
                    self.error_handler.report(UnterminatedComment(token.text), token)
                    return
                continue

            word = self.words.get(token.text)
            if word is not None:
                fault = word(self.stack)
                if fault is not None:
                    self.error_handler.report(fault, token)
                continue

            value = parse_literal(token.text)
            if value is None:
                self.error_handler.report(LiteralParseFailure(token.text), token)
            else:
                self.stack.push(value)
