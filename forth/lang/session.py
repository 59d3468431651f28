"""Session control for forth: loads a program file and runs it through an Interpreter."""

from forth.lang.error import GenericException
from forth.lang.interpreter import Interpreter


class Session:
    """Governs one forth program file."""

    def __init__(self, error_handler, path, out=None, debug=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)  # prefixes fault locations

        try:
            with open(path, "r") as file:
                self.source = file.read()
        except (OSError, UnicodeDecodeError):
            raise GenericException("could not open file '{}'", path)

        self.interpreter = Interpreter(out, error_handler, debug)

    def run(self):
        """Runs the loaded program. Returns the final stack."""
        self.interpreter.run(self.source)
        return self.interpreter.stack
