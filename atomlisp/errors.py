"""Error taxonomy for atomlisp.

Every evaluator operation either returns a value or raises exactly one of the
AtomError subclasses below. Errors propagate upward unchanged; the driving
shell catches them, renders them and carries on with the next input.
"""

from __future__ import annotations


class AtomError(Exception):
    """ Base class for all atomlisp errors"""

    def _fields(self) -> tuple:
        return self.args

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class AtomInvalidType(AtomError):
    """ Raised when an operand is not of the expected kind"""

    def __init__(self, expected: str, actual: str):
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"Invalid type: expected {self.expected}, found {self.actual}"


class AtomInvalidOperation(AtomError):
    """ Raised when something that is not an operation is used as one"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Invalid operation: {self.name}"


class AtomInvalidArgument(AtomError):
    """ Raised on malformed special-form syntax or bad argument values"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Invalid argument: {self.message}"


class AtomUndefinedSymbol(AtomError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Undefined symbol: {self.name}"


class AtomSyntaxError(AtomError):
    """ Raised by the reader on malformed source text"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Syntax error: {self.message}"
