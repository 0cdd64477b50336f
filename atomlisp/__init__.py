# Core type aliases for atomlisp's data model.
# Values are plain Python objects: int for integers, list for lists, plus the
# Symbol, Nil, Builtin and Closure types under atomlisp.types. The same objects
# represent code (forms) and runtime values.
#
# Naming guidance:
# - SExpression: use in reader/macro code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type, as passed into special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.3.0"
