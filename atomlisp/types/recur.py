from atomlisp import LispValue


class Recur:
    """Marker produced by (recur ...) in loop-tail position.

    Carries the already-evaluated values the enclosing loop rebinds its names to.
    Never escapes the loop form that consumes it.
    """

    __slots__ = ("values",)

    def __init__(self, values: list[LispValue]):
        self.values = values

    def __repr__(self) -> str:
        return f"Recur({self.values!r})"
