from __future__ import annotations


class StringLiteral:
    """Quoted text. Kept distinct from Symbol so it is never looked up."""

    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StringLiteral) and self.value == other.value

    def __hash__(self) -> int:
        return hash((StringLiteral, self.value))

    def __repr__(self):
        return f"StringLiteral({self.value!r})"

    def __str__(self):
        return self.value

    def __copy__(self): return self

    def __deepcopy__(self, memo): return self
