from __future__ import annotations


class UnspecifiedType:
    """Result of forms that produce no meaningful value (define, set!, an unmatched cond)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "#<unspecified>"

    def __copy__(self): return self

    def __deepcopy__(self, memo): return self


Unspecified = UnspecifiedType()
