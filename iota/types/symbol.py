from __future__ import annotations

import weakref


class Symbol:
    """An identifier to be resolved against an Environment.

    Symbols are interned: `Symbol("x") is Symbol("x")` while any reference
    to it is alive, so equality and hashing fall back to identity.
    """

    __slots__ = ("name", "__weakref__")

    _table: weakref.WeakValueDictionary[str, Symbol] = weakref.WeakValueDictionary()

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.name = name
            cls._table[name] = sym
        return sym

    def __reduce__(self):
        return Symbol, (self.name,)

    def __copy__(self): return self

    def __deepcopy__(self, memo): return self

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
