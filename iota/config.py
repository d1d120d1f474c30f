from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (iota package directory)
_IOTA_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _IOTA_DIR / 'prelude'

_FALSE_VALUES = ('0', 'false', 'no', 'off')


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var, '').strip()
    if not raw:
        return default
    return Path(raw)


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def get_prelude_root() -> Path:
    p = path_from_env('IOTA_PRELUDE_PATH', _DEFAULT_PRELUDE_DIR)
    # if a file path is set, return its parent
    return p if p.is_dir() else p.parent


def strict_arity() -> bool:
    """Whether closure calls must supply exactly one argument per parameter."""
    return flag_from_env('IOTA_STRICT_ARITY', True)
