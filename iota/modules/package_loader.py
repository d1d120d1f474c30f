from __future__ import annotations
import logging
from typing import Protocol

from iota.config import get_prelude_root

logger = logging.getLogger(__name__)

PRELUDE_FILE = 'core.scm'


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate the bootstrap library into the interpreter's root environment."""
    path = get_prelude_root() / PRELUDE_FILE
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find bootstrap library {path} (see IOTA_PRELUDE_PATH)")
    logger.debug("loading bootstrap library from %s", path)
    itp.eval_prelude(path.read_text(encoding='utf-8'))
