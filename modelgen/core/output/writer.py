from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

_log = logging.getLogger("modelgen.writer")

ConfirmFn = Callable[[Path], bool]


def model_path(output_dir: Path, table_name: str) -> Path:
    return Path(output_dir) / f"{table_name}.go"


def _atomic_write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(content, encoding="utf-8")
    tmp.replace(path)


class FileWriter:
    """
    Writes generated files, asking before overwriting an existing one.

    ``confirm`` receives the existing path and returns True to overwrite.
    Without a confirm callback existing files are always overwritten.
    """

    def __init__(self, confirm: Optional[ConfirmFn] = None):
        self._confirm = confirm

    def write_if_confirmed(self, path: Path, content: str) -> bool:
        path = Path(path)
        if path.exists() and self._confirm is not None and not self._confirm(path):
            _log.info("Skipped existing file %s", path)
            return False
        _atomic_write(path, content)
        _log.info("Wrote %s (%d bytes)", path, len(content.encode("utf-8")))
        return True
