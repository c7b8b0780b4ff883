from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Optional

# Held for the whole scope so directory changes never interleave across threads.
_CWD_LOCK = threading.RLock()


class WorkingDirectory:
    """Change the process working directory for the duration of a ``with`` block.

    Usage::

        with WorkingDirectory("/tmp/build"):
            run_step()

    The previous directory is restored on exit, even when the block raises.
    """

    def __init__(self, path: str | Path) -> None:
        self.new_folder = os.fspath(path)
        self.previous_folder: Optional[str] = None

    @classmethod
    def set(cls, path: str | Path) -> "WorkingDirectory":
        return cls(path)

    def __enter__(self) -> "WorkingDirectory":
        _CWD_LOCK.acquire()
        try:
            self.previous_folder = os.getcwd()
            os.chdir(self.new_folder)
        except BaseException:
            _CWD_LOCK.release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self.previous_folder is not None:
                os.chdir(self.previous_folder)
        finally:
            self.previous_folder = None
            _CWD_LOCK.release()
