# ruff: noqa: T201

import sys
from typing import TextIO

from diff_dir.models import DiffEvent


class ReportWriter:
    """Writes one line per diff event, flushed at once.

    Lines already written stay visible if a fatal error later aborts the run.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, event: DiffEvent) -> None:
        print(event, file=self._stream or sys.stdout, flush=True)
