"""intercept.py

Replace sys.excepthook so an unexpected exception prints a bug report,
and optionally drops into the post-mortem debugger.

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import sys
import pdb  # noqa: T100
from types import TracebackType
from typing import Callable

from mrtparser.debug.report import format_panic

Hook = Callable[[type[BaseException], BaseException, TracebackType | None], None]


def bug_report(dtype: type[BaseException], value: BaseException, trace: TracebackType | None) -> None:
    sys.stdout.flush()
    sys.stderr.write(f'{format_panic(dtype, value, trace)}\n')
    sys.stderr.flush()


def interceptor(with_pdb: bool) -> Hook:
    def intercept(dtype: type[BaseException], value: BaseException, trace: TracebackType | None) -> None:
        if issubclass(dtype, KeyboardInterrupt):
            sys.__excepthook__(dtype, value, trace)
            return
        bug_report(dtype, value, trace)
        if with_pdb:
            pdb.post_mortem(trace)

    return intercept


def trace_interceptor(with_pdb: bool) -> None:
    sys.excepthook = interceptor(with_pdb)
