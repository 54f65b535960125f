"""report.py

Text reports printed when decoding stops on an unexpected error.

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import sys
import platform
import traceback
from types import TracebackType

from mrtparser.version import version
from mrtparser.environment import Environment
from mrtparser.environment import ROOT

from mrtparser.logger import history


def _info() -> str:
    return _INFO.format(
        version=version,
        python=sys.version.replace('\n', ' '),
        uname=platform.version(),
        root=ROOT,
        environment='\n'.join(Environment.iter_env(diff=True)),
    )


def format_exception(exception: BaseException) -> str:
    """Report for a decoding failure the program recovered from."""
    trace = ''.join(traceback.format_exception(type(exception), exception, exception.__traceback__))
    return '\n'.join([_NO_PANIC + _info(), '', str(type(exception)), str(exception), trace, _FOOTER])


def format_panic(dtype: type[BaseException], value: BaseException, trace: TracebackType | None) -> str:
    result = _PANIC + _info()

    result += '-- Traceback\n\n'
    result += ''.join(traceback.format_exception(dtype, value, trace))

    result += '\n\n-- Logging History\n\n'
    result += history()
    result += '\n\n\n'

    result += _FOOTER

    return result


_INFO = """
mrtparser version : {version}
Python version    : {python}
System Uname      : {uname}
Root              : {root}

Environment:
{environment}
"""


_PANIC = """
********************************************************************************
MRTPARSER HAD AN INTERNAL ISSUE
********************************************************************************

The decoder stopped on an error it did not expect. If the input file is a
valid MRT archive, please report the problem with the information below and,
when possible, the first records of the file (run with --debug to see them).
"""


_NO_PANIC = """
********************************************************************************
MRTPARSER COULD NOT DECODE A RECORD
********************************************************************************

A record could not be decoded and decoding of the file stopped. If the input
file is a valid MRT archive, please report the problem with the information
below.
"""


_FOOTER = """\
********************************************************************************
"""
