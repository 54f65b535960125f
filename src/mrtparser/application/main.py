"""main.py

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import sys
import argparse

from mrtparser.application import decode
from mrtparser.application import environ
from mrtparser.application import version


def main() -> int:
    parser = argparse.ArgumentParser(description='decoder for MRT table dump v2 archives')

    subparsers = parser.add_subparsers()

    sub = subparsers.add_parser('version', help='report mrtparser version', description=version.__doc__)
    sub.set_defaults(func=version.cmdline)
    version.setargs(sub)

    sub = subparsers.add_parser('env', help='show mrtparser configuration information', description=environ.__doc__)
    sub.set_defaults(func=environ.cmdline)
    environ.setargs(sub)

    sub = subparsers.add_parser('decode', help='decode MRT files', description=decode.__doc__)
    sub.set_defaults(func=decode.cmdline)
    decode.setargs(sub)

    cmdarg = parser.parse_args()

    if 'func' in vars(cmdarg):
        code: int = cmdarg.func(cmdarg)
        return code
    parser.print_help()
    environ.default()
    return 1


if __name__ == '__main__':
    try:
        code = main()
        sys.exit(code)
    except BrokenPipeError:
        # there was a PIPE ( mrtparser decode | command )
        # and command does not work as should
        sys.exit(1)
