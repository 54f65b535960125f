"""mrtparser environment values"""

from __future__ import annotations

import sys
import argparse

from mrtparser.environment import Environment
from mrtparser.environment import getenv


def setargs(sub: argparse.ArgumentParser) -> None:
    # fmt: off
    sub.add_argument('-d', '--diff', help='show only the different from the defaults', action='store_true')
    sub.add_argument('-e', '--env', help='display using environment (not ini)', action='store_true')
    # fmt: on


def default() -> None:
    sys.stdout.write('\nEnvironment values are:\n')
    sys.stdout.write('\n'.join('    %s' % _ for _ in Environment.default()))
    sys.stdout.write('\n')
    sys.stdout.flush()


def cmdline(cmdarg: argparse.Namespace) -> int:
    getenv()

    dispatch = {
        True: Environment.iter_env,
        False: Environment.iter_ini,
    }

    for line in dispatch[cmdarg.env](cmdarg.diff):
        sys.stdout.write('%s\n' % line)
        sys.stdout.flush()
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=sys.modules[__name__].__doc__)
    setargs(parser)
    return cmdline(parser.parse_args())


if __name__ == '__main__':
    sys.exit(main())
