"""decode MRT table dump v2 files"""

from __future__ import annotations

import sys
import gzip
import bz2
import argparse
from typing import IO, Callable, TypeVar

from mrtparser.debug import format_exception
from mrtparser.debug.intercept import trace_interceptor

from mrtparser.environment import Environment
from mrtparser.environment import getenv
from mrtparser.environment import parsing

from mrtparser.logger import lazymsg, log
from mrtparser.mrt import MRTError
from mrtparser.mrt import Reader

T = TypeVar('T')

GZIP_MAGIC = b'\x1f\x8b'
BZ2_MAGIC = b'BZh'


def checked(reader: Callable[[str], T]) -> Callable[[str], T]:
    """argparse type= wrapping an environment reader, rejected values become usage errors"""

    def _check(value: str) -> T:
        try:
            return reader(value)
        except (TypeError, ValueError):
            raise argparse.ArgumentTypeError(f'invalid value {value!r}') from None

    return _check


def setargs(sub: argparse.ArgumentParser) -> None:
    # fmt:off
    sub.add_argument('-t', '--text', help='output records as text instead of JSON', action='store_true')
    sub.add_argument('-s', '--skip', help='skip the records failing to decode instead of stopping', action='store_true')
    sub.add_argument('--timeout', help='stop decoding a file after this many seconds', type=checked(parsing.seconds), metavar='SECONDS')
    sub.add_argument('--max-length', help='refuse records larger than this many bytes', type=checked(parsing.positive), metavar='BYTES', dest='max_length')
    sub.add_argument('-d', '--debug', help='report decoding details on stderr', action='store_true')
    sub.add_argument('-p', '--pdb', help='fire the debugger on fault', action='store_true')
    sub.add_argument('files', help='MRT file(s), plain, gzip or bzip2 compressed, - for stdin', nargs='+', metavar='FILE')
    # fmt:on


def main() -> int:
    parser = argparse.ArgumentParser(description=sys.modules[__name__].__doc__)
    setargs(parser)
    return cmdline(parser.parse_args())


def open_mrt(filename: str) -> IO[bytes]:
    """Open a MRT file, uncompressing it when it starts with a gzip or bzip2 signature."""
    if filename == '-':
        return sys.stdin.buffer

    with open(filename, 'rb') as handle:
        magic = handle.read(3)

    if magic.startswith(GZIP_MAGIC):
        return gzip.open(filename, 'rb')
    if magic.startswith(BZ2_MAGIC):
        return bz2.open(filename, 'rb')
    return open(filename, 'rb')


def configure(cmdarg: argparse.Namespace) -> Environment:
    env = getenv()

    if cmdarg.skip:
        env.reader.errors = 'skip'
    if cmdarg.timeout is not None:
        env.reader.timeout = cmdarg.timeout
    if cmdarg.max_length is not None:
        env.reader.max_length = cmdarg.max_length

    if cmdarg.debug:
        env.log.all = True
        env.log.level = 'DEBUG'
        env.log.destination = 'stderr'

    if cmdarg.pdb:
        env.debug.pdb = True

    return env


def decode(filename: str, env: Environment, text: bool) -> int:
    failures = 0
    stream = open_mrt(filename)
    try:
        reader = Reader.from_environment(stream, env)
        for record in reader:
            sys.stdout.write(f'{record}\n' if text else f'{record.json()}\n')
        sys.stdout.flush()
        failures = len(reader.failures)
    finally:
        if stream is not sys.stdin.buffer:
            stream.close()

    log.info(
        lazymsg('decoded {name} records={count} skipped={failures}', name=filename, count=reader.count, failures=failures),
        'cli',
    )
    return failures


def cmdline(cmdarg: argparse.Namespace) -> int:
    env = configure(cmdarg)

    log.init(env)
    trace_interceptor(env.debug.pdb)

    code = 0
    for filename in cmdarg.files:
        try:
            if decode(filename, env, cmdarg.text):
                code = 1
        except (OSError, EOFError) as exc:
            sys.stderr.write(f'could not read {filename}: {exc}\n')
            sys.stderr.flush()
            code = 1
        except MRTError as exc:
            sys.stdout.flush()
            if cmdarg.debug:
                sys.stderr.write(f'{format_exception(exc)}\n')
            sys.stderr.write(f'{filename}: {exc}\n')
            sys.stderr.flush()
            code = 1

    return code


if __name__ == '__main__':
    try:
        code = main()
        sys.exit(code)
    except BrokenPipeError:
        # there was a PIPE ( mrtparser decode | command )
        # and command does not work as should
        sys.exit(1)
