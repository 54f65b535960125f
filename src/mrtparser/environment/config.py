"""config.py

Typed configuration: each section is a class whose attributes are
ConfigOption descriptors, the Environment singleton holds one instance
of every section.

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar, ClassVar, Iterator, Tuple, cast
import configparser as ConfigParser

from mrtparser.environment import base
from mrtparser.environment import parsing

T = TypeVar('T')

# bool must come before int, bool is an int subclass
_READERS: Tuple[Tuple[type, Callable[[str], Any]], ...] = (
    (bool, parsing.boolean),
    (int, parsing.integer),
    (float, parsing.real),
    (str, parsing.unquote),
)

_WRITERS: Tuple[Tuple[type, Callable[[Any], str]], ...] = (
    (bool, parsing.lower),
    (str, parsing.quote),
)


@dataclass
class ConfigOption(Generic[T]):
    default: T
    help: str
    reader: Callable[[str], T] | None = None
    writer: Callable[[T], str] | None = None

    name: str = field(default='', init=False)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, owner: type) -> T | ConfigOption[T]:
        if obj is None:
            return self
        return cast(T, obj._values.get(self.name, self.default))

    def __set__(self, obj: Any, value: T) -> None:
        obj._values[self.name] = value

    def parse(self, value: str) -> T:
        if self.reader is not None:
            return self.reader(value)
        for kind, reader in _READERS:
            if isinstance(self.default, kind):
                return cast(T, reader(value))
        raise TypeError(f'unsupported option type {type(self.default).__name__}')

    def format(self, value: T) -> str:
        if self.writer is not None:
            return self.writer(value)
        for kind, writer in _WRITERS:
            if isinstance(self.default, kind):
                return writer(value)
        return str(value)


def option(
    default: T,
    help: str,
    reader: Callable[[str], T] | None = None,
    writer: Callable[[T], str] | None = None,
) -> T:
    """Declare a typed option, typed as T so section attributes read naturally."""
    return cast(T, ConfigOption(default, help, reader, writer))


class ConfigSection:
    _section_name: ClassVar[str] = ''

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    @classmethod
    def options(cls) -> dict[str, ConfigOption[Any]]:
        return {name: attr for name in dir(cls) if isinstance(attr := getattr(cls, name, None), ConfigOption)}

    def __getitem__(self, key: str) -> Any:
        return getattr(self, key.replace('-', '_'))

    def __setitem__(self, key: str, value: Any) -> None:
        setattr(self, key.replace('-', '_'), value)

    def __contains__(self, key: str) -> bool:
        return key.replace('-', '_') in self.options()

    def reset(self) -> None:
        self._values.clear()


_INDENT: str = ' ' * 33
DESTINATION_HELP: str = f"""\
where logging should log
{_INDENT} syslog sends the data to the local syslog
{_INDENT} stdout sends the data to stdout
{_INDENT} stderr sends the data to stderr
{_INDENT} file:<filename> send the data to a file"""


class LogSection(ConfigSection):
    _section_name: ClassVar[str] = 'log'

    enable: bool = option(True, 'enable logging')
    level: str = option(
        'WARNING',
        'log message with at least the priority SYSLOG.<level>',
        reader=parsing.syslog_value,
        writer=parsing.quote,
    )
    destination: str = option('stderr', DESTINATION_HELP)
    all: bool = option(False, 'report debug information for everything')
    reader: bool = option(True, 'report record framing (headers, lengths, skipped records)')
    parser: bool = option(False, 'report table dump and attribute decoding details')
    short: bool = option(True, 'use short log format (not prepended with time,level,pid and source)')


class ReaderSection(ConfigSection):
    _section_name: ClassVar[str] = 'reader'

    errors: str = option(
        'strict',
        'what to do with a record failing to decode: strict (stop) or skip (log and continue)',
        reader=parsing.errors,
    )
    timeout: float = option(0.0, 'abort decoding after this many seconds (0 for no limit)', reader=parsing.seconds)
    max_length: int = option(0, 'refuse records declaring a body larger than this (0 for unlimited)', reader=parsing.positive)


class DebugSection(ConfigSection):
    # only set from the command line, never listed
    _section_name: ClassVar[str] = 'debug'

    pdb: bool = option(False, 'enable python debugger on errors')


def _lookup(ini: ConfigParser.ConfigParser, section: str, name: str) -> str | None:
    """dotted variable, then underscored variable, then the INI file"""
    dotted = f'{base.APPLICATION}.{section}.{name}'
    for variable in (dotted, dotted.replace('.', '_')):
        if variable in os.environ:
            return os.environ[variable]
    try:
        return parsing.unquote(ini.get(f'{base.APPLICATION}.{section}', name, raw=True))
    except (ConfigParser.NoSectionError, ConfigParser.NoOptionError):
        return None


class Environment:
    """Process wide configuration, loaded once by setup()"""

    SECTIONS: ClassVar[Tuple[type[ConfigSection], ...]] = (LogSection, ReaderSection, DebugSection)
    LISTED: ClassVar[Tuple[str, ...]] = ('log', 'reader')

    _instance: ClassVar[Environment | None] = None
    _setup_done: ClassVar[bool] = False

    log: LogSection
    reader: ReaderSection
    debug: DebugSection

    def __new__(cls) -> Environment:
        if cls._instance is None:
            instance = super().__new__(cls)
            for klass in cls.SECTIONS:
                setattr(instance, klass._section_name, klass())
            cls._instance = instance
        return cls._instance

    def _sections(self) -> Iterator[ConfigSection]:
        for klass in self.SECTIONS:
            yield getattr(self, klass._section_name)

    @classmethod
    def setup(cls, envfile: str = base.ENVFILE) -> None:
        if cls._setup_done:
            return
        cls._setup_done = True

        ini = ConfigParser.ConfigParser()
        if os.path.exists(envfile):
            ini.read(envfile)

        for section in cls()._sections():
            for name, opt in section.options().items():
                conf = _lookup(ini, section._section_name, name)
                if conf is None:
                    continue
                try:
                    section[name] = opt.parse(conf)
                except (TypeError, ValueError):
                    raise ValueError(f'invalid value for {section._section_name}.{name} : {conf}') from None

    @classmethod
    def reset(cls) -> None:
        """Forget every loaded value, the next setup() reads the environment again."""
        for section in cls()._sections():
            section.reset()
        cls._setup_done = False

    @classmethod
    def _listed(cls, diff: bool) -> Iterator[Tuple[str, str, ConfigOption[Any], Any]]:
        for section in cls()._sections():
            if section._section_name not in cls.LISTED:
                continue
            for name, opt in section.options().items():
                value = getattr(section, name)
                if diff and value == opt.default:
                    continue
                yield section._section_name, name, opt, value

    @classmethod
    def default(cls) -> Iterator[str]:
        for section, name, opt, _ in cls._listed(False):
            default = f"'{opt.default}'" if isinstance(opt.default, str) else opt.default
            padding = ' ' * max(1, 18 - len(section) - len(name))
            yield f'{base.APPLICATION}.{section}.{name} {padding} {opt.help}. default ({default})'

    @classmethod
    def iter_ini(cls, diff: bool = False) -> Iterator[str]:
        current = ''
        for section, name, opt, value in cls._listed(diff):
            if section != current:
                current = section
                yield f'\n[{base.APPLICATION}.{section}]'
            yield f'{name} = {opt.format(value)}'

    @classmethod
    def iter_env(cls, diff: bool = False) -> Iterator[str]:
        for section, name, opt, value in cls._listed(diff):
            text = f"'{value}'" if isinstance(opt.default, str) else opt.format(value)
            yield f'{base.APPLICATION}.{section}.{name}={text}'
