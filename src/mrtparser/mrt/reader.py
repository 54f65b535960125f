"""reader.py

Record framing: split a binary stream into MRT records and decode them.

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import time
from typing import IO, TYPE_CHECKING, Any, Iterator, List, Optional, Protocol, Tuple

if TYPE_CHECKING:
    from mrtparser.environment.config import Environment

from mrtparser.logger import lazyformat, lazymsg, log
from mrtparser.mrt.error import (
    DecodeCancelled,
    DecodeTimeout,
    EndOfInput,
    MRTError,
    OversizedRecord,
    TruncatedInput,
)
from mrtparser.mrt.record import TYPE, MRTHeader, MRTRecord

# the decoders register themselves with TableDumpV2 on import
from mrtparser.mrt import peer  # noqa: F401
from mrtparser.mrt import rib  # noqa: F401


class Cancel(Protocol):
    def is_set(self) -> bool: ...


class Reader:
    """Lazily decode the MRT records of a binary stream.

    The stream is consumed as records are yielded, iterating a second time
    continues where the first iteration stopped.

    errors: 'strict' raises the first decoding failure, 'skip' logs it,
        keeps the (header, exception) pair in `failures` and carries on
        with the next record
    timeout: seconds allowed for the whole iteration, 0 or None for no limit
    cancel: any object with an is_set() method, threading.Event for example
    max_length: largest record body accepted, 0 for no limit
    """

    ERRORS: Tuple[str, ...] = ('strict', 'skip')

    # bytes discarded at once when skipping an oversized record
    CHUNK: int = 64 * 1024

    def __init__(
        self,
        stream: IO[bytes],
        errors: str = 'strict',
        timeout: Optional[float] = None,
        cancel: Optional[Cancel] = None,
        max_length: int = 0,
    ) -> None:
        if errors not in self.ERRORS:
            raise ValueError(f'invalid error policy {errors!r}, use one of {", ".join(self.ERRORS)}')
        if timeout is not None and timeout < 0:
            raise ValueError(f'invalid timeout {timeout}')
        if max_length < 0:
            raise ValueError(f'invalid maximum record length {max_length}')

        self.stream: IO[bytes] = stream
        self.errors: str = errors
        self.timeout: Optional[float] = timeout or None
        self.cancel: Optional[Cancel] = cancel
        self.max_length: int = max_length

        self.offset: int = 0
        self.count: int = 0
        self.failures: List[Tuple[MRTHeader, MRTError]] = []

        self._deadline: Optional[float] = None

    @classmethod
    def from_environment(cls, stream: IO[bytes], env: 'Environment', cancel: Optional[Cancel] = None) -> Reader:
        return cls(
            stream,
            errors=env.reader.errors,
            timeout=env.reader.timeout,
            cancel=cancel,
            max_length=env.reader.max_length,
        )

    def checkpoint(self) -> None:
        if self.cancel is not None and self.cancel.is_set():
            raise DecodeCancelled('decoding cancelled', self.offset)
        if self._deadline is not None and time.monotonic() > self._deadline:
            raise DecodeTimeout(f'decoding did not complete within {self.timeout} seconds', self.offset)

    def _read(self, size: int) -> bytes:
        data = bytearray()
        while len(data) < size:
            chunk = self.stream.read(size - len(data))
            if not chunk:
                break
            data += chunk
        self.offset += len(data)
        return bytes(data)

    def _header(self) -> MRTHeader:
        offset = self.offset
        data = self._read(MRTHeader.SIZE)
        if len(data) < MRTHeader.SIZE:
            if data:
                log.debug(
                    lazymsg('reader offset={offset} partial header of {size} bytes ignored', offset=offset, size=len(data)),
                    'reader',
                )
            raise EndOfInput('end of stream', offset)
        return MRTHeader.unpack_header(data)

    def _body(self, header: MRTHeader) -> bytes:
        offset = self.offset
        data = self._read(header.length)
        if len(data) < header.length:
            raise TruncatedInput('record body', header.length, len(data), offset)
        return data

    def _discard(self, header: MRTHeader) -> None:
        offset = self.offset
        left = header.length
        while left:
            data = self._read(min(left, self.CHUNK))
            if not data:
                raise TruncatedInput('record body', header.length, header.length - left, offset)
            left -= len(data)

    def _fail(self, header: MRTHeader, exc: MRTError) -> None:
        if self.errors == 'strict':
            raise exc
        log.warning(
            lazymsg(
                'reader record={count} type={kind} subtype={subtype} skipped: {error}',
                count=self.count,
                kind=TYPE.name(header.type),
                subtype=header.subtype,
                error=exc,
            ),
            'reader',
        )
        self.failures.append((header, exc))

    def __iter__(self) -> Iterator[MRTRecord]:
        if self.timeout is not None and self._deadline is None:
            self._deadline = time.monotonic() + self.timeout

        while True:
            self.checkpoint()

            start = self.offset
            try:
                header = self._header()
            except EndOfInput:
                log.debug(lazymsg('reader end of stream records={count}', count=self.count), 'reader')
                return

            self.count += 1
            log.debug(
                lazymsg(
                    'reader offset={offset} record={count} {header}',
                    offset=start,
                    count=self.count,
                    header=header,
                ),
                'reader',
            )

            if self.max_length and header.length > self.max_length:
                oversized = OversizedRecord(header.length, self.max_length, start)
                self._fail(header, oversized)
                self._discard(header)
                continue

            base = self.offset
            body = self._body(header)

            try:
                record = MRTRecord.unpack_record(header, body, self.checkpoint, base)
            except (DecodeCancelled, DecodeTimeout):
                raise
            except MRTError as exc:
                log.debug(lazyformat('reader undecodable body', body), 'reader')
                self._fail(header, exc)
                continue

            yield record


def parse(stream: IO[bytes], **options: Any) -> List[MRTRecord]:
    """Decode every record of the stream, see Reader for the options."""
    return list(Reader(stream, **options))
