"""mrt/__init__.py

Decoding of MRT routing information export files (RFC 6396).

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from mrtparser.mrt.error import MRTError  # noqa: F401,E261
from mrtparser.mrt.error import TruncatedInput  # noqa: F401,E261
from mrtparser.mrt.error import MalformedInput  # noqa: F401,E261
from mrtparser.mrt.error import OversizedRecord  # noqa: F401,E261
from mrtparser.mrt.error import DecodeCancelled  # noqa: F401,E261
from mrtparser.mrt.error import DecodeTimeout  # noqa: F401,E261

from mrtparser.mrt.address import AFI  # noqa: F401,E261
from mrtparser.mrt.address import Address  # noqa: F401,E261
from mrtparser.mrt.attribute import BGPAttribute  # noqa: F401,E261
from mrtparser.mrt.tabledump import SUBTYPE  # noqa: F401,E261
from mrtparser.mrt.tabledump import TableDump  # noqa: F401,E261
from mrtparser.mrt.tabledump import TableDumpV2  # noqa: F401,E261
from mrtparser.mrt.tabledump import Unsupported  # noqa: F401,E261
from mrtparser.mrt.peer import PeerEntry  # noqa: F401,E261
from mrtparser.mrt.peer import PeerIndexTable  # noqa: F401,E261
from mrtparser.mrt.rib import RIBEntry  # noqa: F401,E261
from mrtparser.mrt.rib import RIBTable  # noqa: F401,E261
from mrtparser.mrt.record import TYPE  # noqa: F401,E261
from mrtparser.mrt.record import MRTHeader  # noqa: F401,E261
from mrtparser.mrt.record import MRTRecord  # noqa: F401,E261
from mrtparser.mrt.reader import Reader  # noqa: F401,E261
from mrtparser.mrt.reader import parse  # noqa: F401,E261

__all__ = [
    'MRTError',
    'TruncatedInput',
    'MalformedInput',
    'OversizedRecord',
    'DecodeCancelled',
    'DecodeTimeout',
    'AFI',
    'Address',
    'BGPAttribute',
    'SUBTYPE',
    'TableDump',
    'TableDumpV2',
    'Unsupported',
    'PeerEntry',
    'PeerIndexTable',
    'RIBEntry',
    'RIBTable',
    'TYPE',
    'MRTHeader',
    'MRTRecord',
    'Reader',
    'parse',
]
