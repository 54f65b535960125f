"""mrtparser

Decoder for MRT table dump v2 archives.

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from mrtparser.mrt import Reader  # noqa: F401,E261
from mrtparser.mrt import parse  # noqa: F401,E261

__all__ = ['Reader', 'parse']
