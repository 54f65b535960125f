"""debug/__init__.py

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from mrtparser.debug.report import format_exception
from mrtparser.debug.report import format_panic

__all__ = ['format_exception', 'format_panic']
