from __future__ import annotations

from mrtparser.environment.base import APPLICATION  # noqa: F401,E261
from mrtparser.environment.base import ENVFILE  # noqa: F401,E261
from mrtparser.environment.base import ROOT  # noqa: F401,E261
from mrtparser.environment.base import ETC  # noqa: F401,E261

from mrtparser.environment.config import Environment  # noqa: F401,E261

__all__ = [
    'ROOT',
    'ENVFILE',
    'ETC',
    'APPLICATION',
    'Environment',
    'getenv',
]


def getenv() -> Environment:
    """Return the global environment configuration, loading it on first use."""
    Environment.setup()
    return Environment()
