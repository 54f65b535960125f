from __future__ import annotations

import os
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version


def get_root() -> str:
    return os.path.abspath(os.path.sep.join(__file__.split(os.path.sep)[:-1]))


def _get_base_version() -> str:
    """Version of the installed package, 'unknown' for an uninstalled checkout."""
    try:
        return pkg_version('mrtparser')
    except PackageNotFoundError:
        return 'unknown'


version = os.environ.get('mrtparser_version', _get_base_version())

# Python version requirements
REQUIRED_PYTHON_MAJOR = 3
REQUIRED_PYTHON_MINOR = 12

if sys.version_info[:2] < (REQUIRED_PYTHON_MAJOR, REQUIRED_PYTHON_MINOR):
    sys.exit('mrtparser requires python3.12 or later')


if __name__ == '__main__':
    sys.stdout.write(version)
