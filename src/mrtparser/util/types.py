"""Central type definitions for mrtparser.

mypy does not fully support the PEP 688 Buffer protocol yet, so the alias
is a Union while type checking and the real protocol at runtime.

See: https://peps.python.org/pep-0688/
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    Buffer = bytes | bytearray | memoryview
else:
    from collections.abc import Buffer

__all__ = ['Buffer']
