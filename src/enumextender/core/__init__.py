# topmark:header:start
#
#   project      : EnumExtender
#   file         : __init__.py
#   file_relpath : src/enumextender/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across EnumExtender.

Included modules:

- ``model``
  The immutable ``Enum`` and ``EnumItem`` types.

- ``errors``
  The exception taxonomy raised by validation and lookups.

- ``diagnostics``
  Warning records collected while defining enumerators.

Design goals:

- Keep this package free of registry state and side effects.
- Depend on nothing but the standard library (and ``yachalk`` for colors).
"""

from __future__ import annotations
