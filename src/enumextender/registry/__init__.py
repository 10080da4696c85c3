# topmark:header:start
#
#   project      : EnumExtender
#   file         : __init__.py
#   file_relpath : src/enumextender/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumeration registry, validation policy and standard providers.

Most users should import from here:

```python
from enumextender.registry import get_registry
registry = get_registry()
registry.create("Difficulty", ["Easy", "Normal", "Hard"])
```

Independent registries (e.g. in tests) take their flags and provider explicitly:

```python
from enumextender.config import EnumFlags
from enumextender.registry import EnumRegistry, IntEnumProvider
registry = EnumRegistry(EnumFlags(allow_empty=True), provider=IntEnumProvider([MyIntEnum]))
```
"""

from __future__ import annotations

from .policy import (
    RESERVED_ENUM_NAMES,
    RESERVED_ITEM_NAME,
    Definition,
    ValidationPolicy,
    is_identifier,
    is_reserved_item_name,
    is_reserved_name,
)
from .registry import EnumRegistry, configure_registry, get_registry, reset_registry
from .standard import (
    IntEnumProvider,
    StandardEnumProvider,
    adapt_int_enum,
    get_standard_provider,
    probe,
)

__all__ = [
    "RESERVED_ENUM_NAMES",
    "RESERVED_ITEM_NAME",
    "Definition",
    "EnumRegistry",
    "IntEnumProvider",
    "StandardEnumProvider",
    "ValidationPolicy",
    "adapt_int_enum",
    "configure_registry",
    "get_registry",
    "get_standard_provider",
    "is_identifier",
    "is_reserved_item_name",
    "is_reserved_name",
    "probe",
    "reset_registry",
]
