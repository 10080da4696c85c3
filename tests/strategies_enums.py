# topmark:header:start
#
#   project      : EnumExtender
#   file         : strategies_enums.py
#   file_relpath : tests/strategies_enums.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for enumerator names and item mappings.

Generated names always satisfy the identifier pattern and never collide with
reserved registry names or the test provider's standard enumerations.
"""

from __future__ import annotations

from hypothesis import strategies as st

from enumextender.registry import is_reserved_item_name, is_reserved_name

# Names of the standard enumerations exposed by `tests.conftest.make_provider()`.
STANDARD_NAMES: frozenset[str] = frozenset({"Color", "Temperature"})

_FIRST = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
_REST = _FIRST + "0123456789"

identifiers: st.SearchStrategy[str] = st.builds(
    lambda head, tail: head + tail,
    st.sampled_from(_FIRST),
    st.text(alphabet=_REST, max_size=12),
)

enum_names: st.SearchStrategy[str] = identifiers.filter(
    lambda n: not is_reserved_name(n) and n not in STANDARD_NAMES
)

item_names: st.SearchStrategy[str] = identifiers.filter(lambda n: not is_reserved_item_name(n))


@st.composite
def item_mappings(draw: st.DrawFn, *, min_size: int = 1, max_size: int = 20) -> dict[int, str]:
    """Draw a ``{value: name}`` mapping with unique values and unique names."""
    values: list[int] = draw(
        st.lists(
            st.integers(min_value=0, max_value=10_000),
            min_size=min_size,
            max_size=max_size,
            unique=True,
        )
    )
    names: list[str] = draw(
        st.lists(item_names, min_size=len(values), max_size=len(values), unique=True)
    )
    return dict(zip(values, names))
